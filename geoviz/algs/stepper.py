"""Algorithm-as-stepper contract and the driver that materialises traces.

A stepper turns a batch geometric algorithm into an explicit state machine:

``first_state`` builds the initial snapshot from raw points,
``next_state`` performs one atomic unit of work and describes it with an
action, and ``is_final`` reports when no work remains. States are frozen
snapshots, so a recorded trace can be replayed from any position.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Generic, Iterator, Optional, Sequence, Tuple, TypeVar

from geoviz.algs.geometry import log

StateT = TypeVar("StateT")
ActionT = TypeVar("ActionT")


class Stepper(ABC, Generic[StateT, ActionT]):
    """Base class for every stepwise algorithm."""

    name: ClassVar[str] = "stepper"

    @abstractmethod
    def first_state(self, points: Sequence[Sequence[float]]) -> StateT:
        ...

    @abstractmethod
    def next_state(self, state: StateT) -> Tuple[StateT, ActionT]:
        ...

    @abstractmethod
    def is_final(self, state: StateT) -> bool:
        ...

    def _ensure_not_final(self, state: StateT) -> None:
        if self.is_final(state):
            raise RuntimeError(f"{self.name}: next_state called on a final state")


@dataclass(frozen=True)
class Trace(Generic[StateT, ActionT]):
    """Ordered states and the actions between them (``len(states) == len(actions) + 1``)."""

    algorithm: str
    states: Tuple[StateT, ...]
    actions: Tuple[ActionT, ...]

    @property
    def first(self) -> StateT:
        return self.states[0]

    @property
    def final(self) -> StateT:
        return self.states[-1]

    def __len__(self) -> int:
        return len(self.actions)


def iter_steps(
    stepper: Stepper[StateT, ActionT],
    state: StateT,
) -> Iterator[Tuple[StateT, ActionT]]:
    """Yield ``(next_state, action)`` until the stepper reports a final state."""
    while not stepper.is_final(state):
        state, action = stepper.next_state(state)
        yield state, action


def run(
    stepper: Stepper[StateT, ActionT],
    points: Sequence[Sequence[float]],
    *,
    max_steps: Optional[int] = None,
) -> Trace[StateT, ActionT]:
    """Drive ``stepper`` from ``first_state(points)`` to termination."""
    first = stepper.first_state(points)
    states = [first]
    actions = []
    for state, action in iter_steps(stepper, first):
        states.append(state)
        actions.append(action)
        log(f"[{stepper.name}] step {len(actions)}: {action.kind}")
        if max_steps is not None and len(actions) > max_steps:
            raise RuntimeError(f"{stepper.name}: exceeded {max_steps} steps")
    log(f"[{stepper.name}] finished after {len(actions)} steps")
    return Trace(algorithm=stepper.name, states=tuple(states), actions=tuple(actions))


__all__ = ["Stepper", "Trace", "iter_steps", "run"]
