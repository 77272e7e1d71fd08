"""Pygame renderer that plays back geometry event streams."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

try:
    import pygame
except ImportError as exc:  # pragma: no cover - ensure pygame is available
    raise ImportError("pygame is required for the visualization renderer") from exc

from geoviz.visualization.render.base_scene import BaseScene

HUD_COLOR = (230, 230, 230)
HUD_ERROR_COLOR = (220, 70, 70)


class PygameRenderer:
    """Step through a trace one frame at a time.

    Frames carry every shape they show, so seeking backwards jumps straight to
    an earlier frame event instead of replaying the stream from the start.
    """

    SPEED_LEVELS = (0.5, 1.0, 1.5, 2.0, 3.0)
    FRAME_INTERVAL = 0.6  # seconds per frame at speed 1.0

    def __init__(self, width: int = 900, height: int = 900, fps: int = 60) -> None:
        self.width = width
        self.height = height
        self.fps = fps
        pygame.font.init()
        self.font = pygame.font.SysFont("consolas", 18)
        self.scene = BaseScene(width, height)
        self.events: List[Dict[str, object]] = []
        self.frame_cursors: List[int] = []
        self.frame_positions: Dict[int, int] = {}
        self.cursor = 0
        self.frame_pos = -1
        self.autoplay = True
        self.speed_index = 1
        self.elapsed = 0.0
        self.running = False
        self.algorithm_name = "unknown"
        self.algorithm_case: Optional[str] = None
        self.current_shapes: List[Dict[str, object]] = []
        self.frame_index: Optional[int] = None
        self.frame_step = 0
        self.frame_label = ""
        self.completed = False
        self.error_text: Optional[str] = None

    @property
    def total_events(self) -> int:
        return len(self.events)

    @property
    def total_frames(self) -> int:
        return len(self.frame_cursors)

    # ------------------------------------------------------------------ public API
    def load_events(self, events: List[Dict[str, object]]) -> None:
        self.events = list(events)
        self.frame_cursors = [idx for idx, ev in enumerate(self.events) if ev.get("type") == "frame"]
        self.frame_positions = {cursor: pos for pos, cursor in enumerate(self.frame_cursors)}
        self._restart()

    def run(self, autoplay: bool = True) -> None:
        if not self.events:
            raise RuntimeError("No events loaded. Call load_events() first.")

        self.autoplay = autoplay
        pygame.display.init()
        pygame.display.set_caption(f"Geometry Visualization: {self.algorithm_name}")
        screen = pygame.display.set_mode((self.width, self.height))
        clock = pygame.time.Clock()
        keys = self._key_bindings()
        self.running = True

        while self.running:
            dt = clock.tick(self.fps) / 1000.0
            for py_event in pygame.event.get():
                if py_event.type == pygame.QUIT:
                    self.running = False
                elif py_event.type == pygame.KEYDOWN and py_event.key in keys:
                    keys[py_event.key]()
            if self.autoplay and not self.completed:
                self._tick(dt)
            self._draw(screen)
            pygame.display.flip()

        pygame.display.quit()

    def process_all_events(self) -> None:
        """Consume the rest of the stream without opening a window."""
        self._advance_to(self.total_events)

    def step_once(self) -> None:
        """Show the next frame, or consume the closing events after the last one."""
        nxt = self.frame_pos + 1
        if nxt < self.total_frames:
            self._advance_to(self.frame_cursors[nxt] + 1)
        else:
            self.process_all_events()

    def step_back(self) -> None:
        if self.frame_pos > 0:
            self._seek(self.frame_pos - 1)

    def jump_to_start(self) -> None:
        if self.frame_cursors:
            self._seek(0)
        else:
            self._restart()

    def jump_to_end(self) -> None:
        self.process_all_events()

    # ------------------------------------------------------------------ playback
    def _restart(self) -> None:
        self.cursor = 0
        self.frame_pos = -1
        self.elapsed = 0.0
        self.algorithm_name = "unknown"
        self.algorithm_case = None
        self.current_shapes = []
        self.frame_index = None
        self.frame_step = 0
        self.frame_label = ""
        self.completed = False
        self.error_text = None
        # Scene setup plus the first frame.
        self._advance_to(self.frame_cursors[0] + 1 if self.frame_cursors else self.total_events)

    def _seek(self, pos: int) -> None:
        target = self.frame_cursors[pos]
        self.cursor = target
        self.completed = False
        self.error_text = None
        self._advance_to(target + 1)

    def _advance_to(self, stop: int) -> None:
        while self.cursor < stop:
            event = self.events[self.cursor]
            self.cursor += 1
            self._apply_event(event)
        if self.cursor >= self.total_events:
            self.completed = True

    def _tick(self, dt: float) -> None:
        interval = self.FRAME_INTERVAL / self.SPEED_LEVELS[self.speed_index]
        self.elapsed += dt
        while self.elapsed >= interval and not self.completed:
            self.elapsed -= interval
            self.step_once()

    def _apply_event(self, event: Dict[str, object]) -> None:
        event_type = event.get("type")
        if event_type == "set_scene":
            self.scene.set_scene(
                x_min=float(event["x_min"]),
                x_max=float(event["x_max"]),
                y_min=float(event["y_min"]),
                y_max=float(event["y_max"]),
            )
        elif event_type == "algo_info":
            self.algorithm_name = str(event.get("name", "unknown"))
            case = event.get("case")
            self.algorithm_case = None if case is None else str(case)
        elif event_type == "frame":
            self.frame_pos = self.frame_positions[self.cursor - 1]
            self.current_shapes = list(event.get("shapes", []))
            self.frame_index = int(event.get("index", self.frame_pos))
            self.frame_step = int(event.get("step", 0))
            self.frame_label = str(event.get("label", ""))
        elif event_type == "error":
            self.error_text = str(event.get("text", ""))
        elif event_type == "done":
            self.completed = True
        else:
            print(f"[Renderer] Unhandled event type: {event_type}")

    # ------------------------------------------------------------------ input
    def _key_bindings(self) -> Dict[int, Callable[[], None]]:
        def manual(action: Callable[[], None]) -> Callable[[], None]:
            def wrapped() -> None:
                self.autoplay = False
                action()

            return wrapped

        return {
            pygame.K_ESCAPE: self._quit,
            pygame.K_q: self._quit,
            pygame.K_SPACE: self._toggle_autoplay,
            pygame.K_RIGHT: manual(self.step_once),
            pygame.K_LEFT: manual(self.step_back),
            pygame.K_HOME: manual(self.jump_to_start),
            pygame.K_END: manual(self.jump_to_end),
            pygame.K_UP: lambda: self._change_speed(1),
            pygame.K_DOWN: lambda: self._change_speed(-1),
            pygame.K_r: self._restart,
        }

    def _quit(self) -> None:
        self.running = False

    def _toggle_autoplay(self) -> None:
        self.autoplay = not self.autoplay

    def _change_speed(self, delta: int) -> None:
        self.speed_index = max(0, min(len(self.SPEED_LEVELS) - 1, self.speed_index + delta))

    # ------------------------------------------------------------------ drawing
    def _draw(self, surface: "pygame.Surface") -> None:
        self.scene.draw_background(surface)
        self.scene.draw_shapes(surface, self.current_shapes)
        self._draw_hud(surface)

    def _draw_hud(self, surface: "pygame.Surface") -> None:
        shown = 0 if self.frame_index is None else self.frame_index + 1
        lines = [
            (f"{self.algorithm_name}  [{self.algorithm_case or 'n/a'}]", HUD_COLOR),
            (f"frame {shown}/{self.total_frames}  step {self.frame_step}  {self.frame_label}", HUD_COLOR),
            (
                f"autoplay {'on' if self.autoplay else 'off'}  x{self.SPEED_LEVELS[self.speed_index]:.1f}"
                + ("  done" if self.completed else ""),
                HUD_COLOR,
            ),
        ]
        if self.error_text:
            lines.append((f"error: {self.error_text}", HUD_ERROR_COLOR))

        y = 10
        for text, color in lines:
            rendered = self.font.render(text, True, color)
            surface.blit(rendered, (10, y))
            y += rendered.get_height() + 2


__all__ = ["PygameRenderer"]
