"""Utility primitives for pygame visualization scenes."""

from __future__ import annotations

from typing import Dict, Iterable, Sequence, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - pygame should be installed by demos
    raise ImportError("pygame is required for the visualization renderer") from exc

RGB = Tuple[int, int, int]

BACKGROUND_COLOR = (18, 18, 24)
BORDER_COLOR = (60, 60, 72)

SHAPE_COLORS: Dict[str, RGB] = {
    "white": (230, 230, 230),
    "blue": (90, 160, 255),
    "green": (70, 200, 110),
    "yellow": (240, 210, 60),
    "red": (220, 70, 70),
}

FILL_ALPHA = 60
POINT_RADIUS = 4
LINE_WIDTH = 2
MARGIN_RATIO = 0.05


def resolve_color(name: object) -> RGB:
    return SHAPE_COLORS.get(str(name), SHAPE_COLORS["white"])


class BaseScene:
    """Coordinate transforms and shape drawing for the pygame renderer.

    World coordinates use a uniform scale on both axes with y pointing up, so
    angles and distances look the way the algorithms see them.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.margin = int(min(width, height) * MARGIN_RATIO)
        self.x_min = 0.0
        self.x_max = 1.0
        self.y_min = 0.0
        self.y_max = 1.0
        self.scale = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.set_scene(x_min=0.0, x_max=1.0, y_min=0.0, y_max=1.0)

    # ------------------------------------------------------------------ transforms
    def set_scene(self, *, x_min: float, x_max: float, y_min: float, y_max: float) -> None:
        if x_min >= x_max:
            x_max = x_min + 1.0
        if y_min >= y_max:
            y_max = y_min + 1.0
        self.x_min, self.x_max = x_min, x_max
        self.y_min, self.y_max = y_min, y_max

        usable_w = self.width - 2 * self.margin
        usable_h = self.height - 2 * self.margin
        self.scale = min(usable_w / (x_max - x_min), usable_h / (y_max - y_min))
        self.offset_x = self.margin + (usable_w - self.scale * (x_max - x_min)) / 2.0
        self.offset_y = self.margin + (usable_h - self.scale * (y_max - y_min)) / 2.0

    def world_to_screen(self, x: float, y: float) -> Tuple[int, int]:
        px = self.offset_x + (x - self.x_min) * self.scale
        py = self.height - (self.offset_y + (y - self.y_min) * self.scale)
        px = max(0, min(self.width - 1, int(round(px))))
        py = max(0, min(self.height - 1, int(round(py))))
        return px, py

    # ------------------------------------------------------------------ drawing helpers
    def draw_background(self, surface: "pygame.Surface") -> None:
        surface.fill(BACKGROUND_COLOR)
        top_left = self.world_to_screen(self.x_min, self.y_max)
        bottom_right = self.world_to_screen(self.x_max, self.y_min)
        rect = pygame.Rect(top_left, (bottom_right[0] - top_left[0], bottom_right[1] - top_left[1]))
        pygame.draw.rect(surface, BORDER_COLOR, rect, 1)

    def draw_point(self, surface: "pygame.Surface", x: float, y: float, color: RGB) -> None:
        pygame.draw.circle(surface, color, self.world_to_screen(x, y), POINT_RADIUS)

    def draw_line(
        self,
        surface: "pygame.Surface",
        a: Tuple[float, float],
        b: Tuple[float, float],
        color: RGB,
        width: int = LINE_WIDTH,
    ) -> None:
        pygame.draw.line(surface, color, self.world_to_screen(*a), self.world_to_screen(*b), width)

    def draw_path(
        self,
        surface: "pygame.Surface",
        points: Sequence[Tuple[float, float]],
        color: RGB,
        closed: bool,
    ) -> None:
        screen_points = [self.world_to_screen(float(x), float(y)) for x, y in points]
        if not screen_points:
            return
        if len(screen_points) == 1:
            pygame.draw.circle(surface, color, screen_points[0], POINT_RADIUS)
            return
        pygame.draw.lines(surface, color, closed and len(screen_points) > 2, screen_points, LINE_WIDTH)

    def draw_vline(self, surface: "pygame.Surface", x: float, color: RGB) -> None:
        self.draw_line(surface, (x, self.y_min), (x, self.y_max), color, 1)

    def fill_rect(
        self,
        surface: "pygame.Surface",
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: RGB,
    ) -> None:
        """Translucent fill of the world rectangle, clipped to the scene."""
        left, top = self.world_to_screen(min(x1, x2), max(y1, y2))
        right, bottom = self.world_to_screen(max(x1, x2), min(y1, y2))
        w, h = max(1, right - left), max(1, bottom - top)
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill((*color, FILL_ALPHA))
        surface.blit(overlay, (left, top))

    def draw_shapes(self, surface: "pygame.Surface", shapes: Iterable[Dict[str, object]]) -> None:
        # Fills first so outlines and points stay visible on top of them.
        ordered = sorted(shapes, key=lambda s: 0 if s.get("type") in ("band", "rect") else 1)
        for shape in ordered:
            self.draw_shape(surface, shape)

    def draw_shape(self, surface: "pygame.Surface", shape: Dict[str, object]) -> None:
        kind = shape.get("type")
        color = resolve_color(shape.get("color"))
        if kind == "point":
            self.draw_point(surface, float(shape["x"]), float(shape["y"]), color)
        elif kind == "line":
            a = (float(shape["x1"]), float(shape["y1"]))
            b = (float(shape["x2"]), float(shape["y2"]))
            self.draw_line(surface, a, b, color)
        elif kind == "path":
            self.draw_path(surface, shape["points"], color, bool(shape.get("closed", False)))
        elif kind == "vline":
            self.draw_vline(surface, float(shape["x"]), color)
        elif kind == "band":
            self.fill_rect(surface, float(shape["x1"]), self.y_min, float(shape["x2"]), self.y_max, color)
        elif kind == "rect":
            self.fill_rect(
                surface,
                float(shape["x1"]),
                float(shape["y1"]),
                float(shape["x2"]),
                float(shape["y2"]),
                color,
            )
        else:
            print(f"[Scene] Unhandled shape type: {kind}")


__all__ = [
    "BaseScene",
    "resolve_color",
    "SHAPE_COLORS",
    "BACKGROUND_COLOR",
    "BORDER_COLOR",
    "FILL_ALPHA",
]
