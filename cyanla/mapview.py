"""Company floor map: department areas, hit testing, highlighting and routes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

MIN_ZOOM = 0.5
MAX_ZOOM = 3.0
MAP_WIDTH = 800
MAP_HEIGHT = 600
ROUTE_ANIMATION_STEPS = 20


@dataclass(frozen=True)
class Rect:
    """An integer rectangle whose right and bottom edges are x+width-1 and y+height-1."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    def contains(self, x: int, y: int) -> bool:
        """Return whether the point lies inside the rectangle, edges included."""
        if self.width <= 0 or self.height <= 0:
            return False
        return self.x <= x <= self.right and self.y <= y <= self.bottom

    def center(self) -> tuple[int, int]:
        return (self.x + self.right) // 2, (self.y + self.bottom) // 2


@dataclass(frozen=True)
class Department:
    """A place on the map with its visitor information."""

    name: str
    description: str
    location: str
    hours: str
    phone: str
    rect: Rect
    color: str
    floor: str
    building: str = ""


class CompanyMap:
    """State of the interactive map: zoom, highlight, hover and route."""

    def __init__(self, departments: Optional[Mapping[str, Department]] = None):
        self.departments: dict[str, Department] = dict(departments or {})
        self.zoom_level = 1.0
        self.highlighted = ""
        self.hovered = ""
        self.pulsing = False
        self.pulse_opacity = 1.0
        self.route_from = ""
        self.route_to = ""
        self.route_points: list[tuple[int, int]] = []
        self.route_animating = False
        self.route_step = 0

    @property
    def size_hint(self) -> tuple[int, int]:
        return int(MAP_WIDTH * self.zoom_level), int(MAP_HEIGHT * self.zoom_level)

    def set_zoom(self, zoom: float) -> float:
        """Set the zoom level, clamped to the supported range, and return it."""
        self.zoom_level = min(max(zoom, MIN_ZOOM), MAX_ZOOM)
        return self.zoom_level

    def department_at(self, x: float, y: float) -> Optional[str]:
        """Return the department under a widget position, scaled by the zoom."""
        map_x = int(x / self.zoom_level)
        map_y = int(y / self.zoom_level)
        return next(
            (
                name
                for name in sorted(self.departments)
                if self.departments[name].rect.contains(map_x, map_y)
            ),
            None,
        )

    def highlight(self, name: str) -> None:
        self.highlighted = name
        if name:
            self.pulsing = True
        else:
            self.pulsing = False
            self.pulse_opacity = 1.0

    def clear_highlight(self) -> None:
        self.highlighted = ""
        self.hovered = ""
        self.pulsing = False

    def show_route(self, start: str, end: str) -> list[tuple[int, int]]:
        """Plan an L-shaped route between two departments' centres."""
        self.route_from = start
        self.route_to = end
        if start in self.departments and end in self.departments:
            begin = self.departments[start].rect.center()
            finish = self.departments[end].rect.center()
            self.route_points = [begin, (begin[0], finish[1]), finish]
            self.route_animating = True
        return list(self.route_points)

    def advance_route_animation(self) -> int:
        self.route_step = (self.route_step + 1) % ROUTE_ANIMATION_STEPS
        return self.route_step

    def tooltip(self, name: str) -> str:
        try:
            department = self.departments[name]
        except KeyError:
            raise KeyError(f"unknown department: {name!r}") from None
        return f"{department.name}\n{department.location}\n开放时间: {department.hours}"