"""Shared state for on-screen widgets and the mouse snapshot they react to."""

from __future__ import annotations

from dataclasses import dataclass

Vec2 = tuple[float, float]


@dataclass
class MouseData:
    """Mouse position in screen pixels and which buttons are held."""

    pos: Vec2 = (0.0, 0.0)
    l_press: bool = False
    r_press: bool = False
    m_press: bool = False


class Widget:
    """A rectangle on screen with a transparency factor."""

    def __init__(self, size: Vec2 = (0.0, 0.0), pos: Vec2 = (0.0, 0.0),
                 alpha_factor: float = 1.0) -> None:
        self.size = size
        self.pos = pos
        self.alpha_factor = alpha_factor
        self.update_texture = True

    def contains(self, point: Vec2) -> bool:
        """Whether ``point`` lies inside the widget, edges included."""
        return _inside(point, self.pos, self.size)


def _inside(point: Vec2, pos: Vec2, size: Vec2, x_margin: float = 0.0) -> bool:
    x, y = point
    return (pos[0] <= x <= pos[0] + size[0] + x_margin
            and pos[1] <= y <= pos[1] + size[1])