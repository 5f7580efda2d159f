"""Horizontal value slider and vertical page scroll bar."""

from __future__ import annotations

from typing import Any

from molecularity.widgets.base import MouseData, Vec2, Widget, _inside


class DataSlider(Widget):
    """Slider choosing a whole percentage from 0 to 100."""

    def __init__(self) -> None:
        super().__init__()
        self.bar: Any = None
        self.slider: Any = None
        self.px = 0.0
        self.data = 0

    def update(self, size: Vec2, pos: Vec2, start: int, bar: Any, slider: Any,
               mouse: MouseData) -> None:
        """Place the knob at ``start`` percent, or where it is being dragged."""
        self.size = size
        self.pos = pos
        self.bar = bar
        self.slider = slider
        self.px = (float(start) / 100) * size[0]
        if mouse.l_press and _inside(mouse.pos, pos, size, x_margin=1.0):
            self.px = mouse.pos[0] - pos[0]
        self.data = int((self.px / size[0]) * 100)


class PageSlider(Widget):
    """Scroll bar mapping the knob offset onto a page of ``page_size``."""

    def __init__(self, page_size: float = 0.0) -> None:
        super().__init__()
        self.bar: Any = None
        self.slider: Any = None
        self.py = 0.0
        self.page_pos = 0.0
        self.page_size = page_size

    def update(self, size: Vec2, pos: Vec2, start: int, bar: Any, slider: Any,
               mouse: MouseData) -> None:
        """Move the knob if dragged and recompute the page offset."""
        self.size = size
        self.pos = pos
        self.bar = bar
        self.slider = slider
        if mouse.l_press and _inside(mouse.pos, pos, size, x_margin=1.0):
            self.py = mouse.pos[1] - pos[1]
        self.page_pos = self.page_size * (self.py / size[1])