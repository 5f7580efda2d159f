"""A box that captures a single key press for a key binding."""

from __future__ import annotations

from typing import Any

from molecularity.keys import KEY_NAMES, _check_code
from molecularity.widgets.base import MouseData, Vec2, Widget, _inside


class InputBox(Widget):
    """Click to select, then the next key pressed becomes the binding."""

    def __init__(self) -> None:
        super().__init__()
        self.background: Any = None
        self.text_colour: Any = None
        self.key = 0
        self.current_text = ""
        self.selected = False

    def update(self, size: Vec2, pos: Vec2, background: Any, text_colour: Any,
               key: int, mouse: MouseData) -> None:
        """Lay out the box; while selected, take ``key`` (0 means none)."""
        self.size = size
        self.pos = pos
        self.background = background
        self.text_colour = text_colour
        if mouse.l_press and _inside(mouse.pos, pos, size):
            self.selected = True
            self.current_text = ""
        if self.selected:
            self.set_key(key)

    def set_key(self, key: int) -> None:
        """Bind ``key`` and show its name; 0 leaves the box unchanged."""
        _check_code(key)
        if key in KEY_NAMES:
            self.current_text = KEY_NAMES[key]
        elif key != 0:
            self.current_text = chr(key)
        else:
            return
        self.selected = False
        self.key = key