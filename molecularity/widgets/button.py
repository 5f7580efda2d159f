"""A clickable button with one texture per interaction state."""

from __future__ import annotations

import enum
from typing import Any, Callable, Sequence

from molecularity.widgets.base import MouseData, Vec2, Widget, _inside


class ButtonState(enum.IntEnum):
    """Interaction state; the value indexes the button's texture list."""

    PRESSED = 0
    HOVER = 1
    DEFAULT = 2


class Button(Widget):
    """Button that reports a press while the left mouse button is held on it."""

    def __init__(self, on_press: Callable[[], None] | None = None) -> None:
        super().__init__()
        self.on_press = on_press
        self.text = ""
        self.texture: Any = None
        self.text_colour: Any = None
        self.is_pressed = False
        self.state = ButtonState.DEFAULT

    def update(self, text: str, textures: Sequence[Any], size: Vec2, pos: Vec2,
               text_colour: Any, mouse: MouseData) -> bool:
        """Lay out the button for this frame; True if it is being pressed."""
        self.text = text
        self.size = size
        self.pos = pos
        self.text_colour = text_colour

        if _inside(mouse.pos, pos, size):
            self.state = ButtonState.PRESSED if mouse.l_press else ButtonState.HOVER
        else:
            self.state = ButtonState.DEFAULT

        self.texture = textures[self.state]
        self.is_pressed = self.state is ButtonState.PRESSED
        if self.is_pressed and self.on_press is not None:
            self.on_press()
        return self.is_pressed