"""A drop-down list choosing one of a few options."""

from __future__ import annotations

import enum
from typing import Any, Callable, Sequence

from molecularity.widgets.base import MouseData, Vec2, Widget
from molecularity.widgets.button import Button

MAX_OPTIONS = 10
FLAG_MAX = 20
"""Frames to wait after a toggle before the arrow button acts again."""


class DropState(enum.Enum):
    DOWN = enum.auto()
    UP = enum.auto()


class DropDown(Widget):
    """A selected value with an arrow button that opens the option list."""

    def __init__(self, on_press: Callable[[], None] | None = None) -> None:
        super().__init__()
        self.options: list[Any] = []
        self.selected = 0
        self.data_selected: Any = None
        self.background: Any = None
        self.text_colour: Any = None
        self.flag = FLAG_MAX
        self.drop_button = Button(on_press)
        self.list_buttons = [Button(on_press) for _ in range(MAX_OPTIONS)]
        self.state = DropState.UP

    def is_down(self) -> bool:
        """Whether the option list is open."""
        return self.state is DropState.DOWN

    def _tick_toggle(self, new_state: DropState) -> None:
        if self.drop_button.is_pressed and self.flag == FLAG_MAX:
            self.state = new_state
            self.flag = 0
        elif self.flag < FLAG_MAX:
            self.flag += 1

    def update(self, options: Sequence[Any], size: Vec2, pos: Vec2,
               backgrounds: Sequence[Any], button_images: Sequence[Any],
               text_colour: Any, current: Any, mouse: MouseData) -> None:
        """Lay out the list for this frame and handle clicks on it."""
        if not options:
            raise ValueError("a drop-down needs at least one option")
        if len(options) > MAX_OPTIONS:
            raise ValueError(f"at most {MAX_OPTIONS} options are supported")

        self.background = backgrounds[2]
        self.size = size
        self.pos = pos
        self.options = list(options)
        self.text_colour = text_colour
        self.drop_button.update("", button_images, (size[1], size[1]),
                                (pos[0] + size[0], pos[1]), text_colour, mouse)

        for index, option in enumerate(self.options):
            if option == current:
                self.selected = index

        if self.state is DropState.DOWN:
            y = pos[1] + size[1]
            for index, (option, button) in enumerate(zip(self.options, self.list_buttons)):
                if button.update(option, backgrounds, size, (pos[0], y),
                                 text_colour, mouse):
                    self.selected = index
                    self.state = DropState.UP
                    self.flag = 0
                y += size[1] + 1
            self._tick_toggle(DropState.UP)
        else:
            self._tick_toggle(DropState.DOWN)

        self.data_selected = self.options[self.selected]