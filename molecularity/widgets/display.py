"""Widgets that only display: a coloured block, an image and an energy bar."""

from __future__ import annotations

from typing import Any

from molecularity.widgets.base import Vec2, Widget

TEXTURE_ROOT = "Resources\\Textures\\"


class ColourBlock(Widget):
    """A solid rectangle of one colour."""

    def __init__(self, colour: Any = None, size: Vec2 = (0.0, 0.0),
                 pos: Vec2 = (0.0, 0.0), alpha: float = 1.0) -> None:
        super().__init__()
        self.colour: Any = None
        self.update(colour, size, pos, alpha)

    def update(self, colour: Any, size: Vec2, pos: Vec2, alpha: float) -> bool:
        """Set colour, geometry and transparency."""
        self.colour = colour
        self.size = size
        self.pos = pos
        self.alpha_factor = alpha
        return True


class ImageWidget(Widget):
    """A textured rectangle; the texture is reloaded only when it changes."""

    def __init__(self) -> None:
        super().__init__()
        self.texture_file = ""

    def update(self, texture: str, size: Vec2, pos: Vec2) -> bool:
        """Place the image; ``texture`` is relative to the texture directory."""
        path = TEXTURE_ROOT + texture
        if path != self.texture_file:
            self.texture_file = path
            self.update_texture = True
        self.size = size
        self.pos = pos
        self.alpha_factor = 1.0
        return False

    def take_texture_update(self) -> str | None:
        """The texture path if it needs reloading, clearing the request."""
        if not self.update_texture:
            return None
        self.update_texture = False
        return self.texture_file


class EnergyBar(Widget):
    """A bar filled to a percentage, drawn over a background with a frame."""

    def __init__(self) -> None:
        super().__init__()
        self.background: Any = None
        self.bar: Any = None
        self.front: Any = None
        self.current_fraction = 0.0
        self.current_percent = 0

    def update(self, background: Any, bar: Any, front: Any, size: Vec2,
               pos: Vec2, fraction: float) -> None:
        """Set the textures, geometry and fill level (``fraction`` in percent)."""
        self.background = background
        self.bar = bar
        self.front = front
        self.size = size
        self.pos = pos
        self.current_fraction = fraction / 100
        self.current_percent = int(fraction)

    @property
    def fill_width(self) -> float:
        """Width of the filled part of the bar."""
        return self.size[0] * self.current_fraction