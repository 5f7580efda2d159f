"""Common base for the game's user-interface screens."""

from __future__ import annotations

import dataclasses
from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from molecularity.events import Event, EventId, EventSystem, Listener, default_event_system
from molecularity.text_loader import TextLoader
from molecularity.widgets.base import MouseData, Vec2

Rgba = tuple[float, float, float, float]

BLACK: Rgba = (0.0, 0.0, 0.0, 1.0)
WHITE: Rgba = (1.0, 1.0, 1.0, 1.0)


@dataclass
class TextToDraw:
    """A string queued for drawing at a screen position."""

    text: str = ""
    position: Vec2 = (0.0, 0.0)
    colour: Rgba = BLACK


class Screen(Listener):
    """A screen that follows the window size and the latest mouse and key input."""

    subscriptions: ClassVar[tuple[EventId, ...]] = ()

    def __init__(self, events: EventSystem | None = None,
                 text_loader: TextLoader | None = None,
                 screen_size: Vec2 = (0.0, 0.0)) -> None:
        self.events = events if events is not None else default_event_system()
        self.text_loader = (text_loader if text_loader is not None
                            else TextLoader(events=self.events))
        self.size_of_screen: Vec2 = screen_size
        self.mouse = MouseData()
        self.key = 0
        self.text_map: dict[str, str] = {}
        for event_id in self.subscriptions:
            self.events.add_client(event_id, self)

    def close(self) -> None:
        """Stop receiving events."""
        for event_id in self.subscriptions:
            self.events.remove_client(event_id, self)

    def __enter__(self) -> "Screen":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def text(self, name: str) -> str:
        """Loaded text for ``name``; empty if there is none."""
        return self.text_map.get(name, "")

    def handle_event(self, event: Event) -> None:
        """Record input and window-size events."""
        if event.event_id is EventId.UI_KEY_INPUT:
            self.key = int(event.data)
        elif event.event_id is EventId.UI_MOUSE_INPUT:
            self.mouse = dataclasses.replace(event.data)
        elif event.event_id is EventId.WINDOW_SIZE_CHANGE:
            width, height = event.data
            self.size_of_screen = (float(width), float(height))

    @abstractmethod
    def update(self, dt: float) -> None:
        """Lay out the screen for this frame."""

    @abstractmethod
    def load_text(self) -> None:
        """Read the screen's text in the current language."""