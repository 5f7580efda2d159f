"""Deferred publish/subscribe event system shared by the game's subsystems."""

from __future__ import annotations

import enum
import functools
import logging
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Any, Protocol

_log = logging.getLogger(__name__)


class EventId(enum.Enum):
    """Every kind of event that can be raised in the game."""

    # HUD
    TOOL_MODE = enum.auto()
    CUBE_PICKUP = enum.auto()
    IS_DISS_CUBE = enum.auto()
    # UI input
    UI_MOUSE_INPUT = enum.auto()
    UI_KEY_INPUT = enum.auto()
    # Tutorial
    UI_TUTORIAL_END = enum.auto()
    # UI camera
    WORLD_ORTH_MATRIX = enum.auto()
    # UI end level
    SET_NEXT_LEVEL = enum.auto()
    SET_CURRENT_LEVEL = enum.auto()
    # Game
    GAME_PAUSE = enum.auto()
    GAME_UNPAUSE = enum.auto()
    GAME_SETTINGS = enum.auto()
    GAME_LEVEL_CHANGE = enum.auto()
    GAME_END_LEVEL = enum.auto()
    # Utility
    WINDOW_SIZE_CHANGE = enum.auto()
    QUIT_GAME = enum.auto()
    UPDATE_SETTINGS = enum.auto()
    REMOVE_UI_ITEM = enum.auto()
    SHOW_CURSOR = enum.auto()
    HIDE_CURSOR = enum.auto()
    CHANGE_LANGUAGE = enum.auto()
    # Multi-tool
    CHANGE_TOOL = enum.auto()
    CHANGE_TOOL_OPTION = enum.auto()
    CHANGE_TOOL_OPTION_UP = enum.auto()
    CHANGE_TOOL_OPTION_DOWN = enum.auto()
    CHANGE_CUBE = enum.auto()
    CHANGE_ALL_CUBE = enum.auto()


@dataclass(frozen=True)
class Event:
    """An event identifier with an optional payload."""

    event_id: EventId
    data: Any = None


class Listener(ABC):
    """Base for objects that receive events from an :class:`EventSystem`."""

    @abstractmethod
    def handle_event(self, event: Event) -> None:
        """React to an event the listener is registered for."""


class _Handler(Protocol):
    def handle_event(self, event: Event) -> None: ...


class EventSystem:
    """Keeps subscriptions per event and a queue of events waiting to be sent."""

    def __init__(self) -> None:
        self._clients: dict[EventId, list[_Handler]] = {}
        self._queue: deque[Event] = deque()

    def add_client(self, event_id: EventId, client: _Handler) -> None:
        """Subscribe ``client`` to ``event_id``; duplicates are ignored."""
        if self.is_registered(event_id, client):
            _log.debug("Duplicate client for %s ignored", event_id)
            return
        self._clients.setdefault(event_id, []).append(client)

    def is_registered(self, event_id: EventId, client: _Handler) -> bool:
        return any(c is client for c in self._clients.get(event_id, ()))

    def remove_client(self, event_id: EventId, client: _Handler) -> None:
        """Unsubscribe ``client`` from one event."""
        clients = self._clients.get(event_id)
        if not clients:
            return
        self._clients[event_id] = [c for c in clients if c is not client]
        if not self._clients[event_id]:
            del self._clients[event_id]

    def remove_all(self, client: _Handler) -> None:
        """Unsubscribe ``client`` from every event."""
        for event_id in list(self._clients):
            self.remove_client(event_id, client)

    def send_event(self, event: Event) -> None:
        """Deliver ``event`` immediately to its subscribers."""
        for client in list(self._clients.get(event.event_id, ())):
            client.handle_event(event)

    def add_event(self, event_id: EventId, data: Any = None) -> None:
        """Queue an event for the next :meth:`process_events`."""
        self._queue.append(Event(event_id, data))

    def process_events(self) -> None:
        """Send queued events in order, including ones queued while sending."""
        while self._queue:
            self.send_event(self._queue.popleft())

    @property
    def pending(self) -> int:
        return len(self._queue)

    def clear_buffer(self) -> None:
        self._queue.clear()

    def clear_clients(self) -> None:
        self._clients.clear()

    def shutdown(self) -> None:
        self.clear_buffer()
        self.clear_clients()


@functools.lru_cache(maxsize=None)
def default_event_system() -> EventSystem:
    """The process-wide event system."""
    return EventSystem()