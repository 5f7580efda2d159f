"""Selection of the language file that display text is read from."""

from __future__ import annotations

from typing import Iterable

from molecularity.events import EventId, EventSystem, default_event_system
from molecularity.json_helper import JsonStore, TextData


def to_map(text_data: Iterable[TextData]) -> dict[str, str]:
    """Map each text entry's name to its text; later entries win."""
    return {item.name: item.text for item in text_data}


class TextLoader:
    """Reads display text from the current language file."""

    def __init__(self, store: JsonStore | None = None,
                 events: EventSystem | None = None,
                 text_file: str = "Text_Eng.json") -> None:
        self.store = store if store is not None else JsonStore()
        self.events = events if events is not None else default_event_system()
        self.text_file = text_file

    def load_text(self, node: str) -> list[TextData]:
        """Text entries of section ``node`` in the current language file."""
        return self.store.load_text_items(self.text_file, node)

    def change_language(self, lang_code: str) -> None:
        """Switch to ``Text_<lang_code>.json`` and announce the change."""
        self.change_text_file(f"Text_{lang_code}.json")

    def change_text_file(self, file_name: str) -> None:
        """Switch to ``file_name`` and announce the change."""
        self.text_file = file_name
        self.events.add_event(EventId.CHANGE_LANGUAGE)