import json

import pytest

from molecularity.events import EventId, EventSystem
from molecularity.json_helper import JsonStore, TextData
from molecularity.text_loader import TextLoader, to_map


class Recorder:
    def __init__(self):
        self.events = []

    def handle_event(self, event):
        self.events.append(event.event_id)


@pytest.fixture
def loader(tmp_path):
    (tmp_path / "Text_Eng.json").write_text(json.dumps(
        {"Menu": [{"Name": "Button_1", "Text": "Play"}]}), encoding="utf-8")
    (tmp_path / "Text_Fr.json").write_text(json.dumps(
        {"Menu": [{"Name": "Button_1", "Text": "Jouer"}]}), encoding="utf-8")
    return TextLoader(JsonStore(tmp_path), EventSystem())


def test_to_map_last_wins():
    data = [TextData("a", "1"), TextData("b", "2"), TextData("a", "3")]
    assert to_map(data) == {"a": "3", "b": "2"}


def test_load_text_default_file(loader):
    assert loader.text_file == "Text_Eng.json"
    assert loader.load_text("Menu") == [TextData("Button_1", "Play")]


def test_change_language_switches_file_and_queues_event(loader):
    recorder = Recorder()
    loader.events.add_client(EventId.CHANGE_LANGUAGE, recorder)
    loader.change_language("Fr")
    assert loader.text_file == "Text_Fr.json"
    assert to_map(loader.load_text("Menu")) == {"Button_1": "Jouer"}
    assert loader.events.pending == 1
    loader.events.process_events()
    assert recorder.events == [EventId.CHANGE_LANGUAGE]


def test_change_text_file(loader):
    loader.change_text_file("Other.json")
    assert loader.text_file == "Other.json"
    assert loader.load_text("Menu") == []
    assert loader.events.pending == 1