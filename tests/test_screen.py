import pytest

from molecularity.events import Event, EventId, EventSystem
from molecularity.json_helper import JsonStore
from molecularity.screen import BLACK, Screen, TextToDraw
from molecularity.text_loader import TextLoader
from molecularity.widgets.base import MouseData


class _Probe(Screen):
    subscriptions = (EventId.UI_KEY_INPUT, EventId.UI_MOUSE_INPUT,
                     EventId.WINDOW_SIZE_CHANGE)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.frames = []

    def update(self, dt):
        self.frames.append(dt)

    def load_text(self):
        self.text_map = {"Title": "Paused"}


@pytest.fixture
def events():
    return EventSystem()


@pytest.fixture
def probe(events, tmp_path):
    loader = TextLoader(JsonStore(tmp_path), events)
    return _Probe(events=events, text_loader=loader, screen_size=(800.0, 600.0))


def test_screen_is_abstract():
    with pytest.raises(TypeError):
        Screen(events=EventSystem())


def test_text_to_draw_defaults():
    item = TextToDraw("hello")
    assert item.colour == BLACK
    assert item.position == (0.0, 0.0)


def test_subscribes_on_creation(probe, events):
    assert events.is_registered(EventId.UI_MOUSE_INPUT, probe)
    assert probe.size_of_screen == (800.0, 600.0)


def test_key_and_size_events(probe, events):
    events.add_event(EventId.UI_KEY_INPUT, 65)
    events.add_event(EventId.WINDOW_SIZE_CHANGE, (1280, 720))
    events.process_events()
    assert probe.key == 65
    assert probe.size_of_screen == (1280.0, 720.0)


def test_mouse_event_is_copied(probe):
    mouse = MouseData((5.0, 6.0), l_press=True)
    probe.handle_event(Event(EventId.UI_MOUSE_INPUT, mouse))
    mouse.l_press = False
    assert probe.mouse.l_press is True
    assert probe.mouse.pos == (5.0, 6.0)


def test_text_lookup(probe):
    probe.load_text()
    assert probe.text("Title") == "Paused"
    assert probe.text("Missing") == ""


def test_close_unsubscribes(probe, events):
    with probe:
        pass
    assert not events.is_registered(EventId.UI_KEY_INPUT, probe)
    events.add_event(EventId.UI_KEY_INPUT, 65)
    events.process_events()
    assert probe.key == 0