import pytest

from molecularity.events import (
    Event,
    EventId,
    EventSystem,
    Listener,
    default_event_system,
)


class Recorder(Listener):
    def __init__(self, log=None, name="r"):
        self.events = []
        self.log = log
        self.name = name

    def handle_event(self, event):
        self.events.append(event)
        if self.log is not None:
            self.log.append(self.name)


@pytest.fixture
def system():
    return EventSystem()


def test_listener_is_abstract():
    with pytest.raises(TypeError):
        Listener()


def test_event_defaults_to_no_data():
    assert Event(EventId.GAME_PAUSE).data is None


def test_events_wait_until_processed(system):
    r = Recorder()
    system.add_client(EventId.GAME_PAUSE, r)
    system.add_event(EventId.GAME_PAUSE)
    assert r.events == []
    assert system.pending == 1
    system.process_events()
    assert r.events == [Event(EventId.GAME_PAUSE)]
    assert system.pending == 0


def test_only_subscribed_event_delivered(system):
    r = Recorder()
    system.add_client(EventId.GAME_PAUSE, r)
    system.add_event(EventId.GAME_UNPAUSE, 5)
    system.add_event(EventId.GAME_PAUSE, 7)
    system.process_events()
    assert [e.data for e in r.events] == [7]


def test_duplicate_registration_ignored(system):
    r = Recorder()
    system.add_client(EventId.QUIT_GAME, r)
    system.add_client(EventId.QUIT_GAME, r)
    system.send_event(Event(EventId.QUIT_GAME))
    assert len(r.events) == 1
    assert system.is_registered(EventId.QUIT_GAME, r)


def test_delivery_in_registration_order(system):
    log = []
    a, b = Recorder(log, "a"), Recorder(log, "b")
    system.add_client(EventId.GAME_SETTINGS, a)
    system.add_client(EventId.GAME_SETTINGS, b)
    assert system.is_registered(EventId.GAME_SETTINGS, a) is True
    assert system.is_registered(EventId.GAME_SETTINGS, b) is True
    system.send_event(Event(EventId.GAME_SETTINGS))
    assert log == ["a", "b"]
    assert a.events == [Event(EventId.GAME_SETTINGS)]
    assert b.events == [Event(EventId.GAME_SETTINGS)]


def test_remove_client(system):
    r = Recorder()
    system.add_client(EventId.GAME_PAUSE, r)
    system.add_client(EventId.GAME_UNPAUSE, r)
    system.remove_client(EventId.GAME_PAUSE, r)
    assert not system.is_registered(EventId.GAME_PAUSE, r)
    assert system.is_registered(EventId.GAME_UNPAUSE, r)


def test_remove_all(system):
    r = Recorder()
    other = Recorder()
    for event_id in (EventId.GAME_PAUSE, EventId.GAME_UNPAUSE, EventId.QUIT_GAME):
        system.add_client(event_id, r)
    system.add_client(EventId.GAME_PAUSE, other)
    system.remove_all(r)
    for event_id in (EventId.GAME_PAUSE, EventId.GAME_UNPAUSE, EventId.QUIT_GAME):
        assert not system.is_registered(event_id, r)
    assert system.is_registered(EventId.GAME_PAUSE, other)


def test_events_raised_during_processing_are_handled(system):
    final = Recorder()

    class Chain(Listener):
        def handle_event(self, event):
            system.add_event(EventId.HIDE_CURSOR, event.data)

    system.add_client(EventId.SHOW_CURSOR, Chain())
    system.add_client(EventId.HIDE_CURSOR, final)
    system.add_event(EventId.SHOW_CURSOR, "x")
    system.process_events()
    assert final.events == [Event(EventId.HIDE_CURSOR, "x")]


def test_clear_buffer_and_shutdown(system):
    r = Recorder()
    system.add_client(EventId.GAME_PAUSE, r)
    system.add_event(EventId.GAME_PAUSE)
    system.clear_buffer()
    system.process_events()
    assert r.events == []
    system.add_event(EventId.GAME_PAUSE)
    system.shutdown()
    assert system.pending == 0
    assert not system.is_registered(EventId.GAME_PAUSE, r)


def test_default_event_system_is_shared():
    shared = default_event_system()
    r = Recorder()
    shared.add_client(EventId.QUIT_GAME, r)
    try:
        assert default_event_system().is_registered(EventId.QUIT_GAME, r) is True
    finally:
        shared.remove_client(EventId.QUIT_GAME, r)
    assert default_event_system().is_registered(EventId.QUIT_GAME, r) is False