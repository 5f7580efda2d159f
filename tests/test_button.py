from molecularity.widgets.base import MouseData
from molecularity.widgets.button import Button, ButtonState

TEXTURES = ["down.dds", "hover.dds", "up.dds"]


def _press(button, mouse):
    return button.update("Play", TEXTURES, (100, 50), (10, 10), "black", mouse)


def test_pressed_inside():
    button = Button()
    assert _press(button, MouseData(pos=(50, 30), l_press=True)) is True
    assert button.texture == TEXTURES[0]
    assert button.state is ButtonState.PRESSED
    assert button.is_pressed is True


def test_hover_inside_without_press():
    button = Button()
    assert _press(button, MouseData(pos=(50, 30))) is False
    assert button.texture == TEXTURES[1]
    assert button.is_pressed is False


def test_default_outside_even_when_pressed():
    button = Button()
    assert _press(button, MouseData(pos=(500, 30), l_press=True)) is False
    assert button.texture == TEXTURES[2]
    assert button.state is ButtonState.DEFAULT


def test_edges_count_as_inside():
    button = Button()
    assert _press(button, MouseData(pos=(110, 60), l_press=True)) is True


def test_press_callback_runs_only_on_press():
    calls = []
    button = Button(on_press=lambda: calls.append(1))
    _press(button, MouseData(pos=(50, 30)))
    _press(button, MouseData(pos=(50, 30), l_press=True))
    assert calls == [1]


def test_release_clears_pressed():
    button = Button()
    _press(button, MouseData(pos=(50, 30), l_press=True))
    _press(button, MouseData(pos=(50, 30)))
    assert button.is_pressed is False


def test_update_stores_layout():
    button = Button()
    _press(button, MouseData())
    assert (button.text, button.size, button.pos) == ("Play", (100, 50), (10, 10))