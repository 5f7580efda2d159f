import pytest

from molecularity.widgets.base import MouseData
from molecularity.widgets.dropdown import FLAG_MAX, DropDown, DropState

OPTIONS = ["Eng", "Fr"]
SIZE = (100.0, 20.0)
POS = (0.0, 0.0)
TEXTURES = ["down", "hover", "up"]
ARROW = MouseData(pos=(110.0, 10.0), l_press=True)


def _update(drop, mouse, current="Eng", options=OPTIONS):
    drop.update(options, SIZE, POS, TEXTURES, TEXTURES, "white", current, mouse)


def test_initial_selection_follows_current():
    drop = DropDown()
    _update(drop, MouseData(), current="Fr")
    assert drop.selected == 1
    assert drop.data_selected == "Fr"
    assert drop.is_down() is False
    assert drop.background == TEXTURES[2]


def test_arrow_opens_list():
    drop = DropDown()
    _update(drop, ARROW)
    assert drop.is_down() is True
    assert drop.flag == 0


def test_held_arrow_does_not_toggle_again_immediately():
    drop = DropDown()
    _update(drop, ARROW)
    _update(drop, ARROW)
    assert drop.is_down() is True
    assert drop.flag == 1


def test_arrow_closes_after_wait():
    drop = DropDown()
    _update(drop, ARROW)
    for _ in range(FLAG_MAX):
        _update(drop, MouseData())
    assert drop.flag == FLAG_MAX
    _update(drop, ARROW)
    assert drop.state is DropState.UP


def test_clicking_option_selects_and_closes():
    drop = DropDown()
    _update(drop, ARROW)
    # second option occupies y from 41 to 61
    _update(drop, MouseData(pos=(50.0, 50.0), l_press=True))
    assert drop.selected == 1
    assert drop.data_selected == "Fr"
    assert drop.is_down() is False


def test_list_buttons_laid_out_below():
    drop = DropDown()
    _update(drop, ARROW)
    _update(drop, MouseData())
    assert drop.list_buttons[0].pos == (0.0, SIZE[1])
    assert drop.list_buttons[1].pos[1] == drop.list_buttons[0].pos[1] + SIZE[1] + 1


def test_empty_options_rejected():
    with pytest.raises(ValueError):
        _update(DropDown(), MouseData(), options=[])


def test_too_many_options_rejected():
    with pytest.raises(ValueError):
        _update(DropDown(), MouseData(), options=[str(i) for i in range(11)])