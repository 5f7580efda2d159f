import pytest

from molecularity.keys import KEY_NAMES, VK_END, VK_SPACE
from molecularity.widgets.base import MouseData
from molecularity.widgets.input_box import InputBox

SIZE = (100.0, 30.0)
POS = (10.0, 10.0)


def _update(box, key, mouse):
    box.update(SIZE, POS, "bg.dds", "black", key, mouse)


def test_click_selects_and_clears_text():
    box = InputBox()
    box.set_key(ord("W"))
    _update(box, 0, MouseData(pos=(20.0, 20.0), l_press=True))
    assert box.selected is True
    assert box.current_text == ""
    assert box.key == ord("W")


def test_selected_box_takes_next_key():
    box = InputBox()
    _update(box, 0, MouseData(pos=(20.0, 20.0), l_press=True))
    _update(box, VK_SPACE, MouseData())
    assert box.current_text == KEY_NAMES[VK_SPACE]
    assert box.key == VK_SPACE
    assert box.selected is False


def test_click_outside_does_not_select():
    box = InputBox()
    _update(box, ord("A"), MouseData(pos=(500.0, 500.0), l_press=True))
    assert box.selected is False
    assert box.key == 0
    assert box.current_text == ""


def test_hover_without_press_does_not_select():
    box = InputBox()
    _update(box, ord("A"), MouseData(pos=(20.0, 20.0)))
    assert box.selected is False


def test_set_key_character_and_named():
    box = InputBox()
    box.set_key(ord("Q"))
    assert box.current_text == "Q"
    box.set_key(VK_END)
    assert box.current_text == "End"
    assert box.key == VK_END


def test_set_key_zero_keeps_previous():
    box = InputBox()
    box.set_key(ord("E"))
    box.set_key(0)
    assert box.current_text == "E"
    assert box.key == ord("E")


def test_set_key_rejects_out_of_range():
    with pytest.raises(ValueError):
        InputBox().set_key(300)