import pytest

from molecularity.keys import KEY_NAMES, VK_END, VK_F1, VK_RETURN, key_name


def test_named_keys():
    assert key_name(VK_RETURN) == "Return"
    assert key_name(VK_F1) == "F1"
    assert key_name(186) == ";"


def test_letters_fall_back_to_character():
    assert key_name(ord("W")) == "W"
    assert key_name(ord("7")) == "7"


def test_end_key_shows_as_home():
    assert key_name(VK_END) == "Home"
    assert KEY_NAMES[VK_END] == "End"


def test_apostrophe_key_shows_as_comma():
    assert key_name(192) == key_name(188)


def test_all_named_codes_match_table_except_end():
    for code, name in KEY_NAMES.items():
        if code != VK_END:
            assert key_name(code) == name


@pytest.mark.parametrize("code", [-1, 256])
def test_out_of_range(code):
    with pytest.raises(ValueError):
        key_name(code)