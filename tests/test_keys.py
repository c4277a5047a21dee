import pytest

from teakit.keys import Key, KeyType, key_type_name


def test_key_string_alt_space():
    assert str(Key(type=KeyType.SPACE, alt=True)) == "alt+ "


def test_key_string_runes():
    assert str(Key(type=KeyType.RUNES, runes="a")) == "a"


def test_key_string_invalid():
    assert str(Key(type=99999)) == ""


def test_key_string_invalid_with_alt_is_empty():
    assert str(Key(type=99999, alt=True)) == ""


def test_key_type_string_space():
    assert key_type_name(KeyType.SPACE) == " "
    assert str(KeyType(-15)) == " "


def test_key_type_name_invalid():
    assert key_type_name(99999) == ""


def test_key_string_alt_runes():
    assert str(Key(type=KeyType.RUNES, runes="a", alt=True)) == "alt+a"


def test_key_string_paste_is_bracketed():
    assert str(Key(type=KeyType.RUNES, runes="a b", paste=True)) == "[a b]"


def test_key_string_alt_paste():
    assert str(Key(type=KeyType.RUNES, runes="x", alt=True, paste=True)) == "alt+[x]"


def test_key_string_multiple_runes():
    assert str(Key(type=KeyType.RUNES, runes="abcd")) == "abcd"


@pytest.mark.parametrize(
    "key_type, expected",
    [
        (KeyType.ENTER, "enter"),
        (KeyType.TAB, "tab"),
        (KeyType.ESC, "esc"),
        (KeyType.BACKSPACE, "backspace"),
        (KeyType.CTRL_AT, "ctrl+@"),
        (KeyType.CTRL_A, "ctrl+a"),
        (KeyType.CTRL_C, "ctrl+c"),
        (KeyType.CTRL_BACKSLASH, "ctrl+\\"),
        (KeyType.CTRL_CLOSE_BRACKET, "ctrl+]"),
        (KeyType.CTRL_CARET, "ctrl+^"),
        (KeyType.CTRL_UNDERSCORE, "ctrl+_"),
        (KeyType.RUNES, "runes"),
        (KeyType.UP, "up"),
        (KeyType.SHIFT_TAB, "shift+tab"),
        (KeyType.PG_UP, "pgup"),
        (KeyType.CTRL_PG_DOWN, "ctrl+pgdown"),
        (KeyType.CTRL_SHIFT_RIGHT, "ctrl+shift+right"),
        (KeyType.CTRL_SHIFT_END, "ctrl+shift+end"),
        (KeyType.INSERT, "insert"),
        (KeyType.DELETE, "delete"),
        (KeyType.F1, "f1"),
        (KeyType.F12, "f12"),
        (KeyType.F20, "f20"),
    ],
)
def test_key_type_names(key_type, expected):
    assert key_type_name(key_type) == expected
    assert str(key_type) == expected


@pytest.mark.parametrize(
    "key_type, expected",
    [
        (KeyType.ENTER, "alt+enter"),
        (KeyType.UP, "alt+up"),
        (KeyType.CTRL_A, "alt+ctrl+a"),
        (KeyType.ESCAPE, "alt+esc"),
    ],
)
def test_key_string_alt_special(key_type, expected):
    assert str(Key(type=key_type, alt=True)) == expected


def test_aliases_share_values():
    assert KeyType(0) == KeyType.NULL == KeyType.CTRL_AT
    assert KeyType(3) == KeyType.BREAK == KeyType.CTRL_C
    assert KeyType(27) == KeyType.ESCAPE == KeyType.ESC == KeyType.CTRL_OPEN_BRACKET
    assert KeyType(9) == KeyType.CTRL_I == KeyType.TAB
    assert KeyType(13) == KeyType.CTRL_M == KeyType.ENTER
    assert KeyType(127) == KeyType.CTRL_QUESTION_MARK == KeyType.BACKSPACE


def test_special_key_values():
    assert KeyType(-1) == KeyType.RUNES
    assert KeyType(-15) == KeyType.SPACE
    assert KeyType(-34) == KeyType.F1
    assert KeyType(-53) == KeyType.F20
    assert key_type_name(-34) == "f1"


def test_key_type_name_accepts_plain_int():
    assert key_type_name(13) == "enter"
    assert key_type_name(-2) == "up"


def test_key_equality():
    assert Key(type=KeyType.RUNES, runes="a") == Key(type=KeyType.RUNES, runes="a")
    assert Key(type=KeyType.RUNES, runes="a") != Key(type=KeyType.RUNES, runes="a", alt=True)


def test_key_type_format():
    enter = KeyType(13)
    assert f"{enter}" == "enter"
    assert format(enter) == "enter"