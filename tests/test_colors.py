import pytest

from solong.colors import lookup_color


@pytest.mark.parametrize(
    "name, value",
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_values(name, value):
    assert lookup_color(name) == value


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("None") == -1


def test_first_entry_wins_for_repeated_names():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("name", ["snow", "ghost white", "deepskyblue", "gray100", "none"])
def test_case_insensitive(name):
    assert lookup_color(name.upper()) == lookup_color(name)
    assert lookup_color(name.title()) == lookup_color(name)


@pytest.mark.parametrize("n", [0, 1, 17, 50, 99, 100])
def test_gray_and_grey_agree(n):
    assert lookup_color(f"gray{n}") == lookup_color(f"grey{n}")


def test_spaced_and_joined_names_agree():
    assert lookup_color("ghost white") == lookup_color("ghostwhite")
    assert lookup_color("misty rose") == lookup_color("mistyrose")


def test_numbered_variant_one_matches_base():
    assert lookup_color("snow1") == lookup_color("snow")
    assert lookup_color("red1") == lookup_color("red")


def test_unknown_name():
    assert lookup_color("not a colour") is None
    assert lookup_color("") is None


def test_non_string_rejected():
    with pytest.raises(TypeError):
        lookup_color(42)