import pytest

from cub3d.colors import NAMED_COLORS, lookup_color, text_to_rgb


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("navy", 0x80),
        ("lightgreen", 0x90EE90),
        ("gray50", 0x7F7F7F),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1
    assert text_to_rgb("none") == -1


def test_lookup_is_case_insensitive():
    assert lookup_color("ReD") == lookup_color("red")
    assert text_to_rgb("DarkRed") == lookup_color("darkred")


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899


def test_two_word_name_is_joined_with_space():
    assert text_to_rgb("ghost", "white") == lookup_color("ghost white")
    assert lookup_color("light", "coral") == lookup_color("lightcoral")


def test_unknown_name():
    assert lookup_color("not-a-colour") is None
    assert text_to_rgb("not-a-colour") == 0


def test_hex_spec():
    assert text_to_rgb("#ff00ff") == 0xFF00FF
    assert text_to_rgb("#FFFFFF") == 0xFFFFFF
    assert text_to_rgb("#000000") == 0


def test_hex_spec_stops_at_invalid_digit():
    assert text_to_rgb("#12zz") == 0x12
    assert text_to_rgb("#") == 0


def test_hex_spec_ignores_end_word():
    assert text_to_rgb("#abcdef", "ignored") == 0xABCDEF


def test_grey_and_gray_spellings_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_all_values_fit_in_rgb():
    for name, value in NAMED_COLORS.items():
        assert name == name.lower()
        assert value == -1 or 0 <= value <= 0xFFFFFF