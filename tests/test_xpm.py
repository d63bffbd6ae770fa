import pytest

from cub3d.xpm import (
    TRANSPARENT,
    XpmError,
    parse_xpm,
    str_str,
    str_str_quoted,
    str_to_wordtab,
    strip_comments,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = [
    "3 2 3 1",
    "  c None",
    ". c #FF0000",
    "X c red",
    "X. ",
    " .X",
]

SAMPLE_FILE = """/* XPM */
static char *sample_xpm[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
"  c None",
". c #FF0000",
"X c red",
// pixels follow
"X. ",
" .X"
};
"""


def test_str_to_wordtab_splits_on_blanks():
    assert str_to_wordtab("  3\t2  3 1 ") == ["3", "2", "3", "1"]
    assert str_to_wordtab(" \t ") == []


def test_str_str_finds_first_occurrence():
    text = "abcabc"
    pos = str_str(text, "ca")
    assert text[pos:pos + 2] == "ca"
    assert "ca" not in text[:pos + 1]
    assert str_str(text, "zz") == -1


def test_str_str_quoted_skips_strings():
    text = '"a // b" // c'
    pos = str_str_quoted(text, "//")
    assert text[pos:pos + 2] == "//"
    assert pos > text.index('"', 1)
    assert str_str_quoted('"//"', "//") == -1


def test_strip_comments_keeps_length_and_strings():
    stripped = strip_comments(SAMPLE_FILE)
    assert len(stripped) == len(SAMPLE_FILE)
    assert "/*" not in stripped
    assert "//" not in stripped
    assert '"X c red"' in stripped
    assert "XPM" not in stripped


def test_strip_comments_ignores_quoted_comment_markers():
    text = '"/* keep */" /* drop */'
    stripped = strip_comments(text)
    assert stripped.startswith('"/* keep */"')
    assert "drop" not in stripped


def test_xpm_to_image_pixels():
    image = xpm_to_image(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF0000
    assert image.get_pixel(2, 0) == TRANSPARENT
    assert image.get_pixel(0, 1) == TRANSPARENT
    assert image.get_pixel(2, 1) == 0xFF0000


def test_two_word_colour_name():
    image = xpm_to_image(["1 1 1 1", "a c light blue", "a"])
    assert image.get_pixel(0, 0) == 0xADD8E6


def test_other_keys_before_c():
    image = xpm_to_image(["1 1 1 1", "a s mask c #00FF00", "a"])
    assert image.get_pixel(0, 0) == 0x00FF00


def test_short_keys_last_definition_wins():
    image = xpm_to_image(["1 1 2 2", "ab c #0000FF", "ab c #00FF00", "ab"])
    assert image.get_pixel(0, 0) == 0x00FF00


def test_long_keys_first_definition_wins():
    image = xpm_to_image(["1 1 2 3", "abc c #0000FF", "abc c #00FF00", "abc"])
    assert image.get_pixel(0, 0) == 0x0000FF


def test_unknown_key_is_black():
    image = xpm_to_image(["2 1 1 1", "a c #FFFFFF", "az"])
    assert image.get_pixel(0, 0) == 0xFFFFFF
    assert image.get_pixel(1, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 2 1 1", "a c red", "a", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a q red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        [],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_file_matches_in_memory(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_FILE, encoding="latin-1")
    from_file = xpm_file_to_image(str(path))
    from_memory = xpm_to_image(SAMPLE)
    assert (from_file.width, from_file.height) == (from_memory.width, from_memory.height)
    assert from_file.data == from_memory.data


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        xpm_file_to_image(str(tmp_path / "absent.xpm"))