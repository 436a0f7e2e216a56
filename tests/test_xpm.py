import pytest

from solong.colors import lookup_color
from solong.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    color_from_spec,
    load_xpm,
    parse_xpm,
    split_words,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1 ",
"  c None",
". c #FF0000",
"x c blue",
/* pixels */
".x ",
" .x"
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb   c \t") == ["a", "b", "c"]


def test_split_words_keeps_other_characters():
    assert split_words("#FF00FF\nx") == ["#FF00FF\nx"]


def test_strip_comments_keeps_length_and_removes_block():
    text = 'a /* gone */ "b"'
    out = strip_comments(text)
    assert len(out) == len(text)
    assert "gone" not in out
    assert out.startswith("a ")
    assert out.endswith('"b"')


def test_strip_comments_ignores_markers_inside_quotes():
    text = '"/* kept */" "// also kept"'
    assert strip_comments(text) == text


def test_strip_comments_line_comment_removed_with_newline():
    text = 'x // note\n"y"'
    out = strip_comments(text)
    assert "note" not in out
    assert "\n" not in out
    assert out.endswith('"y"')
    assert len(out) == len(text)


def test_color_from_hex():
    assert color_from_spec("#FF0000", None) == 0xFF0000


def test_color_from_name_case_insensitive():
    assert color_from_spec("Red", None) == lookup_color("red")


def test_color_none_is_minus_one():
    assert color_from_spec("None", None) == -1


def test_color_two_word_name():
    assert color_from_spec("dark", "green") == lookup_color("dark green")


def test_color_unknown_name_is_zero():
    assert color_from_spec("nosuchcolour", None) == 0


def test_color_extra_word_breaks_lookup():
    assert color_from_spec("None", "s") == 0


def test_color_hex_wraps_to_int32():
    assert color_from_spec("#FFFFFFFF", None) == -1


def test_parse_sample_pixels():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == lookup_color("blue")
    assert image.pixel(2, 0) == TRANSPARENT
    assert image.pixel(0, 1) == TRANSPARENT
    assert image.pixel(1, 1) == 0xFF0000
    assert image.pixel(2, 1) == lookup_color("blue")


def test_parse_rows_match_dimensions():
    image = parse_xpm(SAMPLE)
    assert len(image.pixels) == image.height
    assert all(len(row) == image.width for row in image.pixels)


def test_parse_from_list_of_strings_matches_text():
    lines = ["3 2 3 1 ", "  c None", ". c #FF0000", "x c blue", ".x ", " .x"]
    assert parse_xpm(lines) == parse_xpm(SAMPLE)


def test_pixel_out_of_range():
    image = parse_xpm(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(3, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_two_chars_per_pixel():
    image = parse_xpm(['2 1 2 2', 'aa c #00FF00', 'bb c #0000FF', 'aabb'])
    assert image.pixels == ((0x00FF00, 0x0000FF),)


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #111111", "a c #222222", "a"])
    assert image.pixel(0, 0) == 0x222222


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #111111", "abc c #222222", "abc"])
    assert image.pixel(0, 0) == 0x111111


def test_unknown_pixel_key_is_zero():
    image = parse_xpm(["2 1 1 1", "a c #ABCDEF", "az"])
    assert image.pixels == ((0xABCDEF, 0),)


def test_header_with_hotspot_values_accepted():
    image = parse_xpm(["1 1 1 1 0 0", "a c red", "a"])
    assert image == XpmImage(1, 1, ((lookup_color("red"),),))


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["x 1 1 1", "a c red", "a"],
        ["1 1 1 1", "a s mask", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["1 1 2 1", "a c red"],
        [],
    ],
)
def test_parse_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_parse_text_without_quotes_fails():
    with pytest.raises(XpmError):
        parse_xpm("no strings here")


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path) == parse_xpm(SAMPLE)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")