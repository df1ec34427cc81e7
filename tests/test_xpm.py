import pytest

from raycub.xpm import (
    Image,
    XpmError,
    load_xpm,
    parse_xpm,
    quoted_strings,
    strip_comments,
    text_to_rgb,
    words,
)


def test_words_splits_on_spaces_and_tabs():
    assert words("  a\tb  c ") == ["a", "b", "c"]
    assert words("") == []


def test_strip_block_comment_keeps_length():
    text = '/* x */"a"'
    assert strip_comments(text) == " " * 7 + '"a"'


def test_strip_line_comment():
    text = '// hi\n"x"'
    assert strip_comments(text) == " " * 6 + '"x"'


def test_comment_inside_quotes_is_kept():
    text = '"a/*b*/"'
    assert strip_comments(text) == text


def test_quoted_strings_pairs():
    text = 'static char *x[] = {"ab", "cd"};'
    assert list(quoted_strings(text)) == ["ab", "cd"]


def test_quoted_strings_ignores_unpaired_quote():
    assert list(quoted_strings('"ab" "c')) == ["ab"]


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000", None) == 0xFF0000


def test_text_to_rgb_names():
    assert text_to_rgb("red", None) == 0xFF0000
    assert text_to_rgb("ghost", "white") == 0xF8F8FF
    assert text_to_rgb("RED", None) == text_to_rgb("red", None)


def test_text_to_rgb_none_and_unknown():
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuch", None) == 0


def test_parse_simple_image():
    image = parse_xpm(["2 2 2 1", ". c #000000", "# c #FFFFFF", ".#", "#."])
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0x000000
    assert image.pixel(1, 0) == 0xFFFFFF
    assert image.pixel(0, 1) == 0xFFFFFF
    assert image.pixel(1, 1) == 0x000000


def test_parse_transparent_colour():
    image = parse_xpm(["1 1 1 1", "a c None", "a"])
    assert image.pixel(0, 0) == 0xFF000000


def test_parse_two_chars_per_pixel():
    image = parse_xpm(["1 1 1 2", "ab c blue", "ab"])
    assert image.pixel(0, 0) == 0x0000FF


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == text_to_rgb("blue", None)


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "aaa c red", "aaa c blue", "aaa"])
    assert image.pixel(0, 0) == text_to_rgb("red", None)


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a m red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
    ],
)
def test_parse_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_pixel_out_of_range():
    image = Image(1, 1, (5,))
    with pytest.raises(IndexError):
        image.pixel(1, 0)


def test_load_xpm_file(tmp_path):
    path = tmp_path / "tex.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *img[] = {\n"
        "/* columns rows colors chars */\n"
        '"2 1 2 1",\n'
        '"r c red",\n'
        '"g c green",\n'
        '"rg"\n'
        "};\n"
    )
    image = load_xpm(path)
    assert (image.width, image.height) == (2, 1)
    assert image.pixel(0, 0) == text_to_rgb("red", None)
    assert image.pixel(1, 0) == text_to_rgb("green", None)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")