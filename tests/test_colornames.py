import pytest

from raycub.colornames import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("black", 0x0),
        ("navy", 0x80),
        ("red", 0xFF0000),
        ("thistle4", 0x8B7B8B),
        ("gray50", 0x7F7F7F),
        ("gray100", 0xFFFFFF),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_case_insensitive():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1


def test_unknown_name():
    assert lookup_color("not a colour") is None


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        gray = lookup_color(f"gray{level}")
        assert gray is not None
        assert gray == lookup_color(f"grey{level}")


def test_gray_ramp_is_neutral_and_increasing():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values[0] == 0
    assert values[-1] == 0xFFFFFF
    assert all(a < b for a, b in zip(values, values[1:]))
    for value in values:
        r, g, b = value >> 16, (value >> 8) & 0xFF, value & 0xFF
        assert r == g == b


def test_spaced_and_joined_names_match():
    assert lookup_color("white smoke") == lookup_color("whitesmoke")
    assert lookup_color("dodger blue") == lookup_color("dodgerblue")
    assert lookup_color("blue1") == lookup_color("blue")