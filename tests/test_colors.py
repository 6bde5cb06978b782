import pytest

from solong.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("navy", 0x80),
        ("red", 0xFF0000),
        ("gray100", 0xFFFFFF),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_case_insensitive():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")
    assert lookup_color("NoNe") == -1


def test_duplicate_name_uses_first_entry():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_unknown_name():
    assert lookup_color("no such colour") is None
    assert lookup_color("") is None


def test_no_whitespace_trimming():
    assert lookup_color(" snow") is None
    assert lookup_color("snow ") is None


@pytest.mark.parametrize("level", range(0, 101))
def test_gray_and_grey_agree(level):
    gray = lookup_color(f"gray{level}")
    grey = lookup_color(f"grey{level}")
    assert gray == grey
    assert 0 <= gray <= 0xFFFFFF
    # Every grey level has equal red, green and blue components.
    assert (gray >> 16) & 0xFF == (gray >> 8) & 0xFF == gray & 0xFF


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("ghost white", "ghostwhite"),
        ("antique white", "antiquewhite"),
        ("midnight blue", "midnightblue"),
        ("dark orange", "darkorange"),
        ("medium purple", "mediumpurple"),
    ],
)
def test_spaced_and_joined_forms_agree(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)
    assert lookup_color(spaced) is not None


def test_numbered_variant_one_matches_base():
    assert lookup_color("snow1") == lookup_color("snow")
    assert lookup_color("red1") == lookup_color("red")
    assert lookup_color("blue1") == lookup_color("blue")