import pytest

from solong.colors import lookup_color


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("red", 0xFF0000),
        ("snow", 0xFFFAFA),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_values(name, value):
    assert lookup_color(name) == value


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("None") == -1


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize(
    ("spaced", "joined"),
    [
        ("ghost white", "ghostwhite"),
        ("midnight blue", "midnightblue"),
        ("dark orange", "darkorange"),
        ("light sky", "lightskyblue"),
        ("dark red", "darkred"),
    ],
)
def test_spaced_and_joined_names_agree(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


@pytest.mark.parametrize("n", [0, 1, 17, 42, 99, 100])
def test_gray_and_grey_agree(n):
    assert lookup_color(f"gray{n}") == lookup_color(f"grey{n}")


def test_gray_scale_is_monotonic_and_neutral():
    values = [lookup_color(f"gray{n}") for n in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")
    for value in values:
        red, green, blue = value >> 16, (value >> 8) & 0xFF, value & 0xFF
        assert red == green == blue


def test_numbered_variant_one_matches_base_colour():
    for base in ("snow", "bisque", "red", "gold", "magenta", "orange"):
        assert lookup_color(f"{base}1") == lookup_color(base)


def test_values_fit_in_rgb():
    for name in ("white", "black", "tomato4", "thistle", "cyan4", "purple"):
        assert 0 <= lookup_color(name) <= 0xFFFFFF


def test_unknown_name_raises_key_error():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_empty_name_raises_key_error():
    with pytest.raises(KeyError):
        lookup_color("")