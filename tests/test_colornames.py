import pytest

from wirefdf.colornames import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("navy blue", 0x80),
        ("lightgoldenrodyellow", 0xFAFAD2),
        ("gray100", 0xFFFFFF),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("GhostWhite") == lookup_color("ghostwhite")
    assert lookup_color("RED") == 0xFF0000


def test_first_entry_wins_for_duplicate_names():
    # "dark slate" is listed several times; the first value is used.
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("None") == -1


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_empty_name_raises():
    with pytest.raises(KeyError):
        lookup_color("")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


@pytest.mark.parametrize("level", range(101))
def test_gray_levels_have_equal_channels(level):
    value = lookup_color(f"gray{level}")
    red, green, blue = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
    assert red == green == blue
    assert 0 <= value <= 0xFFFFFF


def test_gray_levels_increase():
    values = [lookup_color(f"grey{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


@pytest.mark.parametrize("base", ["red", "green", "blue", "cyan", "magenta", "yellow"])
def test_numbered_variant_one_matches_base(base):
    assert lookup_color(f"{base}1") == lookup_color(base)


def test_spaced_and_joined_names_agree():
    assert lookup_color("alice blue") == lookup_color("aliceblue")
    assert lookup_color("hot pink") == lookup_color("hotpink")
    assert lookup_color("dark orange") == lookup_color("darkorange")