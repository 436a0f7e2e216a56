import pytest

from solong.grid import ErrorKind, MapError
from solong.loader import is_ber_filename, load_map, parse_map, split_map_text

VALID_ROWS = ["1111111", "1P0C0E1", "1111111"]
VALID_TEXT = "\n".join(VALID_ROWS) + "\n"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("map.ber", True),
        (".ber", True),
        ("maps/level.ber", True),
        ("ber", False),
        ("map.txt", False),
        ("map.ber.txt", False),
    ],
)
def test_is_ber_filename(name, expected):
    assert is_ber_filename(name) is expected


def test_split_round_trip():
    assert split_map_text(VALID_TEXT) == VALID_ROWS
    assert split_map_text("\n".join(VALID_ROWS)) == VALID_ROWS


def test_split_empty_text():
    assert split_map_text("") == []


@pytest.mark.parametrize("text", ["111\n\n111\n", "\n111\n", "111\n111\n\n"])
def test_split_rejects_empty_line(text):
    with pytest.raises(MapError) as info:
        split_map_text(text)
    assert info.value.kind is ErrorKind.EMPTY_LINE


def test_parse_valid_map():
    assert parse_map(VALID_TEXT) == VALID_ROWS


def test_parse_empty_text():
    with pytest.raises(MapError) as info:
        parse_map("")
    assert info.value.kind is ErrorKind.EMPTY_LINE


def test_parse_unreachable_coin():
    with pytest.raises(MapError) as info:
        parse_map("111111\n1P0EC1\n111111\n")
    assert info.value.kind is ErrorKind.UNREACHABLE_ITEM


def test_parse_carriage_return_is_invalid():
    with pytest.raises(MapError) as info:
        parse_map("1111\r\n1PCE\r\n1111\r\n")
    assert info.value.kind is ErrorKind.NOT_RECTANGLE or info.value.kind is ErrorKind.INVALID_CHARACTER


def test_load_map_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID_TEXT)
    assert load_map(path) == VALID_ROWS


def test_load_map_wrong_suffix(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text(VALID_TEXT)
    with pytest.raises(MapError) as info:
        load_map(path)
    assert info.value.kind is ErrorKind.INVALID_NAME


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError) as info:
        load_map(tmp_path / "missing.ber")
    assert info.value.kind is ErrorKind.INVALID_NAME