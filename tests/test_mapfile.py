import pytest

from solong.mapfile import (
    MapError,
    has_map_extension,
    has_required_elements,
    has_valid_path,
    is_rectangular,
    is_walled,
    read_map,
    validate_map,
)

VALID = ["1111111", "1P0C0E1", "1111111"]


@pytest.mark.parametrize(
    "path, expected",
    [("maps/level.ber", True), ("level.txt", False), ("level.ber.txt", False), ("x.be", False)],
)
def test_has_map_extension(path, expected):
    assert has_map_extension(path) is expected


@pytest.mark.parametrize("trailer", ["\n", ""])
def test_read_map_round_trip(tmp_path, trailer):
    path = tmp_path / "level.ber"
    path.write_text("\n".join(VALID) + trailer, encoding="utf-8")
    assert read_map(str(path)) == VALID


def test_read_map_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("", encoding="utf-8")
    assert read_map(str(path)) == []


def test_read_map_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_map(str(tmp_path / "absent.ber"))


def test_is_rectangular():
    assert is_rectangular(VALID) is True
    assert is_rectangular(["111", "11", "111"]) is False
    assert is_rectangular([]) is False


def test_is_walled():
    assert is_walled(VALID) is True
    assert is_walled(["1101111", "1P0C0E1", "1111111"]) is False
    assert is_walled(["1111111", "1P0C0E0", "1111111"]) is False
    assert is_walled(["1111111", "0P0C0E1", "1111111"]) is False
    assert is_walled(["1111111", "1P0C0E1", "1111011"]) is False


def test_has_required_elements():
    assert has_required_elements(VALID) is True
    assert has_required_elements(["1111111", "1PPC0E1", "1111111"]) is False
    assert has_required_elements(["1111111", "1P0C0C1", "1111111"]) is False
    assert has_required_elements(["1111111", "1P000E1", "1111111"]) is False


def test_first_column_is_not_counted():
    assert has_required_elements(["PCE"]) is False
    assert has_required_elements(["1PCE"]) is True


def test_has_valid_path():
    assert has_valid_path(VALID) is True
    assert has_valid_path(["1111111", "1P01C01", "1000E01", "1111111"]) is True
    assert has_valid_path(["1111111", "1P01C01", "1111E01", "1111111"]) is False
    assert has_valid_path(["1111111", "1PC01E1", "1111111"]) is False


def test_path_without_player_fails():
    assert has_valid_path(["11111", "10C01", "10E01", "11111"]) is False


def test_validate_returns_valid_grid():
    assert validate_map(VALID) == VALID


@pytest.mark.parametrize(
    "grid, message",
    [
        (["111", "1P1", "11"], "Map is not rectangular"),
        ([], "Map is not rectangular"),
        (["1110111", "1P0C0E1", "1111111"], "Map is not surrounded by walls"),
        (["1111111", "1P000E1", "1111111"], "Missing or incorrect elements"),
        (["1111111", "1PC01E1", "1111111"], "No valid path exists"),
    ],
)
def test_validate_errors(grid, message):
    with pytest.raises(MapError, match=message):
        validate_map(grid)