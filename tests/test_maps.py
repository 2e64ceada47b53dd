import pytest

from solong.maps import (
    MapError,
    check_map_name,
    check_reachable,
    check_walls,
    count_items,
    flood_fill,
    load_map,
    read_map_lines,
)

VALID = "1111111\n1P0C0E1\n1111111"


def write_map(tmp_path, text, name="map.ber"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    ("name", "expected"),
    [("maps/level.ber", True), (".ber", True), ("level.txt", False), ("ber", False), ("level.be", False)],
)
def test_check_map_name(name, expected):
    assert check_map_name(name) is expected


def test_load_valid_map(tmp_path):
    game_map = load_map(write_map(tmp_path, VALID))
    assert game_map.rows == tuple(VALID.split("\n"))
    assert game_map.width == len(VALID.split("\n")[0])
    assert game_map.height == len(VALID.split("\n"))
    assert game_map.player == (1, 1)
    assert game_map.exit == (5, 1)
    assert game_map.collectibles == VALID.count("C")
    assert "".join(game_map.lines) == VALID
    assert game_map.move_count == 0


def test_missing_file_reports_open_failure(tmp_path):
    with pytest.raises(MapError) as info:
        load_map(tmp_path / "absent.ber")
    assert str(info.value) == "Error:\nFailed to open the map file\n"


def test_read_map_lines_keeps_newlines(tmp_path):
    lines = read_map_lines(write_map(tmp_path, VALID))
    assert "".join(lines) == VALID
    assert lines[0].endswith("\n")


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("1111111\n1P0X0E1\n1111111", "Error:\nInvalid character in the map\n"),
        ("1101111\n1P0C0E1\n1111111", "Error:\nInvalid wall\n"),
        ("1111111\n1P0C0E1\n1111011", "Error:\nInvalid wall\n"),
        ("1111111\n0P0C0E1\n1111111", "Error:\nInvalid character in the map\n"),
        ("1111111\n1P0C0E\n1111111", "Error:\nInvalid character in the map\n"),
        ("1111111\n1P000E1\n1111111", "Error:\nInvalid number of items in the map\n"),
        ("1111111\n1PPC0E1\n1111111", "Error:\nInvalid number of items in the map\n"),
        ("1111111\n1P0CEE1\n1111111", "Error:\nInvalid number of items in the map\n"),
        ("1111111\n1P01CE1\n1111111", "Error:\nInvalid item in the map\n"),
    ],
)
def test_invalid_maps_are_rejected(tmp_path, text, message):
    with pytest.raises(MapError) as info:
        load_map(write_map(tmp_path, text))
    assert str(info.value) == message


def test_empty_map_is_rejected(tmp_path):
    with pytest.raises(MapError) as info:
        load_map(write_map(tmp_path, ""))
    assert str(info.value) == "Error:\nInvalid wall\n"


def test_check_walls_accepts_framed_rows():
    rows = VALID.split("\n")
    check_walls(rows, len(rows[0]))
    with pytest.raises(MapError):
        check_walls(rows[:1] + ["1P0C0E"] + rows[2:], len(rows[0]))


def test_count_items_finds_positions():
    player, exit_, collectibles = count_items(["111111", "1PCCE1", "111111"])
    assert player == (1, 1)
    assert exit_ == (4, 1)
    assert collectibles == 2


def test_flood_fill_stops_at_walls():
    grid = [list("11111"), list("10101"), list("11111")]
    flood_fill(grid, 1, 1)
    assert grid[1] == list("1x101")
    assert grid[0] == list("11111")


def test_flood_fill_crosses_open_cells():
    grid = [list("1111"), list("1001"), list("1001"), list("1111")]
    flood_fill(grid, 2, 2)
    assert [row[1:3] for row in grid[1:3]] == [["x", "x"], ["x", "x"]]


def test_check_reachable():
    check_reachable(["11111", "1PCE1", "11111"], (1, 1))
    with pytest.raises(MapError):
        check_reachable(["11111", "1P1E1", "11111"], (1, 1))