import pytest

from solong.mapfile import (
    GameMap,
    MapError,
    check_extension,
    check_letters,
    check_map,
    check_walls,
    load_map,
    read_map,
    validate_path,
)

VALID_ROWS = ["1111111", "1P0C0E1", "1111111"]


def _text(rows):
    return "\n".join(rows)


def _write(tmp_path, text, name="level.ber"):
    path = tmp_path / name
    path.write_text(text, encoding="latin-1", newline="")
    return path


def _game_map(rows):
    return GameMap(tuple(row + "\n" for row in rows[:-1]) + (rows[-1],))


def test_load_valid_map(tmp_path):
    game_map = load_map(_write(tmp_path, _text(VALID_ROWS)))
    assert game_map.width == len(VALID_ROWS[0])
    assert game_map.height == len(VALID_ROWS)
    assert game_map.rows == tuple(VALID_ROWS)
    assert game_map.find_player() == (1, 1)
    assert game_map.positions_of("C") == [(1, 3)]
    assert game_map.positions_of("E") == [(1, 5)]


def test_cell_reads_tiles_and_bounds():
    game_map = _game_map(VALID_ROWS)
    assert game_map.cell(1, 1) == "P"
    assert game_map.cell(0, 0) == "1"
    with pytest.raises(IndexError):
        game_map.cell(3, 0)
    with pytest.raises(IndexError):
        game_map.cell(0, 7)


def test_find_player_without_player():
    game_map = _game_map(["111", "101", "111"])
    with pytest.raises(MapError):
        game_map.find_player()


def test_check_extension():
    assert check_extension("maps/a.ber") == "maps/a.ber"
    with pytest.raises(MapError):
        check_extension("maps/a.txt")


def test_load_rejects_wrong_extension(tmp_path):
    with pytest.raises(MapError):
        load_map(_write(tmp_path, _text(VALID_ROWS), name="level.txt"))


def test_read_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_map(tmp_path / "absent.ber")


def test_read_empty_file(tmp_path):
    with pytest.raises(MapError):
        read_map(_write(tmp_path, ""))


def test_read_keeps_newlines(tmp_path):
    game_map = read_map(_write(tmp_path, _text(VALID_ROWS)))
    assert game_map.lines == (VALID_ROWS[0] + "\n", VALID_ROWS[1] + "\n", VALID_ROWS[2])


def test_trailing_newline_is_rejected(tmp_path):
    with pytest.raises(MapError):
        load_map(_write(tmp_path, _text(VALID_ROWS) + "\n"))


def test_wall_gap_rejected():
    with pytest.raises(MapError):
        check_walls(_game_map(["1111111", "0P0C0E1", "1111111"]))
    with pytest.raises(MapError):
        check_walls(_game_map(["1110111", "1P0C0E1", "1111111"]))


def test_bad_letter_rejected():
    with pytest.raises(MapError):
        check_letters(_game_map(["1111111", "1P0Z0E1", "1111111"]))


@pytest.mark.parametrize(
    "rows",
    [
        ["1111111", "1P000E1", "1111111"],
        ["1111111", "1PPC0E1", "1111111"],
        ["1111111", "1P0CEE1", "1111111"],
        ["1111111", "1P0C0E1", "111111"],
        ["1111111", "1P0C0E11", "1111111"],
    ],
)
def test_check_map_rejects(rows):
    with pytest.raises(MapError):
        check_map(_game_map(rows))


def test_unreachable_collectible():
    with pytest.raises(MapError):
        validate_path(_game_map(["1111111", "1P1C0E1", "1111111"]))


def test_exit_is_not_walkable():
    with pytest.raises(MapError):
        validate_path(_game_map(["1111111", "1P0EC01", "1111111"]))


def test_unreachable_exit():
    with pytest.raises(MapError):
        validate_path(_game_map(["111111", "1PC1E1", "111111"]))


def test_reachable_set_follows_corridors():
    rows = ["11111", "1P0C1", "10111", "10E01", "11111"]
    reachable = validate_path(_game_map(rows))
    game_map = _game_map(rows)
    assert game_map.find_player() in reachable
    assert set(game_map.positions_of("C")) <= reachable
    assert (3, 2) not in reachable
    assert (3, 3) not in reachable
    assert all(game_map.cell(r, c) != "1" for r, c in reachable)


def test_load_map_with_detour(tmp_path):
    rows = ["11111", "1P0C1", "10111", "10E01", "11111"]
    game_map = load_map(_write(tmp_path, _text(rows)))
    assert game_map.rows == tuple(rows)