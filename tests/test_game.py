import io

import pytest

from solong.game import Collectibles, Direction, Game, Key, MoveOutcome
from solong.mapfile import GameMap


def make_map(*rows):
    lines = [row + "\n" for row in rows[:-1]] + [rows[-1]]
    return GameMap(tuple(lines))


@pytest.fixture
def simple_map():
    return make_map("11111", "1PCE1", "11111")


@pytest.fixture
def open_map():
    return make_map("11111", "10001", "10P01", "1C0E1", "11111")


@pytest.mark.parametrize(
    "keycode, offset, facing",
    [
        (13, (-1, 0), Direction.UP),
        (0, (0, -1), Direction.LEFT),
        (1, (1, 0), Direction.DOWN),
        (2, (0, 1), Direction.RIGHT),
    ],
)
def test_raw_key_codes_move_player(open_map, keycode, offset, facing):
    game = Game.from_map(open_map)
    start_row, start_col = game.player
    assert game.handle_key(keycode) is MoveOutcome.MOVED
    assert game.player == (start_row + offset[0], start_col + offset[1])
    assert game.facing is facing
    assert game.moves == 1


def test_raw_escape_code_quits(open_map):
    game = Game.from_map(open_map)
    assert game.handle_key(53) is MoveOutcome.QUIT
    assert game.finished


def test_collectibles_from_map(simple_map):
    collectibles = Collectibles.from_map(simple_map)
    assert collectibles.positions == tuple(simple_map.positions_of("C"))
    assert collectibles.remaining() == list(collectibles.positions)
    assert not collectibles.all_collected()


def test_collect_at_only_once(simple_map):
    collectibles = Collectibles.from_map(simple_map)
    row, col = collectibles.positions[0]
    assert collectibles.collect_at(row, col) is True
    assert collectibles.collect_at(row, col) is False
    assert collectibles.remaining() == []
    assert collectibles.all_collected()


def test_collect_at_empty_tile(simple_map):
    collectibles = Collectibles.from_map(simple_map)
    assert collectibles.collect_at(0, 0) is False
    assert collectibles.count == 0


def test_from_map_places_player(simple_map):
    game = Game.from_map(simple_map)
    assert game.player == simple_map.find_player()
    assert game.moves == 0
    assert game.facing is None


def test_move_collects_and_wins(simple_map):
    game = Game.from_map(simple_map)
    start_row, start_col = game.player
    assert game.move(Direction.RIGHT) is MoveOutcome.MOVED
    assert game.player == (start_row, start_col + 1)
    assert game.collectibles.all_collected()
    assert game.move(Direction.RIGHT) is MoveOutcome.WON
    assert game.player == (start_row, start_col + 2)
    assert game.finished
    assert game.moves == 2


def test_exit_blocks_until_all_collected():
    game = Game.from_map(make_map("11111", "1CPE1", "11111"))
    start = game.player
    assert game.move(Direction.RIGHT) is MoveOutcome.BLOCKED
    assert game.player == start
    assert game.moves == 0
    assert not game.finished


def test_wall_blocks_but_turns_player(simple_map):
    game = Game.from_map(simple_map)
    start = game.player
    assert game.move(Direction.UP) is MoveOutcome.BLOCKED
    assert game.player == start
    assert game.facing is Direction.UP
    assert game.moves == 0


def test_moves_are_logged():
    game = Game.from_map(make_map("111111", "1P0CE1", "111111"))
    game.log = io.StringIO()
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.log.getvalue() == "1\n2\n"


def test_handle_key_moves():
    game = Game.from_map(make_map("11111", "10P01", "1CE01", "11111"))
    start_row, start_col = game.player
    assert game.handle_key(Key.A) is MoveOutcome.MOVED
    assert game.player == (start_row, start_col - 1)
    assert game.handle_key(Key.D) is MoveOutcome.MOVED
    assert game.player == (start_row, start_col)
    assert game.facing is Direction.RIGHT


def test_handle_key_escape_quits(simple_map):
    game = Game.from_map(simple_map)
    assert game.handle_key(Key.ESC) is MoveOutcome.QUIT
    assert game.finished
    assert game.move(Direction.RIGHT) is MoveOutcome.IGNORED


def test_handle_key_unknown(simple_map):
    game = Game.from_map(simple_map)
    start = game.player
    assert game.handle_key(99) is MoveOutcome.IGNORED
    assert game.player == start