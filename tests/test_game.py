import pytest

from solong.game import Direction, Game, MoveResult
from solong.grid import ErrorKind, MapError

CORRIDOR = ["1111111", "1P0C0E1", "1111111"]


def test_initial_state():
    game = Game(CORRIDOR)
    assert game.player == (1, 1)
    assert game.exit == (5, 1)
    assert game.collectibles == 1
    assert game.moves == 0
    assert game.rows == CORRIDOR
    assert (game.width, game.height) == (7, 3)


def test_move_to_floor():
    game = Game(CORRIDOR)
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.player == (2, 1)
    assert game.tile_at(1, 1) == "0"
    assert game.tile_at(2, 1) == "P"
    assert game.moves == 1


def test_wall_blocks_without_counting():
    game = Game(CORRIDOR)
    for direction in (Direction.UP, Direction.DOWN, Direction.LEFT):
        assert game.move(direction) is MoveResult.BLOCKED
    assert game.moves == 0
    assert game.player == (1, 1)
    assert game.rows == CORRIDOR


def test_collect_then_finish():
    game = Game(CORRIDOR)
    game.move(Direction.RIGHT)
    assert game.move(Direction.RIGHT) is MoveResult.COLLECTED
    assert game.collectibles == 0
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.move(Direction.RIGHT) is MoveResult.FINISHED
    assert game.finished
    assert game.moves == 3
    assert game.player == (4, 1)


def test_exit_blocks_while_collectibles_remain():
    game = Game(["1111111", "1PEC001", "1111111"])
    assert game.move(Direction.RIGHT) is MoveResult.BLOCKED
    assert game.moves == 0
    assert game.tile_at(2, 1) == "E"


def test_no_moves_after_finish():
    game = Game(["11111", "1CPE1", "11111"])
    game.move(Direction.LEFT)
    game.move(Direction.RIGHT)
    assert game.move(Direction.RIGHT) is MoveResult.FINISHED
    with pytest.raises(RuntimeError):
        game.move(Direction.LEFT)


def test_invalid_map_rejected():
    with pytest.raises(MapError) as info:
        Game(["11111", "1P0E1", "11111"])
    assert info.value.kind is ErrorKind.INVALID_COUNT


def test_tile_at_out_of_range():
    game = Game(CORRIDOR)
    with pytest.raises(IndexError):
        game.tile_at(7, 0)


def test_direction_components_match_moves():
    assert (Direction.UP.dx, Direction.UP.dy) == (0, -1)
    assert (Direction.RIGHT.dx, Direction.RIGHT.dy) == (1, 0)
    game = Game(CORRIDOR)
    start_x, start_y = game.player
    game.move(Direction.RIGHT)
    assert game.player == (start_x + Direction.RIGHT.dx, start_y + Direction.RIGHT.dy)