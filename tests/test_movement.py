from huntgrid.sim.board import Board
from huntgrid.sim.contracts import Direction, TileContent, TileHint
from huntgrid.sim.movement import (
    MoveResult,
    TileEffect,
    evaluate_tile,
    step,
    turn_or_move,
)
from huntgrid.sim.player import new_player


def test_first_press_turns_second_press_moves() -> None:
    board = Board(3)
    player = new_player((0, 0), heading=Direction.UP)

    assert turn_or_move(player, Direction.RIGHT, board) == MoveResult.TURNED
    assert player.heading == Direction.RIGHT
    assert player.position == (0, 0)

    assert turn_or_move(player, Direction.RIGHT, board) == MoveResult.MOVED
    assert player.position == (1, 0)
    assert board.tile(1, 0).discovered


def test_down_from_origin_turns_then_hits_the_edge() -> None:
    board = Board(4)
    player = new_player((0, 0), heading=Direction.UP)

    assert turn_or_move(player, Direction.DOWN, board) == MoveResult.TURNED
    assert player.heading == Direction.DOWN
    assert turn_or_move(player, Direction.DOWN, board) == MoveResult.BLOCKED
    assert player.position == (0, 0)


def test_up_moves_toward_higher_y() -> None:
    board = Board(4)
    player = new_player((0, 0), heading=Direction.UP)

    assert turn_or_move(player, Direction.UP, board) == MoveResult.MOVED
    assert player.position == (0, 1)


def test_movement_never_leaves_the_board() -> None:
    board = Board(2)
    player = new_player((0, 0), heading=Direction.UP)
    presses = [Direction.UP] * 4 + [Direction.RIGHT] * 4 + [Direction.LEFT] * 5
    for direction in presses:
        turn_or_move(player, direction, board)
        assert board.in_bounds(*player.position)
    assert player.position == (0, 1)


def test_discovered_tiles_stay_discovered() -> None:
    board = Board(3)
    player = new_player((0, 0), heading=Direction.UP)
    turn_or_move(player, Direction.UP, board)
    turn_or_move(player, Direction.DOWN, board)
    turn_or_move(player, Direction.DOWN, board)
    assert player.position == (0, 0)
    assert board.tile(0, 1).discovered
    assert board.tile(0, 0).discovered


def test_step() -> None:
    assert step((2, 2), Direction.UP) == (2, 3)
    assert step((2, 2), Direction.LEFT) == (1, 2)


def test_treasure_is_collected_once() -> None:
    board = Board(
        2, [[TileContent.EMPTY, TileContent.TREASURE], [TileContent.EMPTY] * 2]
    )
    player = new_player((1, 0))

    assert evaluate_tile(player, board) == TileEffect.COLLECTED
    assert board.content_at(1, 0) == TileContent.EMPTY
    assert TileHint.GLITTER not in board.tile(1, 0).hints
    assert evaluate_tile(player, board) == TileEffect.NONE


def test_fatal_tiles() -> None:
    board = Board(2, [[TileContent.HOLE, TileContent.HAZARD], [TileContent.EMPTY] * 2])

    fell = evaluate_tile(new_player((0, 0)), board)
    eaten = evaluate_tile(new_player((1, 0)), board)
    safe = evaluate_tile(new_player((0, 1)), board)

    assert fell == TileEffect.FELL and fell.is_fatal
    assert eaten == TileEffect.EATEN and eaten.is_fatal
    assert safe == TileEffect.NONE and not safe.is_fatal
