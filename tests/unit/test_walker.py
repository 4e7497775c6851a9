import pytest

from monkey_map.models import Direction, Move, Turn
from monkey_map.parser import parse_board, parse_path
from monkey_map.walker import password, walk
from monkey_map.wrapping import FlatWrap


def test_password() -> None:
    assert password((8, 6), Direction.RIGHT) == 6032
    assert password((7, 5), Direction.UP) == 5031
    assert password((1, 1), (0, 1)) == 1005


def test_password_rejects_non_canonical_facing() -> None:
    with pytest.raises(ValueError):
        password((1, 1), (1, 1))


def test_move_straight() -> None:
    board = parse_board(["....", ".#..", "...."])
    result = walk(board, [Move(3)], FlatWrap())
    assert result.position == (4, 1)
    assert result.facing == Direction.RIGHT


def test_move_wraps_several_times_in_one_instruction() -> None:
    board = parse_board(["....", ".#..", "...."])
    result = walk(board, [Move(10)], FlatWrap())
    assert result.position == (3, 1)


def test_wall_discards_remaining_steps() -> None:
    board = parse_board(["....", "..#.", "...."])
    result = walk(board, [Move(5), Turn(clockwise=True), Move(1)], FlatWrap(), start=((1, 2), Direction.RIGHT), trace=True)

    assert result.steps[0].position == (2, 2)
    assert result.steps[0].steps_taken == 1
    assert result.steps[0].blocked
    assert result.position == (2, 3)
    assert result.facing == Direction.DOWN


def test_wall_after_wrap_blocks_move() -> None:
    board = parse_board(["#.."])
    result = walk(board, [Move(2)], FlatWrap(), start=((3, 1), Direction.RIGHT), trace=True)

    assert result.position == (3, 1)
    assert result.facing == Direction.RIGHT
    assert result.steps[0].blocked
    assert result.steps[0].wraps == 0


def test_turns_keep_position() -> None:
    board = parse_board(["..", ".."])
    result = walk(board, parse_path("LLRL"), FlatWrap())
    assert result.position == (1, 1)
    assert result.facing == Direction.LEFT


def test_default_start() -> None:
    board = parse_board(["  #..", "  ..."])
    result = walk(board, [], FlatWrap())
    assert (result.position, result.facing) == ((4, 1), Direction.RIGHT)


def test_trace_records_visits() -> None:
    board = parse_board(["...", "..."])
    result = walk(board, parse_path("2R1"), FlatWrap(), trace=True)

    assert [str(step.instruction) for step in result.steps] == ["2", "R", "1"]
    assert result.steps[2].position == (3, 2)
    assert result.visited == [
        ((1, 1), Direction.RIGHT),
        ((2, 1), Direction.RIGHT),
        ((3, 1), Direction.RIGHT),
        ((3, 1), Direction.DOWN),
        ((3, 2), Direction.DOWN),
    ]
    assert result.trail() == {(1, 1): ">", (2, 1): ">", (3, 1): "v", (3, 2): "v"}
    assert result.password == 2000 + 12 + 1


def test_no_trace_by_default() -> None:
    board = parse_board(["..."])
    result = walk(board, [Move(1)], FlatWrap())
    assert result.steps == []
    assert result.visited == []


def test_wrap_onto_same_tile_is_not_blocked() -> None:
    # Row 2 holds a single tile, so every step right wraps back onto it
    board = parse_board(["...", " . "])
    result = walk(board, [Move(3)], FlatWrap(), start=((2, 2), Direction.RIGHT), trace=True)

    assert result.position == (2, 2)
    assert result.steps[0].steps_taken == 3
    assert result.steps[0].wraps == 3
    assert not result.steps[0].blocked
