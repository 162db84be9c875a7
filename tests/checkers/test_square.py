"""Unit tests for /src/checkers/square.py"""

import pytest

from src.checkers.square import (
    BOARD_DIMENSIONS,
    Square,
    is_playable,
    jump_neighbors,
    midpoint,
    playable_squares,
    step_neighbors,
)


@pytest.mark.parametrize(
    "x, y, notation",
    [(x, y, f"{x}{y}") for x in range(8) for y in range(8)],
)
def test_notation_roundtrip(x: int, y: int, notation: str) -> None:
    """'52' is column 5, row 2 (and back)"""
    square = Square.from_notation(notation)
    assert square == Square(x, y)
    assert square.to_notation() == notation


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 1, True),
        (1, 0, True),
        (7, 6, True),
        (6, 7, True),
        (0, 0, False),
        (1, 1, False),
        (7, 7, False),
        (4, 2, False),
        (5, 3, False),
        (8, 3, False),  # 'I' column does not exist
        (-1, 0, False),
        (3, 8, False),
        (-2, -1, False),
    ],
)
def test_is_playable(x: int, y: int, expected: bool) -> None:
    """Exactly one of the coordinates even, and on the board"""
    assert is_playable(Square(x, y)) == expected


def test_half_the_squares_are_playable() -> None:
    squares = playable_squares()
    assert len(squares) == BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1] // 2
    assert all(is_playable(square) for square in squares)


def test_step_neighbors() -> None:
    assert set(step_neighbors(Square(3, 4))) == {
        Square(2, 3),
        Square(4, 3),
        Square(2, 5),
        Square(4, 5),
    }


def test_jump_neighbors() -> None:
    assert set(jump_neighbors(Square(3, 4))) == {
        Square(1, 2),
        Square(5, 2),
        Square(1, 6),
        Square(5, 6),
    }


def test_neighbors_are_not_bounds_checked() -> None:
    """Callers are the ones filtering with is_playable()"""
    corner = Square(0, 1)
    assert Square(-1, 0) in step_neighbors(corner)
    assert Square(-2, -1) in jump_neighbors(corner)
    assert [square for square in jump_neighbors(corner) if is_playable(square)] == [
        Square(2, 3)
    ]


def test_neighbors_do_not_change_the_square() -> None:
    square = Square(3, 4)
    _ = step_neighbors(square)
    _ = jump_neighbors(square)
    assert square == Square(3, 4)


@pytest.mark.parametrize(
    "from_xy, to_xy, expected",
    [
        ((5, 2), (3, 4), (4, 3)),
        ((3, 4), (5, 6), (4, 5)),
        ((2, 5), (0, 3), (1, 4)),
        ((6, 7), (4, 5), (5, 6)),
    ],
)
def test_midpoint(
    from_xy: tuple[int, int], to_xy: tuple[int, int], expected: tuple[int, int]
) -> None:
    assert midpoint(Square(*from_xy), Square(*to_xy)) == Square(*expected)
