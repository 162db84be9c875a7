"""
A square on the board, plus the diagonal arithmetic every rule is built from.

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Checkers board is always 8x8. Same as in chess, keep it in one place.
BOARD_DIMENSIONS = (8, 8)

Vector = tuple[int, int]

STEP_DIRECTIONS: tuple[Vector, ...] = ((1, -1), (1, 1), (-1, 1), (-1, -1))
JUMP_DIRECTIONS: tuple[Vector, ...] = tuple((2 * dx, 2 * dy) for dx, dy in STEP_DIRECTIONS)


@dataclass(frozen=True)
class Square:
    """x is the column (0-7), y is the row (0-7). Row 0 is where player one starts."""

    x: int
    y: int

    @classmethod
    def from_notation(cls, notation: str) -> Square:
        """Two digits, column first: '52' gets converted to (5, 2)"""
        return cls(int(notation[0]), int(notation[1]))

    def to_notation(self) -> str:
        return f"{self.x}{self.y}"

    def offset(self, vector: Vector) -> Square:
        """No bounds checking here. Use is_playable() on the result before touching the board."""
        dx, dy = vector
        return Square(self.x + dx, self.y + dy)

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_DIMENSIONS[0]) and (0 <= self.y < BOARD_DIMENSIONS[1])


def is_playable(square: Square) -> bool:
    """Only the dark squares are used: exactly one of the coordinates is even."""
    return square.is_within_bounds() and ((square.x % 2 == 0) != (square.y % 2 == 0))


def step_neighbors(square: Square) -> list[Square]:
    """The four diagonal neighbours (a plain move). Might fall off the board."""
    return [square.offset(vector) for vector in STEP_DIRECTIONS]


def jump_neighbors(square: Square) -> list[Square]:
    """The four squares two diagonals away (landing squares of a capture). Might fall off the board."""
    return [square.offset(vector) for vector in JUMP_DIRECTIONS]


def midpoint(from_square: Square, to_square: Square) -> Square:
    """Square halfway in between: for a jump this is the square being jumped over"""
    return Square((from_square.x + to_square.x) // 2, (from_square.y + to_square.y) // 2)


def playable_squares() -> list[Square]:
    """All 32 squares a checker can ever stand on, column by column."""
    return [
        square
        for x in range(BOARD_DIMENSIONS[0])
        for y in range(BOARD_DIMENSIONS[1])
        if is_playable(square := Square(x, y))
    ]
