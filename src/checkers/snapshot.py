"""Read-only views of a game, handed to whoever hosts the engine."""

from dataclasses import dataclass
from typing import Self

from src.checkers.board import SquareCodes


@dataclass(frozen=True)
class BoardSnapshot:
    """
    squares[x][y] holds the code of the square in column x, row y:
    'X' empty, 'b'/'B' player one man/king, 'r'/'R' player two man/king.
    """

    is_player_ones_turn: bool
    squares: tuple[tuple[str, ...], ...]

    @classmethod
    def from_codes(cls, is_player_ones_turn: bool, squares: SquareCodes) -> Self:
        return cls(is_player_ones_turn, tuple(tuple(column) for column in squares))

    def to_codes(self) -> SquareCodes:
        return [list(column) for column in self.squares]


@dataclass(frozen=True)
class MoveResult:
    success: bool
    game_over: bool
    can_jump_again: bool
    message: str
    board_state: BoardSnapshot
