"""The Board owns the checkers: where they stand, and when they leave the game (captured)."""

from dataclasses import dataclass
from typing import Optional, Self

from src.checkers.pieces import EMPTY_CODE, PLAYER_CODES, Checker, Player
from src.checkers.square import BOARD_DIMENSIONS, Square, is_playable, playable_squares
from src.core.exceptions import InvalidLayoutError

ALLOWED_CODES = {EMPTY_CODE} | {
    code for player_code in PLAYER_CODES.values() for code in (player_code, player_code.upper())
}
SquareCodes = list[list[str]]

# Players start on the playable squares of the three rows nearest their baseline
STARTING_ROWS: dict[Player, range] = {
    Player.ONE: range(0, 3),
    Player.TWO: range(5, 8),
}


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Occupied:
    checker: Checker


Cell = Empty | Occupied


@dataclass
class Board:
    """
    Only the playable squares are stored. A square that is not in `position` can never hold a checker,
    so asking for it just returns None instead of raising.
    """

    position: dict[Square, Cell]

    @classmethod
    def empty(cls) -> Self:
        return cls({square: Empty() for square in playable_squares()})

    @classmethod
    def starting_position(cls) -> Self:
        board = cls.empty()
        for player, rows in STARTING_ROWS.items():
            for square in board.position:
                if square.y in rows:
                    board.place_checker(Checker(player), square)
        return board

    @classmethod
    def from_codes(cls, squares: SquareCodes) -> Self:
        """
        Construct a board from the grid of square codes used in a BoardSnapshot.

        The grid is indexed squares[x][y] (column first), each code is one of:
        * 'X': empty
        * 'b' / 'B': player one's man / king
        * 'r' / 'R': player two's man / king
        """
        if len(squares) != BOARD_DIMENSIONS[0] or any(
            len(column) != BOARD_DIMENSIONS[1] for column in squares
        ):
            raise InvalidLayoutError(
                f"Board must be {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} squares."
            )

        board = cls.empty()
        for x, column in enumerate(squares):
            for y, code in enumerate(column):
                if code not in ALLOWED_CODES:
                    raise InvalidLayoutError(
                        f"Unknown code {code!r} at ({x}, {y}). Pick one from {','.join(sorted(ALLOWED_CODES))}"
                    )
                checker = Checker.from_code(code)
                if checker is None:
                    continue
                square = Square(x, y)
                if not is_playable(square):
                    raise InvalidLayoutError(
                        f"Checker placed on ({x}, {y}), which is not a playable square."
                    )
                board.place_checker(checker, square)
        return board

    def to_codes(self) -> SquareCodes:
        """Inverse of from_codes"""
        return [
            [self._code(Square(x, y)) for y in range(BOARD_DIMENSIONS[1])]
            for x in range(BOARD_DIMENSIONS[0])
        ]

    def _code(self, square: Square) -> str:
        checker = self.checker(square)
        return checker.to_code() if checker else EMPTY_CODE

    def cell(self, square: Square) -> Cell:
        """Non-playable (or off-board) squares read as empty"""
        if not is_playable(square):
            return Empty()
        return self.position[square]

    def checker(self, square: Square) -> Optional[Checker]:
        match self.cell(square):
            case Occupied(checker):
                return checker
            case _:
                return None

    def is_empty(self, square: Square) -> bool:
        return isinstance(self.cell(square), Empty)

    def locate_player(self, player: Player) -> list[Square]:
        return [
            square
            for square, cell in self.position.items()
            if isinstance(cell, Occupied) and cell.checker.player == player
        ]

    def count_checkers(self, player: Player) -> int:
        return len(self.locate_player(player))

    def place_checker(self, checker: Checker, square: Square) -> None:
        self.position[square] = Occupied(checker)

    def remove_checker(self, square: Square) -> Optional[Checker]:
        """A checker removed from the board is gone for good (it got captured)"""
        checker = self.checker(square)
        self.position[square] = Empty()
        return checker

    def move_checker(self, from_square: Square, to_square: Square) -> Checker:
        """Update the position on the board. Legality has been checked before calling this."""
        checker = self.checker(from_square)
        # for the type checker: only called after the move got validated
        assert checker is not None
        self.position[from_square] = Empty()
        self.position[to_square] = Occupied(checker)
        return checker
