"""
Move validation: all the rules that decide whether a single move may be played on a given board.

Everything in here is a pure function of (board, move). Nothing mutates the board,
and nothing raises: a move that makes no sense is simply invalid.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Self

from src.checkers.pieces import Checker, Player
from src.checkers.square import Square, is_playable, jump_neighbors, midpoint, step_neighbors


class Board(Protocol):
    """Just the parts the validator needs"""

    def checker(self, square: Square) -> Optional[Checker]: ...
    def is_empty(self, square: Square) -> bool: ...
    def locate_player(self, player: Player) -> list[Square]: ...


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    player: Player
    from_square: Square
    to_square: Square

    @classmethod
    def from_notation(cls, player: Player, source: str, destination: str) -> Self:
        """Squares as two digits, ex. '52' -> '43' moves the checker on (5, 2) to (4, 3)"""
        return cls(player, Square.from_notation(source), Square.from_notation(destination))

    def to_notation(self) -> str:
        return f"{self.from_square.to_notation()}-{self.to_square.to_notation()}"


@dataclass(frozen=True)
class MoveValidation:
    """Verdict on a move. For a capture, also which checker gets taken (and from where)."""

    is_valid: bool = False
    captured_square: Optional[Square] = None
    captured_checker: Optional[Checker] = None
    reason: str = ""

    @property
    def is_capture(self) -> bool:
        return self.captured_square is not None

    @classmethod
    def rejected(cls, reason: str) -> Self:
        return cls(is_valid=False, reason=reason)


def validate(board: Board, move: Move) -> MoveValidation:
    """
    Check a move against the rules.
    ----

    1. Both squares must be playable.
    2. The from square must hold one of your own checkers.
    3. The to square must be empty.
    4. The move must be diagonal (and actually go somewhere).
    5. Distance 2 is a capture: you must jump over an opponent's checker.
       Distance 1 is a plain step: only allowed when you have no capture anywhere (forced capture).
    6. Men only move forward. Kings move in any direction.

    NOTE: Any failure returns immediately. The default verdict is "invalid".
    """
    if not (is_playable(move.from_square) and is_playable(move.to_square)):
        return MoveValidation.rejected("Both squares must be playable squares.")

    moving_checker = board.checker(move.from_square)
    if moving_checker is None or moving_checker.player != move.player:
        return MoveValidation.rejected("You do not have a checker on that square.")

    if not board.is_empty(move.to_square):
        return MoveValidation.rejected("The destination is occupied.")

    delta_x = move.to_square.x - move.from_square.x
    delta_y = move.to_square.y - move.from_square.y
    if delta_x == 0 or abs(delta_x) != abs(delta_y):
        return MoveValidation.rejected("Checkers only move diagonally.")

    captured_square: Optional[Square] = None
    captured_checker: Optional[Checker] = None
    if abs(delta_x) == 2:
        captured_square = midpoint(move.from_square, move.to_square)
        captured_checker = board.checker(captured_square)
        if captured_checker is None or captured_checker.player == move.player:
            return MoveValidation.rejected("A jump must capture an opponent's checker.")
    elif abs(delta_x) != 1:
        return MoveValidation.rejected("A move is either a single step or a jump.")
    elif has_capture_available(board, move.player):
        return MoveValidation.rejected("A capture is available, so you must capture.")

    if not moving_checker.is_kinged and (delta_y * move.player.forward) < 0:
        return MoveValidation.rejected("Only a king can move backwards.")

    return MoveValidation(
        is_valid=True,
        captured_square=captured_square,
        captured_checker=captured_checker,
    )


def is_valid_move(board: Board, move: Move) -> bool:
    return validate(board, move).is_valid


# --- FORCED CAPTURE ---
def can_capture_from(board: Board, player: Player, square: Square) -> bool:
    """Does the checker standing on this square have any jump available?"""
    return any(
        is_valid_move(board, Move(player, square, landing))
        for landing in jump_neighbors(square)
    )


def has_capture_available(board: Board, player: Player) -> bool:
    """
    Forced capture rule: if ANY of your checkers can capture, no plain move is allowed (with any checker).

    NOTE: only jumps get validated here, and validating a jump never comes back to this function.
    """
    return any(
        can_capture_from(board, player, square) for square in board.locate_player(player)
    )


# --- MOBILITY ---
def candidate_moves(board: Board, player: Player) -> list[Move]:
    """All eight diagonal neighbours (4 steps + 4 jumps) of each of the player's checkers. Legality is not checked yet."""
    return [
        Move(player, square, target)
        for square in board.locate_player(player)
        for target in step_neighbors(square) + jump_neighbors(square)
    ]


def legal_moves(board: Board, player: Player) -> list[Move]:
    return [move for move in candidate_moves(board, player) if is_valid_move(board, move)]


def has_legal_move(board: Board, player: Player) -> bool:
    return any(is_valid_move(board, move) for move in candidate_moves(board, player))
