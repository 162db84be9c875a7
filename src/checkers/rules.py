"""Checks for ending the game"""

from typing import Optional

from src.checkers.moves import Board, has_legal_move
from src.checkers.pieces import Player


def is_game_over(board: Board, last_mover: Player) -> bool:
    """
    Looked at from the side of the player who moves next (the opponent of last_mover).

    1. No checkers left -> lost.
    2. Checkers left, but none of them can move or capture -> also lost (stalemate counts as a loss).
    """
    next_player = last_mover.opponent
    if not board.locate_player(next_player):
        return True
    return not has_legal_move(board, next_player)


def winner(board: Board, last_mover: Player) -> Optional[Player]:
    """Given the game is over, the player who made the last move won it."""
    return last_mover if is_game_over(board, last_mover) else None
