"""
Whose turn is it?

States: Turn(player one), Turn(player two), and the terminal GameOver.
A capture that can be followed by another capture from the landing square keeps the turn with the same player.
"""

from dataclasses import dataclass
from typing import Optional

from src.checkers.pieces import Player
from src.checkers.square import Square


@dataclass
class TurnController:
    current_player: Player = Player.ONE
    chain_square: Optional[Square] = None
    is_game_over: bool = False

    @property
    def is_chain_in_progress(self) -> bool:
        return self.chain_square is not None

    def is_players_turn(self, player: Player) -> bool:
        return not self.is_game_over and player == self.current_player

    def may_move_from(self, square: Square) -> bool:
        """In the middle of a multi-jump only the jumping checker is allowed to continue."""
        return self.chain_square is None or square == self.chain_square

    def advance(self, landing_square: Square, was_capture: bool, can_jump_again: bool) -> None:
        """
        Called after a move has been applied.

        NOTE: can_jump_again is only looked at for a capture. A plain move always ends the turn.
        """
        if was_capture and can_jump_again:
            self.chain_square = landing_square
            return

        self.chain_square = None
        self.current_player = self.current_player.opponent

    def end_game(self) -> None:
        self.chain_square = None
        self.is_game_over = True

    def reset(self) -> None:
        self.current_player = Player.ONE
        self.chain_square = None
        self.is_game_over = False
