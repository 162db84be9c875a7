"""Orchestration of communication from the hosting layer to the rules engine (and the reverse direction)."""

import logging
from typing import Optional

from src.api.models import (
    BoardSnapshotModel,
    MoveRequest,
    MoveResultResponse,
    NotationMoveRequest,
)
from src.checkers.game import Game
from src.checkers.moves import Move
from src.checkers.pieces import Player
from src.checkers.square import Square
from src.core.config import Settings
from src.core.shared_types import PlayerSide, Status

logger = logging.getLogger(__name__)

SIDE_TO_PLAYER: dict[PlayerSide, Player] = {
    PlayerSide.PLAYER_ONE: Player.ONE,
    PlayerSide.PLAYER_TWO: Player.TWO,
}


class CheckersService:
    """
    Works on exactly one game, handed to it by the caller. Whoever owns the service owns the game's lifecycle.

    NOTE: no locking here. Concurrent callers must take turns before calling in.
    """

    def __init__(self, game: Game, settings: Optional[Settings] = None) -> None:
        self.game = game
        self.settings = settings or Settings()

    # -- Hosting layer logic ---
    def new_game(self) -> BoardSnapshotModel:
        """Reset the game to the opening position"""
        self.game.start_game()
        return self.get_board_state()

    def get_board_state(self) -> BoardSnapshotModel:
        return BoardSnapshotModel.from_snapshot(self.game.get_snapshot())

    def status(self) -> Status:
        return Status.GAME_OVER if self.game.is_game_over else Status.IN_PROGRESS

    def make_move(
        self, request: MoveRequest, player_name: Optional[str] = None
    ) -> MoveResultResponse:
        """Make a move attempt."""
        player = SIDE_TO_PLAYER[request.player]
        move = Move(
            player=player,
            from_square=Square(request.from_square.x, request.from_square.y),
            to_square=Square(request.to_square.x, request.to_square.y),
        )
        return self._play(move, player_name)

    def make_move_from_notation(self, request: NotationMoveRequest) -> MoveResultResponse:
        """Same as make_move, with the squares written as two digits"""
        player = SIDE_TO_PLAYER[request.player]
        move = Move.from_notation(player, request.source, request.destination)
        return self._play(move, request.player_name)

    # -- Internal helpers --
    def _play(self, move: Move, player_name: Optional[str]) -> MoveResultResponse:
        result = self.game.make_move(move, player_label=player_name or self._label(move.player))
        if not result.success:
            logger.info("%s tried an invalid move: %s", move.player.name, move.to_notation())
        return MoveResultResponse.from_result(result)

    def _label(self, player: Player) -> str:
        return (
            self.settings.player_one_label
            if player == Player.ONE
            else self.settings.player_two_label
        )
