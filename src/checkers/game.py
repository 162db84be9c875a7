"""
The Game class is the entrypoint into the domain layer for the service layer.
It orchestrates a single turn: validate the move, update the board, pass the turn on (or not), check for the end of the game,
and hand a snapshot of the result back.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.checkers.board import Board
from src.checkers.moves import Move, MoveValidation, can_capture_from, legal_moves, validate
from src.checkers.pieces import Player
from src.checkers.rules import winner as find_winner
from src.checkers.snapshot import BoardSnapshot, MoveResult
from src.checkers.turns import TurnController

logger = logging.getLogger(__name__)

REJECTED_MOVE_MESSAGE = "You cannot make that move."
DEFAULT_PLAYER_LABELS: dict[Player, str] = {Player.ONE: "Player one", Player.TWO: "Player two"}


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board = field(default_factory=Board.starting_position)
    turns: TurnController = field(default_factory=TurnController)
    winner: Optional[Player] = None

    @classmethod
    def new_game(cls) -> Self:
        """Standard opening position, player one to move"""
        return cls()

    @classmethod
    def from_snapshot(cls, snapshot: BoardSnapshot) -> Self:
        """
        Continue from a position handed over by the hosting layer.

        NOTE: checkers get new identities, and a snapshot does not say if a multi-jump was in progress: it is assumed not.
        """
        board = Board.from_codes(snapshot.to_codes())
        current_player = Player.ONE if snapshot.is_player_ones_turn else Player.TWO
        game = cls(board=board, turns=TurnController(current_player=current_player))
        # the position might already be decided: the player to move has no checkers or no moves left
        game._update_game_status(current_player.opponent)
        return game

    def start_game(self) -> None:
        """(Re)start from the opening position"""
        self.board = Board.starting_position()
        self.turns.reset()
        self.winner = None
        logger.info("New game started")

    @property
    def current_player(self) -> Player:
        return self.turns.current_player

    @property
    def is_game_over(self) -> bool:
        return self.turns.is_game_over

    @property
    def can_jump_again(self) -> bool:
        return self.turns.is_chain_in_progress

    def get_snapshot(self) -> BoardSnapshot:
        return BoardSnapshot.from_codes(
            is_player_ones_turn=self.current_player == Player.ONE,
            squares=self.board.to_codes(),
        )

    def legal_moves(self) -> list[Move]:
        """Moves the player to move can choose from (useful for a frontend to highlight squares)"""
        if self.is_game_over:
            return []
        return [
            move
            for move in legal_moves(self.board, self.current_player)
            if self.turns.may_move_from(move.from_square)
        ]

    def submit_move(self, move: Move) -> bool:
        """
        Attempt to make a move
        -----

        1. Is it your turn (and is the game still going)?
        2. Validate the move (and, halfway a multi-jump, that the same checker continues)
        3. Update the board: move the checker, remove the captured checker, king it if it reached the far row
        4. Pass on the turn, unless the same checker can capture again
        5. Check if the game has ended

        An invalid move changes nothing and returns False.
        """
        if not self.turns.is_players_turn(move.player):
            logger.debug("Rejected %s by %s: not their turn", move.to_notation(), move.player.name)
            return False

        if not self.turns.may_move_from(move.from_square):
            logger.debug("Rejected %s: the jumping checker must continue", move.to_notation())
            return False

        validation = validate(self.board, move)
        if not validation.is_valid:
            logger.debug("Rejected %s by %s: %s", move.to_notation(), move.player.name, validation.reason)
            return False

        self._update_board(move, validation)

        can_jump_again = validation.is_capture and can_capture_from(
            self.board, move.player, move.to_square
        )
        self.turns.advance(move.to_square, validation.is_capture, can_jump_again)
        logger.debug("Accepted %s by %s", move.to_notation(), move.player.name)

        self._update_game_status(move.player)
        return True

    def make_move(self, move: Move, player_label: Optional[str] = None) -> MoveResult:
        """submit_move, with the outcome packaged for the hosting layer"""
        success = self.submit_move(move)
        return MoveResult(
            success=success,
            game_over=self.is_game_over,
            can_jump_again=success and self.can_jump_again,
            message=self._result_message(move, success, player_label),
            board_state=self.get_snapshot(),
        )

    # -- PRIVATE HELPERS ---
    def _update_board(self, move: Move, validation: MoveValidation) -> None:
        """Move, capture and kinging are applied together"""
        checker = self.board.move_checker(move.from_square, move.to_square)

        if validation.captured_square is not None:
            self.board.remove_checker(validation.captured_square)

        if not checker.is_kinged and move.to_square.y == move.player.promotion_row:
            checker.crown()
            logger.debug("Checker %s of %s got kinged", checker.id, move.player.name)

    def _update_game_status(self, last_mover: Player) -> None:
        """
        Only done once the turn has passed on. Halfway a multi-jump the opponent still has checkers (there is something left to capture),
        and removing more checkers can still change what the opponent is able to do.
        """
        if self.turns.is_chain_in_progress:
            return

        game_winner = find_winner(self.board, last_mover)
        if game_winner is not None:
            self.turns.end_game()
            self.winner = game_winner
            logger.info("Game over: %s won", last_mover.name)

    def _result_message(self, move: Move, success: bool, player_label: Optional[str]) -> str:
        if not success:
            return REJECTED_MOVE_MESSAGE
        label = player_label or DEFAULT_PLAYER_LABELS[move.player]
        message = f"{label} played {move.to_notation()}"
        if self.is_game_over:
            message += f". {label} wins!"
        return message
