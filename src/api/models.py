"""Requests and Response models: the contract with whatever hosts the engine (HTTP routes, a realtime hub, ...)"""

from typing import Optional, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.checkers.board import ALLOWED_CODES
from src.checkers.snapshot import BoardSnapshot, MoveResult
from src.checkers.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import PlayerSide


class ContractModel(BaseModel):
    """Fields are sent camelCased over the wire (isPlayerOnesTurn, canJumpAgain, ...)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- REQUEST MODELS ---
class SquareModel(ContractModel):
    x: int
    y: int


class MoveRequest(ContractModel):
    """`from` is a Python keyword, so the fields are named from_square / to_square and aliased."""

    player: PlayerSide
    from_square: SquareModel = Field(alias="from")
    to_square: SquareModel = Field(alias="to")


class NotationMoveRequest(ContractModel):
    """Squares written as two digits, column first: '52' is x=5, y=2"""

    player: PlayerSide
    source: str
    destination: str
    player_name: Optional[str] = None

    @field_validator(*["source", "destination"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        value = value.strip()
        if len(value) != 2 or not (value.isascii() and value.isdigit()):
            raise InvalidRequestError(
                f"Source and Destination must be two digit numbers, got: {value!r}"
            )
        return value


# --- RESPONSE MODELS ---
class BoardSnapshotModel(ContractModel):
    is_player_ones_turn: bool
    squares: list[list[str]]

    @field_validator("squares")
    @classmethod
    def validate_squares(cls, value: list[list[str]]) -> list[list[str]]:
        if len(value) != BOARD_DIMENSIONS[0] or any(
            len(column) != BOARD_DIMENSIONS[1] for column in value
        ):
            raise InvalidRequestError(
                f"Board state must be {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} squares."
            )
        unknown_codes = {code for column in value for code in column} - ALLOWED_CODES
        if unknown_codes:
            raise InvalidRequestError(
                f"Unknown square code(s): {','.join(sorted(unknown_codes))}"
            )
        return value

    @classmethod
    def from_snapshot(cls, snapshot: BoardSnapshot) -> Self:
        return cls(
            is_player_ones_turn=snapshot.is_player_ones_turn,
            squares=snapshot.to_codes(),
        )

    def to_snapshot(self) -> BoardSnapshot:
        return BoardSnapshot.from_codes(self.is_player_ones_turn, self.squares)


class MoveResultResponse(ContractModel):
    success: bool
    game_over: bool
    can_jump_again: bool
    message: str
    board_state: BoardSnapshotModel

    @classmethod
    def from_result(cls, result: MoveResult) -> Self:
        return cls(
            success=result.success,
            game_over=result.game_over,
            can_jump_again=result.can_jump_again,
            message=result.message,
            board_state=BoardSnapshotModel.from_snapshot(result.board_state),
        )
