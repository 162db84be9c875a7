"""Defines the players and the checkers they play with"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Self
from uuid import UUID, uuid4


class Player(Enum):
    """Exactly two players. Values are the direction along the y-axis a man of that player moves in."""

    ONE = 1
    TWO = -1

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self == Player.ONE else Player.ONE

    @property
    def forward(self) -> int:
        return self.value

    @property
    def baseline(self) -> int:
        """The row the player starts on"""
        return 0 if self == Player.ONE else 7

    @property
    def promotion_row(self) -> int:
        """Reaching the opponent's baseline gets a checker kinged"""
        return self.opponent.baseline


# Square codes as sent to the frontend: lower case a man, upper case a king.
EMPTY_CODE = "X"
PLAYER_CODES: dict[Player, str] = {Player.ONE: "b", Player.TWO: "r"}
CODE_TO_PLAYER: dict[str, Player] = {value: key for key, value in PLAYER_CODES.items()}


@dataclass
class Checker:
    """
    A single checker. The owner never changes; the id only exists to recognise the same checker after it moved.
    """

    player: Player
    is_kinged: bool = False
    id: UUID = field(default_factory=uuid4)

    @classmethod
    def from_code(cls, code: str) -> Optional[Self]:
        """'X' is an empty square, so no checker is created"""
        if code == EMPTY_CODE:
            return None
        player = CODE_TO_PLAYER[code.lower()]
        return cls(player, is_kinged=code.isupper())

    def to_code(self) -> str:
        code = PLAYER_CODES[self.player]
        return code.upper() if self.is_kinged else code

    def crown(self) -> None:
        self.is_kinged = True
