"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    GAME_OVER = "game over"


# --- NOTE: the domain layer has its own Player enum (src/checkers/pieces.py). This is the version the api layer speaks.
class PlayerSide(StrEnum):
    PLAYER_ONE = "player one"
    PLAYER_TWO = "player two"
