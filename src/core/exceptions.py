"""
Custom exceptions raised at the boundaries of the application.

NOTE: The rules engine itself never raises on an illegal move. Those are ordinary outcomes (a boolean / MoveValidation).
These exceptions signal input that cannot even be turned into a board or a move.
"""


class GameError(Exception):
    """Top-level exception for anything going wrong in this application."""


class InvalidRequestError(GameError):
    """Request data (from the hosting layer) cannot be interpreted."""


class InvalidLayoutError(GameError):
    """A grid of square codes does not describe a valid checkers board."""
