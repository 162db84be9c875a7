"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.checkers.board import Board
from src.checkers.pieces import Checker, Player
from src.checkers.square import Square

Placement = tuple[int, int, Player, bool]


@pytest.fixture
def board_with_checkers() -> Callable[[list[Placement]], Board]:
    """Call the inner function with (x, y, player, is_kinged) tuples. Every other square stays empty."""

    def _create_board(placements: list[Placement]) -> Board:
        board = Board.empty()
        for x, y, player, is_kinged in placements:
            board.place_checker(Checker(player, is_kinged=is_kinged), Square(x, y))
        return board

    return _create_board


@pytest.fixture
def starting_board() -> Board:
    return Board.starting_position()
