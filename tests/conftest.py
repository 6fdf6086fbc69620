"""Shared test fixtures for Three-Piece TicTacToe."""

import io
from typing import Callable, Iterable

import numpy as np
import pytest

from console import ConsoleInput, ConsoleRenderer
from logic.game_state import Player, new_board
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker
from main import ThreePieceTicTacToe


@pytest.fixture
def board_factory() -> Callable[..., np.ndarray]:
    """Builds a board from the 1-9 positions each player holds."""

    def _factory(o: Iterable[int] = (), x: Iterable[int] = ()) -> np.ndarray:
        board = new_board()
        for position in o:
            board[position - 1] = Player.O.mark
        for position in x:
            board[position - 1] = Player.X.mark
        return board

    return _factory


@pytest.fixture
def validator() -> MoveValidator:
    return MoveValidator()


@pytest.fixture
def win_checker() -> WinChecker:
    return WinChecker()


@pytest.fixture
def game_factory() -> Callable[[str], ThreePieceTicTacToe]:
    """Game reading the given text as console input and printing to stdout."""

    def _factory(text: str = "") -> ThreePieceTicTacToe:
        return ThreePieceTicTacToe(
            input_source=ConsoleInput(io.StringIO(text)),
            renderer=ConsoleRenderer(),
        )

    return _factory
