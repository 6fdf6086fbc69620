"""
Move validator for Three-Piece TicTacToe.
Turns the text a player typed into a move, or rejects it.
"""

from typing import List, Union
from dataclasses import dataclass

import numpy as np

from .config import GameConfig
from .game_state import Move, Place, Player, Relocate, all_pieces_in


@dataclass(frozen=True)
class Correct:
    """The input is a legal move."""
    move: Move


@dataclass(frozen=True)
class InvalidMove:
    """The input is not a legal move for this player right now."""
    reason: str


@dataclass(frozen=True)
class Quit:
    """The player asked to quit."""


InputResult = Union[Correct, InvalidMove, Quit]


class MoveValidator:
    """
    Validates Three-Piece TicTacToe input.

    Rules:
    1. 'q' (any case) quits, whatever the board looks like
    2. Input must be a positive number
    3. While a player has fewer than 3 pieces, they enter one digit
       to place a piece on an empty cell
    4. Once a player has 3 pieces, they enter two digits to move one
       of their pieces to an empty cell ("38" moves 3 -> 8)
    """

    def evaluate(self, token: str, board: np.ndarray, player: Player) -> InputResult:
        """
        Classify one token of input.

        Args:
            token: Raw text the player entered.
            board: Current board (not modified).
            player: Player whose turn it is.

        Returns:
            Correct with the parsed move, InvalidMove, or Quit.
        """
        if token.lower() == GameConfig.QUIT_COMMAND:
            return Quit()

        # Input must be numeric
        if not (token.isascii() and token.isdigit()) or int(token) == 0:
            return InvalidMove(f"'{token}' is not a position")
        number = int(token)

        if all_pieces_in(board, player):
            return self._evaluate_relocation(token, number, board, player)
        return self._evaluate_placement(token, number, board)

    def _evaluate_placement(self, token: str, number: int, board: np.ndarray) -> InputResult:
        # Two characters means a move, and there is nothing to move yet
        if len(token) == 2:
            return InvalidMove("place a piece first, enter a single position")

        target = number - 1
        if not self._on_board(target):
            return InvalidMove(f"position {number} is not on the board")
        if board[target] != GameConfig.EMPTY_MARK:
            return InvalidMove(f"position {number} is already taken")

        return Correct(Place(target))

    def _evaluate_relocation(
        self,
        token: str,
        number: int,
        board: np.ndarray,
        player: Player
    ) -> InputResult:
        if len(token) == 1:
            return InvalidMove("all pieces are in, enter two positions to move")

        source = number // 10 - 1
        target = number % 10 - 1
        if not (self._on_board(source) and self._on_board(target)):
            return InvalidMove(f"'{token}' does not name two board positions")
        # >>from<< position must hold the player's own piece
        if board[source] != player.mark:
            return InvalidMove(f"position {source + 1} is not yours")
        if board[target] != GameConfig.EMPTY_MARK:
            return InvalidMove(f"position {target + 1} is already taken")

        return Correct(Relocate(source, target))

    @staticmethod
    def _on_board(index: int) -> bool:
        return 0 <= index < GameConfig.BOARD_CELLS

    def get_valid_moves(self, board: np.ndarray, player: Player) -> List[Move]:
        """
        Get all valid moves for a player.

        Args:
            board: Current board.
            player: The player to move.

        Returns:
            List of Place moves, or Relocate moves once all pieces are in.
        """
        empty = [int(i) for i in np.flatnonzero(board == GameConfig.EMPTY_MARK)]

        if not all_pieces_in(board, player):
            return [Place(target) for target in empty]

        own = [int(i) for i in np.flatnonzero(board == player.mark)]
        return [Relocate(source, target) for source in own for target in empty]
