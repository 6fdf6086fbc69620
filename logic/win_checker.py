"""
Win checker for Three-Piece TicTacToe.
Checks if a player has three marks in a line.
"""

import numpy as np

from .game_state import Player


class WinChecker:
    """
    Checks for win conditions.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).

    There is no draw - a piece can always be moved, so the game
    goes on until someone wins or quits.
    """

    # All possible winning lines, as board positions (1-9)
    WINNING_POSITIONS = [
        # Rows
        [1, 2, 3],
        [4, 5, 6],
        [7, 8, 9],
        # Columns
        [1, 4, 7],
        [2, 5, 8],
        [3, 6, 9],
        # Diagonals
        [1, 5, 9],
        [3, 5, 7],
    ]

    # Same lines as board indices (0-8), shape (8, 3)
    WINNING_LINES = np.array(WINNING_POSITIONS) - 1

    def did_player_win(self, board: np.ndarray, player: Player) -> bool:
        """
        Check if the player holds every cell of some line.

        Args:
            board: The game board.
            player: The player who just moved.

        Returns:
            True if the player has three in a line.
        """
        return bool(np.any(np.all(board[self.WINNING_LINES] == player.mark, axis=1)))
