"""
Game state management for Three-Piece TicTacToe.
Tracks the board, current player, and game status.
"""

from enum import Enum
from typing import Optional, Union
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig


class Player(Enum):
    """The two players in the game. The value is the mark drawn on the board."""
    O = "O"
    X = "X"

    @property
    def mark(self) -> str:
        return self.value

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.X if self == Player.O else Player.O


class GameStatus(Enum):
    """Where the game is. WON and ABORTED are terminal."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    ABORTED = "aborted"


@dataclass(frozen=True)
class Place:
    """Put a new piece on an empty cell."""
    target: int             # Board index (0-8)


@dataclass(frozen=True)
class Relocate:
    """Move one of the player's pieces to an empty cell."""
    source: int             # Board index the piece leaves (0-8)
    target: int             # Board index the piece lands on (0-8)


Move = Union[Place, Relocate]


def new_board() -> np.ndarray:
    """Create an empty board: 9 cells, position = index + 1."""
    return np.full(GameConfig.BOARD_CELLS, GameConfig.EMPTY_MARK, dtype="<U1")


def count_pieces(board: np.ndarray, player: Player) -> int:
    """Number of cells holding the player's mark."""
    return int(np.count_nonzero(board == player.mark))


def all_pieces_in(board: np.ndarray, player: Player) -> bool:
    """True once the player has placed all of their pieces."""
    return count_pieces(board, player) >= GameConfig.MAX_PIECES


def apply_move(board: np.ndarray, move: Move, player: Player) -> None:
    """
    Apply an already validated move to the board in place.

    Nothing is re-checked here - run the move through MoveValidator first.

    Args:
        board: The board to update.
        move: Place or Relocate.
        player: Who is moving.
    """
    if isinstance(move, Relocate):
        board[move.source] = GameConfig.EMPTY_MARK
    board[move.target] = player.mark


@dataclass
class GameState:
    """
    The complete state of one game.

    Tracks:
    - The board (9 cells, '.' or a player's mark)
    - Current player
    - Game status (in progress, won, aborted) and the winner
    """

    board: np.ndarray = field(default_factory=new_board)

    # Current player's turn
    current_player: Player = Player(GameConfig.FIRST_PLAYER)

    # Game result
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Player] = None

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def apply_move(self, move: Move) -> None:
        """Apply a validated move for the current player."""
        apply_move(self.board, move, self.current_player)

    def switch_player(self):
        self.current_player = self.current_player.opposite()

    def declare_winner(self, player: Player):
        self.status = GameStatus.WON
        self.winner = player

    def abort(self):
        self.status = GameStatus.ABORTED
