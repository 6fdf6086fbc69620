"""
Logic module for Three-Piece TicTacToe.
Handles game state, input validation, and win checking.
"""

from .config import GameConfig
from .game_state import GameState, GameStatus, Player, Place, Relocate
from .move_validator import MoveValidator, Correct, InvalidMove, Quit
from .win_checker import WinChecker

__version__ = "1.0.0"
