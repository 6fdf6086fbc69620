"""
Main game script for Three-Piece TicTacToe.

This script ties together:
- Console (reading moves, printing the board)
- Logic (game state, move validation, win checking)

Each player may have at most 3 pieces on the board. After that, a turn
moves one of your pieces to an empty cell instead of placing a new one.
Run this script to play against a friend on the same terminal!
"""

import sys
from typing import Optional

from console import ConsoleInput, ConsoleRenderer
from logic.config import GameConfig
from logic.game_state import GameState
from logic.move_validator import Correct, InputResult, InvalidMove, MoveValidator, Quit
from logic.win_checker import WinChecker


class ThreePieceTicTacToe:
    """
    Runs one game.

    Game flow:
    1. Active player enters a token ("5", "38" or "q")
    2. The token is validated against the board
    3. A correct move is applied, the board is shown and checked for a win
    4. Otherwise, the same player is asked again (or the game ends on quit)
    5. Repeat until someone wins or quits
    """

    def __init__(
        self,
        input_source: Optional[ConsoleInput] = None,
        renderer: Optional[ConsoleRenderer] = None
    ):
        """
        Args:
            input_source: Where moves come from (default: stdin).
            renderer: Where the board and messages go (default: stdout).
        """
        self.input_source = input_source or ConsoleInput()
        self.renderer = renderer or ConsoleRenderer()

        self.game_state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    def play(self) -> GameState:
        """
        Play until someone wins or quits.

        Returns:
            The final game state.
        """
        self.renderer.render_intro()
        self.renderer.render(self.game_state.board)

        while not self.game_state.is_game_over:
            player = self.game_state.current_player
            token = self.input_source.read_token(
                GameConfig.PROMPT.format(mark=player.mark)
            )
            self.step(token)

        return self.game_state

    def step(self, token: Optional[str]) -> InputResult:
        """
        Handle one token for the active player.

        Args:
            token: What the player entered, None at end of input.

        Returns:
            How the token was classified.
        """
        if self.game_state.is_game_over:
            raise RuntimeError("Game is already over!")

        player = self.game_state.current_player

        # End of input counts as quitting
        if token is None:
            result = Quit()
        else:
            result = self.validator.evaluate(token, self.game_state.board, player)

        if isinstance(result, Correct):
            self.game_state.apply_move(result.move)
            self.renderer.render(self.game_state.board)
            if self.win_checker.did_player_win(self.game_state.board, player):
                self.game_state.declare_winner(player)
                self.renderer.message(GameConfig.WIN_MESSAGE.format(mark=player.mark))
            else:
                self.game_state.switch_player()
        elif isinstance(result, InvalidMove):
            self.renderer.message(GameConfig.INVALID_MOVE_MESSAGE)
            # Drop the rest of a bad line so it is not read as the next move
            self.input_source.flush_line()
        elif isinstance(result, Quit):
            self.renderer.message(GameConfig.QUIT_MESSAGE)
            self.game_state.abort()
        else:
            self.renderer.message(GameConfig.NOT_IMPLEMENTED_MESSAGE)

        return result


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Tic-Tac-Toe for two players, at most 3 pieces each"
    )
    parser.parse_args()

    game = ThreePieceTicTacToe()

    try:
        game.play()
    except KeyboardInterrupt:
        print("\n" + GameConfig.QUIT_MESSAGE)
        game.game_state.abort()

    return 0


if __name__ == "__main__":
    sys.exit(main())
