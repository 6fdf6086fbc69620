"""
Console input and output for Three-Piece TicTacToe.

ConsoleInput reads one short token per turn, the way the game expects
("5" to place, "38" to move, "q" to quit). ConsoleRenderer prints the
board next to the position numbers:

    1 2 3 | O . .
    4 5 6 | . X .
    7 8 9 | . . .
"""

import sys
from typing import Optional, TextIO

import numpy as np

from logic.config import GameConfig


class ConsoleInput:
    """
    Reads whitespace separated tokens of at most MAX_TOKEN_LENGTH characters.

    Whatever is left of a line after a token stays buffered and becomes
    the next token, unless flush_line() throws it away.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
        max_token_length: int = GameConfig.MAX_TOKEN_LENGTH
    ):
        """
        Args:
            stream: Where input comes from (default: stdin).
            output: Where prompts go (default: stdout).
            max_token_length: Longest token returned by one read.
        """
        self.stream = stream if stream is not None else sys.stdin
        self.output = output
        self.max_token_length = max_token_length

        # Undecodable bytes become U+FFFD, which is never a valid move
        if hasattr(self.stream, "reconfigure"):
            self.stream.reconfigure(errors="replace")

        # Unread remainder of the current line
        self._line = ""

    def read_token(self, prompt: str = "") -> Optional[str]:
        """
        Show the prompt and read the next token.

        Returns:
            The token, or None once the input is exhausted.
        """
        if prompt:
            print(prompt, end="", flush=True, file=self.output)

        # Skip blank space, across as many lines as it takes
        self._line = self._line.lstrip()
        while not self._line:
            line = self.stream.readline()
            if line == "":
                return None
            self._line = line.lstrip()

        length = 0
        while (length < self.max_token_length and length < len(self._line)
               and not self._line[length].isspace()):
            length += 1

        token, self._line = self._line[:length], self._line[length:]
        return token

    def flush_line(self):
        """Discard the rest of the current line."""
        self._line = ""


class ConsoleRenderer:
    """Prints the board and game messages."""

    def __init__(self, stream: Optional[TextIO] = None):
        # None means "whatever sys.stdout is when printing"
        self.stream = stream

    def render(self, board: np.ndarray):
        """
        Print the board, one row per line, positions on the left.

        Args:
            board: 9 cells, index = position - 1.
        """
        size = GameConfig.BOARD_SIZE
        lines = []
        for row in range(size):
            start = row * size
            positions = " ".join(str(start + col + 1) for col in range(size))
            marks = " ".join(str(cell) for cell in board[start:start + size])
            lines.append(f"{positions} | {marks}")

        print("\n" + "\n".join(lines), file=self.stream)

    def render_intro(self):
        print(GameConfig.INTRO, end="", file=self.stream)

    def message(self, text: str):
        print(text, file=self.stream)
