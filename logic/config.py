"""
Game configuration for Three-Piece TicTacToe.
All the rules constants and console messages in one place.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change the messages here if you want a different look!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, stored as a flat list of 9 cells
    BOARD_SIZE = 3
    BOARD_CELLS = BOARD_SIZE * BOARD_SIZE

    # Character used for an empty cell
    EMPTY_MARK = "."

    # ==================== RULE SETTINGS ====================
    # Each player can have at most this many pieces on the board.
    # After that, a turn moves a piece instead of placing a new one.
    MAX_PIECES = 3

    # Mark of the player who moves first ("O" or "X")
    FIRST_PLAYER = "O"

    # ==================== INPUT SETTINGS ====================
    # Longest token read per turn ("5" to place, "38" to move 3 -> 8)
    MAX_TOKEN_LENGTH = 2
    QUIT_COMMAND = "q"

    # ==================== MESSAGES ====================
    PROMPT = "Player '{mark}' move: "
    INVALID_MOVE_MESSAGE = "Invalid move!"
    WIN_MESSAGE = "Player '{mark}' wins!"
    QUIT_MESSAGE = "Quitting...Bye!"
    NOT_IMPLEMENTED_MESSAGE = "Not implemented"

    INTRO = (
        "\nCLI Tic-Tac-Toe\n\n"
        "The numbers on the left side correspond to the position on the board.\n"
        "The 2 players are identified by characters 'O' and 'X'. The '.' is empty\n"
        "position on the board. This variation of the game allows player to have\n"
        "the maximum of 3 pieces. To place a mark, the player enters the appropriate\n"
        "number for the position. To move the mark, the player enters two numbers.\n"
        "Example: entering 38 will move the player from position 3 to position 8.\n"
        "To quit the game, enter 'q'.\n"
    )
