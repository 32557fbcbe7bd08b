"""
Game constants for the snake engine.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Each heading may only turn onto its two perpendicular headings
ALLOWED_TURNS = {
    UP: (LEFT, RIGHT),
    DOWN: (LEFT, RIGHT),
    LEFT: (UP, DOWN),
    RIGHT: (UP, DOWN),
}

# (row, col) offsets; row 0 is the top of the board
OFFSETS = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}

# Event names
EVENT_GAME_START = "gamestart"
EVENT_TICK = "tick"
EVENT_MOVE = "move"
EVENT_LEVEL_UP = "levelup"
EVENT_GAME_OVER = "gameover"
EVENT_GAME_END = "gameend"

# Game settings
DEFAULT_ROWS = 16
DEFAULT_COLS = 32
DEFAULT_TICK_RATE_MS = 400
MIN_TICK_RATE_MS = 20
LEVEL_UP_SPEEDUP = 0.10
SCORE_PER_FOOD = 10
DEFAULT_BODY = [(8, 16), (9, 16), (10, 16)]
