# Board defaults. Width is both the number of rows and columns.
DEFAULT_WIDTH = 10
DEFAULT_COLORS = 5
MIN_WIDTH = 1
MAX_WIDTH = 40

# Tile value for an empty cell; colors are 1..K.
EMPTY = 0

# Index 0 is the board background, 1..K are the tile colors.
PALETTE = (
    (7, 54, 66),       # background #073642
    (220, 50, 47),     # red
    (133, 153, 0),     # green
    (38, 139, 210),    # blue
    (181, 137, 0),     # yellow
    (211, 54, 130),    # magenta
    (42, 161, 152),    # cyan
    (203, 75, 22),     # orange
    (108, 113, 196),   # violet
)
MAX_COLORS = len(PALETTE) - 1

# Window
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Collapse"
BACKGROUND_COLOR = (0, 43, 54)  # #002b36

# The board is a square sized to this fraction of the shorter window side
# (after reserving the score bar at the top).
BOARD_MAX_PCT = 0.90
SCORE_BAR_HEIGHT = 40
MIN_TILE_SIZE = 4
# Gap between neighbouring tiles in pixels.
TILE_PADDING = 2

SCORE_FONT_SIZE = 18
BANNER_FONT_SIZE = 28
TEXT_COLOR = (238, 232, 213)
