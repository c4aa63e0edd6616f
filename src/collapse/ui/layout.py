from collapse.constants import BOARD_MAX_PCT, SCORE_BAR_HEIGHT, MIN_TILE_SIZE


def compute_board_geometry(window_width: int, window_height: int, board_width: int):
    """Return (tile_size, start_x, start_y) for a square board of board_width cells.

    The board side is BOARD_MAX_PCT of the shorter window side, measured below the
    score bar, and is centred in that area. Shared by rendering and input so a
    click always maps to the tile drawn under it.
    """
    usable_height = window_height - SCORE_BAR_HEIGHT
    side = min(window_width, usable_height) * BOARD_MAX_PCT
    tile_size = int(side / board_width)
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total = board_width * tile_size
    start_x = (window_width - total) / 2
    start_y = (usable_height - total) / 2
    return tile_size, start_x, start_y
