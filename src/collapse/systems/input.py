from collapse.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_TILE_CLICK,
    EVENT_NEW_GAME,
)
from collapse.components.game_state import GameMode
from collapse.constants import DEFAULT_WIDTH
from collapse.game import Game
from collapse.ui.layout import compute_board_geometry
from collapse.utils.game_state import current_mode

# Arcade reports the left button as 1.
MOUSE_BUTTON_LEFT = 1


class InputSystem:
    def __init__(self, event_bus: EventBus, window, world=None):
        self.event_bus = event_bus
        self.window = window
        self.world = world  # optional world ref for board size and game mode lookup
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != MOUSE_BUTTON_LEFT:
            return
        if self.world is not None and current_mode(self.world) == GameMode.GAME_OVER:
            # Any click on the game-over screen deals a fresh board.
            self.event_bus.emit(EVENT_NEW_GAME)
            return
        cell = self.cell_at(x, y)
        if cell is None:
            return
        row, col = cell
        self.event_bus.emit(EVENT_TILE_CLICK, row=row, col=col)

    def cell_at(self, x: float, y: float):
        """Translate a window position into (row, col), or None outside the board."""
        board_width = self._board_width()
        tile_size, start_x, start_y = compute_board_geometry(self.window.width, self.window.height, board_width)
        col = int((x - start_x) // tile_size)
        row = int((y - start_y) // tile_size)
        if 0 <= row < board_width and 0 <= col < board_width:
            return row, col
        return None

    def _board_width(self) -> int:
        if self.world is not None:
            for _, game in self.world.get_component(Game):
                return game.width
        return getattr(self.window, 'board_width', DEFAULT_WIDTH)
