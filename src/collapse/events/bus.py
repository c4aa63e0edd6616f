from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_TILE_CLICK = "tile_click"            # payload: row, col


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_MOVE_IGNORED = "move_ignored"                # payload: row, col
EVENT_REGION_CLEARED = "region_cleared"            # payload: positions=[(r,c),...], color=int
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, delta=int
EVENT_REFILL_COMPLETED = "refill_completed"        # payload: new_tiles=[(r,c),...], columns=[int,...]
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str


# ============================================================================
# GAME FLOW
# ============================================================================
EVENT_NEW_GAME = "new_game"                        # payload: width=int|None, colors=int|None
EVENT_GAME_OVER = "game_over"                      # payload: score=int, moves=int
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
