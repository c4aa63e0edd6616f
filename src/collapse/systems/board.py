import logging
import random
from typing import Optional

from esper import World

from collapse.components.game_state import GameMode
from collapse.constants import DEFAULT_COLORS, DEFAULT_WIDTH, MAX_COLORS, MAX_WIDTH, MIN_WIDTH
from collapse.events.bus import (
    EventBus,
    EVENT_TILE_CLICK,
    EVENT_NEW_GAME,
    EVENT_MOVE_IGNORED,
    EVENT_REGION_CLEARED,
    EVENT_SCORE_CHANGED,
    EVENT_REFILL_COMPLETED,
    EVENT_BOARD_CHANGED,
    EVENT_GAME_OVER,
)
from collapse.game import Game
from collapse.utils.game_state import current_mode, get_game_state, set_game_mode

logger = logging.getLogger(__name__)


def _in_range(value, low: int, high: int) -> bool:
    return isinstance(value, int) and low <= value <= high


class BoardSystem:
    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        width: int = DEFAULT_WIDTH,
        colors: int = DEFAULT_COLORS,
        rng: Optional[random.Random] = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.rng = rng or getattr(world, "random", None) or random.Random()
        # Single board entity carrying the Game component; new games replace it.
        self.board_entity = self.world.create_entity(Game(width, colors, self.rng))
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_NEW_GAME, self.on_new_game)
        self._check_game_over()

    @property
    def game(self) -> Game:
        return self.world.component_for_entity(self.board_entity, Game)

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if not isinstance(row, int) or not isinstance(col, int):
            return
        if current_mode(self.world) != GameMode.PLAYING:
            return
        game = self.game
        previous_score = game.score
        result = game.perform_move(row, col)
        if result is None:
            self.event_bus.emit(EVENT_MOVE_IGNORED, row=row, col=col)
            return
        state = get_game_state(self.world)
        if state is not None:
            state.moves += 1
        self.event_bus.emit(EVENT_REGION_CLEARED, positions=result.removed, color=result.color)
        if game.score != previous_score:
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=game.score, delta=game.score - previous_score)
        if result.refilled:
            columns = sorted({col for _, col in result.refilled})
            self.event_bus.emit(EVENT_REFILL_COMPLETED, new_tiles=result.refilled, columns=columns)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="move")
        self._check_game_over()

    def on_new_game(self, sender, **kwargs):
        width = kwargs.get('width')
        colors = kwargs.get('colors')
        if width is not None and not _in_range(width, MIN_WIDTH, MAX_WIDTH):
            logger.warning("Ignoring new game request with width %r", width)
            return
        if colors is not None and not _in_range(colors, 1, MAX_COLORS):
            logger.warning("Ignoring new game request with %r colors", colors)
            return
        current = self.game
        if width is None:
            width = current.width
        if colors is None:
            colors = current.colors
        self.world.add_component(self.board_entity, Game(width, colors, self.rng))
        state = get_game_state(self.world)
        if state is not None:
            state.moves = 0
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        logger.info("New game: %dx%d board, %d colors", width, width, colors)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="new_game")
        self._check_game_over()

    def _check_game_over(self) -> None:
        game = self.game
        if game.has_valid_moves():
            return
        state = get_game_state(self.world)
        moves = state.moves if state is not None else 0
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)
        logger.info("Game over after %d moves with score %d", moves, game.score)
        self.event_bus.emit(EVENT_GAME_OVER, score=game.score, moves=moves)
