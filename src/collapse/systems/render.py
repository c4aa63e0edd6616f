from esper import World

from collapse.events.bus import EventBus, EVENT_BOARD_CHANGED, EVENT_GAME_OVER
from collapse.components.game_state import GameMode
from collapse.constants import (
    PALETTE, TILE_PADDING, SCORE_BAR_HEIGHT, SCORE_FONT_SIZE, BANNER_FONT_SIZE, TEXT_COLOR,
)
from collapse.game import Game
from collapse.ui.layout import compute_board_geometry
from collapse.utils.game_state import current_mode, get_game_state


def palette_color(value: int):
    """Map a tile value to its display color; unknown values share the last entry."""
    if value < len(PALETTE):
        return PALETTE[value]
    return PALETTE[-1]


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)
        self.event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)
        # (row, col) -> (center_x, center_y, color); rebuilt every frame
        self._last_tile_layout = {}
        self.final_score = None

    def on_board_changed(self, sender, **kwargs):
        if kwargs.get('reason') == "new_game":
            self.final_score = None

    def on_game_over(self, sender, **kwargs):
        self.final_score = kwargs.get('score')

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: if no active Arcade window (unit tests), skip actual draw calls but still build layout cache.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        game = self._game()
        if game is None:
            return
        width = game.width
        tile_size, start_x, start_y = compute_board_geometry(self.window.width, self.window.height, width)
        if not headless:
            arcade.draw_lrbt_rectangle_filled(
                start_x, start_x + width * tile_size, start_y, start_y + width * tile_size, PALETTE[0]
            )
        self._last_tile_layout = {}
        draw_size = max(tile_size - TILE_PADDING, 1)
        for row in range(width):
            for col in range(width):
                value = game.get_color(row, col)
                if not value:
                    continue
                color = palette_color(value)
                center_x = start_x + col * tile_size + tile_size / 2
                center_y = start_y + row * tile_size + tile_size / 2
                self._last_tile_layout[(row, col)] = (center_x, center_y, color)
                if headless:
                    continue
                half = draw_size / 2
                arcade.draw_lrbt_rectangle_filled(
                    center_x - half, center_x + half, center_y - half, center_y + half, color
                )
        if headless:
            return
        self._render_score(arcade, game)
        if current_mode(self.world) == GameMode.GAME_OVER:
            self._render_game_over(arcade, game)

    def _render_score(self, arcade, game: Game) -> None:
        state = get_game_state(self.world)
        moves = state.moves if state is not None else 0
        text_y = self.window.height - SCORE_BAR_HEIGHT + (SCORE_BAR_HEIGHT - SCORE_FONT_SIZE) / 2
        arcade.draw_text(f"Score: {game.score}", 16, text_y, TEXT_COLOR, SCORE_FONT_SIZE)
        arcade.draw_text(
            f"Moves: {moves}", self.window.width - 16, text_y, TEXT_COLOR, SCORE_FONT_SIZE, anchor_x="right"
        )

    def _render_game_over(self, arcade, game: Game) -> None:
        center_x = self.window.width / 2
        center_y = (self.window.height - SCORE_BAR_HEIGHT) / 2
        half_w = self.window.width * 0.35
        half_h = BANNER_FONT_SIZE * 2.2
        arcade.draw_lrbt_rectangle_filled(
            center_x - half_w, center_x + half_w, center_y - half_h, center_y + half_h, (0, 0, 0, 200)
        )
        score = self.final_score if self.final_score is not None else game.score
        arcade.draw_text(
            f"No moves left - score {score}",
            center_x, center_y + BANNER_FONT_SIZE * 0.4, TEXT_COLOR, BANNER_FONT_SIZE,
            anchor_x="center", anchor_y="center",
        )
        arcade.draw_text(
            "Click or press N for a new game",
            center_x, center_y - BANNER_FONT_SIZE * 1.1, TEXT_COLOR, SCORE_FONT_SIZE,
            anchor_x="center", anchor_y="center",
        )

    def _game(self) -> Game | None:
        for _, game in self.world.get_component(Game):
            return game
        return None
