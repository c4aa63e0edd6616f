"""Entry point for the Collapse tile puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import random
from typing import Optional, Sequence

from arcade import Window, run, key
from collapse.config import GameConfig, configure_logging, parse_args
from collapse.constants import WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, BACKGROUND_COLOR
from collapse.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_NEW_GAME
from collapse.world import create_world
from collapse.systems.board import BoardSystem
from collapse.systems.input import InputSystem
from collapse.systems.render import RenderSystem


class CollapseWindow(Window):
    def __init__(self, config: GameConfig):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.background_color = BACKGROUND_COLOR
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, rng=random.Random(config.seed))

        # Board first so input and rendering find the Game component.
        self.board_system = BoardSystem(self.world, self.event_bus, width=config.width, colors=config.colors)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.N:
            self.event_bus.emit(EVENT_NEW_GAME)
        elif symbol == key.ESCAPE:
            self.close()


def main(argv: Optional[Sequence[str]] = None):
    config = parse_args(argv)
    configure_logging(config)
    CollapseWindow(config)
    run()


if __name__ == "__main__":
    main()
