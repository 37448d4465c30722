"""Entry point for the Fruit Match window.

Sets up the game aggregate, animation playback and the Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color

from fruitmatch.constants import WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE
from fruitmatch.events.bus import EVENT_TICK, EVENT_MOUSE_PRESS
from fruitmatch.game import MatchGame
from fruitmatch.systems.animation import AnimationSystem
from fruitmatch.systems.render import RenderSystem
from fruitmatch.systems.input import InputSystem


class FruitMatchWindow(Window):
    def __init__(self, game: MatchGame | None = None):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.game = game or MatchGame()
        self.event_bus = self.game.event_bus
        self.animation_system = AnimationSystem(self.game)
        self.render_system = RenderSystem(self.game, self.animation_system, self)
        self.input_system = InputSystem(self.game, self)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def main():
    logging.basicConfig(level=logging.INFO)
    FruitMatchWindow()
    run()

if __name__ == "__main__":
    main()
