from fruitmatch.events.bus import EVENT_MOUSE_PRESS, EVENT_TILE_CLICK
from fruitmatch.ui.layout import cell_at_point, point_in_rect, reset_button_rect

class InputSystem:
    """Maps left-button presses to the reset button or to board cells."""
    def __init__(self, game, window):
        self.game = game
        self.window = window
        self.event_bus = game.event_bus
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Left button (1) only.
        if button != 1:
            return
        if point_in_rect(x, y, reset_button_rect(self.window.width, self.window.height)):
            self.game.reset()
            return
        cell = cell_at_point(x, y, self.window.width, self.window.height, self.game.grid_size)
        if cell is not None:
            self.event_bus.emit(EVENT_TILE_CLICK, row=cell[0], col=cell[1])
