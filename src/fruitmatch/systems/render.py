from fruitmatch.events.bus import EventBus, EVENT_TILE_SELECTED, EVENT_TILE_DESELECTED, EVENT_GAME_RESET
from fruitmatch.rendering.board_renderer import BoardRenderer
from fruitmatch.rendering.context import RenderContext, collect_animation_maps
from fruitmatch.rendering.hud_renderer import HudRenderer
from fruitmatch.ui.layout import compute_board_geometry

PADDING = 6

class RenderSystem:
    def __init__(self, game, animation, window):
        self.game = game
        self.animation = animation
        self.window = window
        self.event_bus: EventBus = game.event_bus
        self.event_bus.subscribe(EVENT_TILE_SELECTED, self.on_tile_selected)
        self.event_bus.subscribe(EVENT_TILE_DESELECTED, self.on_tile_deselected)
        self.event_bus.subscribe(EVENT_GAME_RESET, self.on_tile_deselected)
        self.selected = None
        self._board_renderer = BoardRenderer(padding=PADDING)
        self._hud_renderer = HudRenderer()
        self._last_draws = []

    def on_tile_selected(self, sender, **kwargs):
        self.selected = (kwargs.get('row'), kwargs.get('col'))

    def on_tile_deselected(self, sender, **kwargs):
        self.selected = None

    def build_context(self) -> RenderContext:
        display = self.animation.display()
        grid_size = self.game.grid_size
        tile_size, start_x, start_y = compute_board_geometry(self.window.width, self.window.height, grid_size)
        ctx = RenderContext(
            window_width=self.window.width,
            window_height=self.window.height,
            grid_size=grid_size,
            tile_size=tile_size,
            board_left=start_x,
            board_bottom=start_y,
            cells=display.cells,
            selected=self.selected,
        )
        return collect_animation_maps(self.game.world, ctx)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        ctx = self.build_context()
        self._last_draws = self._board_renderer.render(arcade, ctx, self.game.tile_types, headless=headless)
        if not headless:
            display = self.animation.display()
            self._hud_renderer.render(arcade, self.window.width, self.window.height, display.score, display.moves)
