from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Hashable, List, Tuple

if TYPE_CHECKING:
    from fruitmatch.components.tile_types import TileTypes
    from fruitmatch.rendering.context import RenderContext


@dataclass(slots=True)
class TileDraw:
    token: Hashable
    x: float
    y: float
    alpha: float = 1.0


def _ease(p: float) -> float:
    if p < 0.5:
        return 2 * p * p
    return -2 * p * p + 4 * p - 1


def _lerp(a: Tuple[float, float], b: Tuple[float, float], p: float) -> Tuple[float, float]:
    return a[0] + (b[0] - a[0]) * p, a[1] + (b[1] - a[1]) * p


class BoardRenderer:
    def __init__(self, padding: int = 4, use_easing: bool = True):
        self._padding = padding
        self.use_easing = use_easing

    def layout(self, ctx: RenderContext) -> List[TileDraw]:
        """Where every visible token is drawn this frame."""
        draws: List[TileDraw] = []
        for row in range(ctx.grid_size):
            for col in range(ctx.grid_size):
                pos = (row, col)
                token = ctx.cells[row][col] if row < len(ctx.cells) else None
                if token is None or pos in ctx.fall_sources:
                    continue
                x, y = ctx.center_of(pos)
                alpha = 1.0
                swap = ctx.swap_by_pos.get(pos)
                if swap is not None:
                    other = swap.dst if pos == swap.src else swap.src
                    x, y = _lerp((x, y), ctx.center_of(other), swap.progress)
                fade = ctx.fade_by_pos.get(pos)
                if fade is not None:
                    alpha = fade.alpha
                draws.append(TileDraw(token, x, y, alpha))
        for dst, fall in ctx.fall_by_dst.items():
            sr, sc = fall.src
            token = ctx.cells[sr][sc]
            if token is None:
                continue
            p = _ease(fall.linear) if self.use_easing else fall.linear
            x, y = _lerp(ctx.center_of(fall.src), ctx.center_of(dst), p)
            draws.append(TileDraw(token, x, y))
        for pos, refill in ctx.refill_by_pos.items():
            to_x, to_y = ctx.center_of(pos)
            start_y = to_y + ctx.tile_size * 1.2
            p = _ease(refill.linear) if self.use_easing else refill.linear
            draws.append(TileDraw(refill.token, to_x, start_y + (to_y - start_y) * p))
        return draws

    def render(self, arcade, ctx: RenderContext, tile_types: TileTypes, headless: bool) -> List[TileDraw]:
        draws = self.layout(ctx)
        if headless:
            return draws
        arcade.draw_lbwh_rectangle_filled(
            ctx.board_left, ctx.board_bottom, ctx.board_size_px, ctx.board_size_px, (36, 38, 52),
        )
        radius = max(ctx.tile_size - self._padding, 4) / 2
        for draw in draws:
            r, g, b = tile_types.background_for(draw.token)
            alpha = int(255 * max(0.0, min(1.0, draw.alpha)))
            arcade.draw_circle_filled(draw.x, draw.y, radius, (r, g, b, alpha))
            arcade.draw_text(
                str(draw.token), draw.x, draw.y, (255, 255, 255, alpha),
                font_size=int(radius * 0.8), anchor_x="center", anchor_y="center",
            )
        if ctx.selected is not None:
            x, y = ctx.center_of(ctx.selected)
            arcade.draw_circle_outline(x, y, radius + 3, (255, 255, 255), 3)
        return draws
