from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Tuple

from esper import World

from fruitmatch.components.animation_fade import FadeAnimation
from fruitmatch.components.animation_fall import FallAnimation
from fruitmatch.components.animation_refill import RefillAnimation
from fruitmatch.components.animation_step import AnimationStep
from fruitmatch.components.animation_swap import SwapAnimation

BoardPos = Tuple[int, int]


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    window_width: int
    window_height: int
    grid_size: int
    tile_size: int
    board_left: float
    board_bottom: float
    cells: List[List[Optional[Hashable]]]
    selected: Optional[BoardPos] = None
    swap_by_pos: Dict[BoardPos, SwapAnimation] = field(default_factory=dict)
    fall_by_dst: Dict[BoardPos, FallAnimation] = field(default_factory=dict)
    fall_sources: set = field(default_factory=set)
    refill_by_pos: Dict[BoardPos, RefillAnimation] = field(default_factory=dict)
    fade_by_pos: Dict[BoardPos, FadeAnimation] = field(default_factory=dict)

    @property
    def board_size_px(self) -> float:
        return self.tile_size * self.grid_size

    def center_of(self, pos: BoardPos) -> Tuple[float, float]:
        row, col = pos
        x = self.board_left + col * self.tile_size + self.tile_size / 2
        y = self.board_bottom + (self.grid_size - 1 - row) * self.tile_size + self.tile_size / 2
        return x, y


def collect_animation_maps(world: World, ctx: RenderContext) -> RenderContext:
    """Index the animations of the step currently playing by board position.

    Queued steps are skipped; they start from whatever the display shows once
    the steps before them complete.
    """
    steps = world.get_component(AnimationStep)
    if not steps:
        return ctx
    head = min(step.index for _, step in steps)
    for _, (step, swap) in world.get_components(AnimationStep, SwapAnimation):
        if step.index == head:
            ctx.swap_by_pos[swap.src] = swap
            ctx.swap_by_pos[swap.dst] = swap
    for _, (step, fall) in world.get_components(AnimationStep, FallAnimation):
        if step.index == head:
            ctx.fall_by_dst[fall.dst] = fall
            ctx.fall_sources.add(fall.src)
    for _, (step, refill) in world.get_components(AnimationStep, RefillAnimation):
        if step.index == head:
            ctx.refill_by_pos[refill.pos] = refill
    for _, (step, fade) in world.get_components(AnimationStep, FadeAnimation):
        if step.index == head:
            ctx.fade_by_pos[fade.pos] = fade
    return ctx
