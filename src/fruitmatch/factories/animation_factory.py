from typing import Hashable, Iterable, List, Tuple

from esper import World

from fruitmatch.components.animation_fade import FadeAnimation
from fruitmatch.components.animation_fall import FallAnimation
from fruitmatch.components.animation_refill import RefillAnimation
from fruitmatch.components.animation_step import AnimationStep
from fruitmatch.components.animation_swap import SwapAnimation
from fruitmatch.components.duration import Duration

Position = Tuple[int, int]


class AnimationFactory:
    """Creates the entities for one animation step."""

    def __init__(self, world: World):
        self.world = world

    def create_swap(self, index: int, src: Position, dst: Position, duration: float, *, reverse: bool = False) -> int:
        kind = 'revert' if reverse else 'swap'
        return self.world.create_entity(
            AnimationStep(index, kind),
            Duration(duration),
            SwapAnimation(src=src, dst=dst, reverse=reverse),
        )

    def create_fade_group(self, index: int, positions: Iterable[Position], duration: float, **meta) -> List[int]:
        ents = []
        for pos in sorted(positions):
            ents.append(self.world.create_entity(AnimationStep(index, 'fade', meta=dict(meta)), Duration(duration), FadeAnimation(pos=pos)))
        return ents

    def create_fall_group(self, index: int, moves: Iterable[Tuple[Position, Position]], duration: float) -> List[int]:
        ents = []
        for order, (src, dst) in enumerate(moves):
            ents.append(self.world.create_entity(
                AnimationStep(index, 'fall', meta={'order': order}),
                Duration(duration),
                FallAnimation(src=src, dst=dst),
            ))
        return ents

    def create_refill_group(self, index: int, coords: Iterable[Position], tokens: Iterable[Hashable], duration: float) -> List[int]:
        ents = []
        for pos, token in zip(coords, tokens):
            ents.append(self.world.create_entity(AnimationStep(index, 'refill'), Duration(duration), RefillAnimation(pos=pos, token=token)))
        return ents

    def create_pause(self, index: int, duration: float) -> int:
        return self.world.create_entity(AnimationStep(index, 'pause'), Duration(duration))
