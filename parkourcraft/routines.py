"""Collision queries between the player and the blocks of a stage."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Union

from .block_list import BlockEntry
from .blocks import Block
from .collision import AABB, CollisionDirection, check_collision

if TYPE_CHECKING:
    from .player import Player

BlockLike = Union[Block, BlockEntry]


def _as_block(item: BlockLike) -> Block:
    return item.block if isinstance(item, BlockEntry) else item


def player_aabb(player: "Player") -> AABB:
    """Return the player's collision box in world coordinates."""
    box = player.collision_box
    return AABB(
        x=player.x,
        y=player.y + player.collision_y_offset,
        z=player.z,
        width=box.width,
        height=box.height,
        depth=box.depth,
    )


def block_aabb(block: Block) -> AABB:
    """Return a block's collision box in world coordinates."""
    box = block.collision_box
    return AABB(
        x=block.x,
        y=block.y,
        z=block.z,
        width=box.width,
        height=box.height,
        depth=box.depth,
    )


def check_collisions(player: "Player", blocks: Iterable[BlockLike]) -> Optional[Block]:
    """Return the first block the player overlaps, or None."""
    box = player_aabb(player)
    for item in blocks:
        block = _as_block(item)
        if check_collision(box, block_aabb(block)):
            return block
    return None


def collision_direction(player: "Player", block: BlockLike) -> CollisionDirection:
    """Work out on which side of the block the player is colliding."""
    a = player_aabb(player)
    b = block_aabb(_as_block(block))

    if not check_collision(a, b):
        return CollisionDirection.NONE

    dx = (a.x + a.width / 2) - (b.x + b.width / 2)
    dy = (a.y + a.height / 2) - (b.y + b.height / 2)
    dz = (a.z + a.depth / 2) - (b.z + b.depth / 2)

    px = (a.width + b.width) / 2 - abs(dx)
    py = (a.height + b.height) / 2 - abs(dy)
    pz = (a.depth + b.depth) / 2 - abs(dz)

    # The axis with the smallest penetration is the one the collision happened on.
    if px < py and px < pz:
        return CollisionDirection.LEFT if dx > 0 else CollisionDirection.RIGHT
    if py < px and py < pz:
        return CollisionDirection.BOTTOM if dy > 0 else CollisionDirection.TOP
    return CollisionDirection.BACK if dz > 0 else CollisionDirection.FRONT