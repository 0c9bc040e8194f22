"""Loading a stage into the world and locating its award."""

from __future__ import annotations

import os

from .block_list import BlockEntry
from .parse_blocks import load_blocks_from_file
from .world import World

AWARD_PATH = "./objects-to-import/DiamondSword.obj"
AWARD_HEIGHT_OFFSET = 0.13
AWARD_SCALE = 0.003

Vec3 = tuple[float, float, float]


def load_stage(path: str | os.PathLike, world: World) -> list[BlockEntry]:
    """Load a stage file; its last block becomes the award block."""
    entries = load_blocks_from_file(path, world)
    award = world.blocks.tail
    if award is None:
        raise ValueError(f"stage {os.fspath(path)!r} contains no blocks")
    world.award = award
    return entries


def award_position(entry: BlockEntry) -> Vec3:
    """Return where the award object floats above its block."""
    block = entry.block
    return (block.x, block.y + AWARD_HEIGHT_OFFSET, block.z)