"""Shared state of a running game: the stage's blocks and the player."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .block_list import BlockEntry, BlockList
from .blocks import Block, BlockBehavior
from .player import Player


@dataclass
class World:
    """The blocks of the loaded stage, the player, and the award block."""

    blocks: BlockList = field(default_factory=BlockList)
    player: Player = field(default_factory=Player)
    award: Optional[BlockEntry] = None

    def add_block(self, block: Block, behavior: BlockBehavior) -> BlockEntry:
        """Add a block to the stage and return its entry."""
        return self.blocks.add(block, behavior)