"""Ordered collection of the blocks in a stage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .blocks import Block, BlockBehavior


@dataclass
class BlockEntry:
    """A block stored in a list together with its id and behaviour."""

    id: int
    block: Block
    behavior: BlockBehavior


class BlockList:
    """Blocks in insertion order, each given an increasing id starting at 1."""

    def __init__(self) -> None:
        self._entries: list[BlockEntry] = []
        self.max_id = 0

    def add(self, block: Block, behavior: BlockBehavior) -> BlockEntry:
        """Append a block and return the entry created for it."""
        if block is None:
            raise ValueError("cannot add a missing block")
        self.max_id += 1
        entry = BlockEntry(self.max_id, block, behavior)
        self._entries.append(entry)
        return entry

    @property
    def tail(self) -> Optional[BlockEntry]:
        """The most recently added entry, or None when the list is empty."""
        return self._entries[-1] if self._entries else None

    def __iter__(self) -> Iterator[BlockEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)