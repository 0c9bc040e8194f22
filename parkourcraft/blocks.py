"""Blocks that make up a stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .collision import RelativeCollisionBox

MAX_MOVING_BLOCK_Y = 0.8
MIN_MOVING_BLOCK_Y = 0.0


class BlockBehavior(Enum):
    """How a block behaves in the stage."""

    SPAWN = 0
    NONE = 1
    MOVING = 2


class BlockKind(Enum):
    """Appearance of a block."""

    INVISIBLE = 0
    GRASS = 1
    VICTORY = 2
    WOOD = 3


_KIND_NAMES = {
    BlockKind.INVISIBLE: "INVISIBLE",
    BlockKind.GRASS: "GRASS",
}

_BEHAVIOR_NAMES = {
    BlockBehavior.SPAWN: "SPAWN",
    BlockBehavior.NONE: "NONE",
    BlockBehavior.MOVING: "MOVING",
}


@dataclass
class Block:
    """A static cube positioned in the world."""

    x: float
    y: float
    z: float
    size: float
    kind: BlockKind = BlockKind.GRASS
    behavior: BlockBehavior = BlockBehavior.NONE
    collision_box: Optional[RelativeCollisionBox] = None

    def __post_init__(self) -> None:
        if self.collision_box is None:
            self.collision_box = RelativeCollisionBox(self.size, self.size, self.size)

    def _behavior_details(self) -> list[str]:
        return []

    def describe(self) -> str:
        """Return a human-readable summary of the block."""
        lines = [
            f"Position: ({self.x:.2f}, {self.y:.2f}, {self.z:.2f})",
            f"Block type: {_KIND_NAMES.get(self.kind, 'UNKNOWN')}",
            f"Behavior: {_BEHAVIOR_NAMES.get(self.behavior, 'UNKNOWN')}",
        ]
        if self.behavior is BlockBehavior.MOVING:
            lines.extend(self._behavior_details())
        return "\n".join(lines) + "\n"


@dataclass
class MovingBlock(Block):
    """A block that bobs up and down around its starting height."""

    behavior: BlockBehavior = BlockBehavior.MOVING
    speed: float = 0.0
    amplitude: float = 0.0
    start_y: float = field(init=False)
    is_backing: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.start_y = self.y
        self.is_backing = False

    def _behavior_details(self) -> list[str]:
        return [f"  Speed: {self.speed:.2f}", f"  Amplitude: {self.amplitude:.2f}"]

    def update(self) -> None:
        """Advance the block one step along its vertical path."""
        max_y = self.start_y + MAX_MOVING_BLOCK_Y
        min_y = self.start_y + MIN_MOVING_BLOCK_Y
        offset = self.y - self.start_y

        if offset >= max_y:
            self.is_backing = True
        if offset <= min_y:
            self.is_backing = False

        if self.is_backing:
            self.y -= self.speed
        else:
            self.y += self.speed