"""Reading stage layouts from text files.

Each line holds ``x y z BEHAVIOR TYPE`` followed by ``size=``, and for moving
blocks ``speed=`` and ``amplitude=``. A spawn line places the player instead of
adding a block.
"""

from __future__ import annotations

import os
import re
from typing import Iterable

from .block_list import BlockEntry
from .blocks import Block, BlockBehavior, BlockKind, MovingBlock
from .world import World

_BEHAVIORS = {
    "BLOCK_T_SPAWN": BlockBehavior.SPAWN,
    "BLOCK_T_NONE": BlockBehavior.NONE,
    "BLOCK_T_MOVING": BlockBehavior.MOVING,
}

_KINDS = {
    "BLOCK_T_INVISIBLE": BlockKind.INVISIBLE,
    "BLOCK_T_GRASS": BlockKind.GRASS,
    "BLOCK_T_VICTORY": BlockKind.VICTORY,
    "BLOCK_T_WOOD": BlockKind.WOOD,
}

_LEADING_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_behavior(text: str) -> BlockBehavior:
    """Map a behaviour name from a stage file to its enum value."""
    try:
        return _BEHAVIORS[text]
    except KeyError:
        raise ValueError(f"unknown block behavior: {text!r}") from None


def parse_block_type(text: str) -> BlockKind:
    """Map a block type name from a stage file to its enum value."""
    try:
        return _KINDS[text]
    except KeyError:
        raise ValueError(f"unknown block type: {text!r}") from None


def _leading_float(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    return float(match.group()) if match else 0.0


def _option(line: str, name: str, default: float | None = None) -> float:
    key = f"{name}="
    position = line.find(key)
    if position < 0:
        if default is None:
            raise ValueError(f"missing {key} in line: {line.rstrip()!r}")
        return default
    return _leading_float(line[position + len(key):])


def load_blocks(lines: Iterable[str], world: World) -> list[BlockEntry]:
    """Add the blocks described by the lines to the world; return the new entries."""
    added: list[BlockEntry] = []
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 5:
            raise ValueError(f"expected x y z behavior type in line: {line.rstrip()!r}")
        try:
            x, y, z = (float(value) for value in fields[:3])
        except ValueError as exc:
            raise ValueError(f"malformed coordinates in line: {line.rstrip()!r}") from exc
        behavior = parse_behavior(fields[3])
        kind = parse_block_type(fields[4])

        if behavior is BlockBehavior.SPAWN:
            world.player.place(x, y, z)
            continue

        size = _option(line, "size")
        if behavior is BlockBehavior.MOVING:
            block: Block = MovingBlock(
                x,
                y,
                z,
                size,
                kind=kind,
                speed=_option(line, "speed", 0.0),
                amplitude=_option(line, "amplitude", 0.0),
            )
        else:
            block = Block(x, y, z, size, kind=kind, behavior=behavior)
        added.append(world.add_block(block, behavior))
    return added


def load_blocks_from_file(path: str | os.PathLike, world: World) -> list[BlockEntry]:
    """Read a stage file and add its blocks to the world."""
    with open(path, encoding="utf-8") as handle:
        return load_blocks(handle, world)