"""Axis-aligned bounding boxes and overlap tests."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class CollisionDirection(IntEnum):
    """Side of a block that a collision happened on."""

    NONE = 0
    TOP = 1
    BOTTOM = 2
    FRONT = 3
    BACK = 4
    LEFT = 5
    RIGHT = 6


@dataclass
class RelativeCollisionBox:
    """Extent of a collision box, relative to its owner's position."""

    width: float
    height: float
    depth: float


@dataclass(frozen=True)
class AABB:
    """An axis-aligned box anchored at its minimum corner."""

    x: float
    y: float
    z: float
    width: float
    height: float
    depth: float


def check_collision(box1: AABB, box2: AABB) -> bool:
    """Return True when the two boxes overlap; touching faces do not count."""
    return (
        box1.x < box2.x + box2.width
        and box1.x + box1.width > box2.x
        and box1.y < box2.y + box2.height
        and box1.y + box1.height > box2.y
        and box1.z < box2.z + box2.depth
        and box1.z + box1.depth > box2.z
    )