"""The player: position, view direction and movement physics."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from .collision import CollisionDirection, RelativeCollisionBox
from .routines import BlockLike, check_collisions, collision_direction

GRAVITY = -0.0009
MAX_PITCH = 80.0
MIN_PITCH = -89.0

Vec3 = tuple[float, float, float]


def _default_collision_box() -> RelativeCollisionBox:
    return RelativeCollisionBox(0.09, 0.18, 0.09)


@dataclass
class Player:
    """A first-person player moving through the stage."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    yaw: float = -90.0
    pitch: float = 0.0
    speed: float = 0.015
    is_jumping: bool = False
    jump_strength: float = 0.022
    jump_velocity: float = 0.0
    sensibility: float = 0.03
    ground_level: float = -1000.0
    collision_box: RelativeCollisionBox = field(default_factory=_default_collision_box)
    collision_y_offset: float = -0.18
    gaze_x: float = field(init=False)
    gaze_y: float = field(init=False)
    gaze_z: float = field(init=False)
    keys: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        rad_yaw = math.radians(self.yaw)
        self.gaze_x = math.cos(rad_yaw)
        self.gaze_y = 0.0
        self.gaze_z = math.sin(rad_yaw)

    def place(self, x: float, y: float, z: float) -> None:
        """Move the player to the given position."""
        self.x = x
        self.y = y
        self.z = z

    def set_key(self, key: str, pressed: bool) -> None:
        """Record whether a key is held down."""
        if pressed:
            self.keys.add(key)
        else:
            self.keys.discard(key)

    def change_look_direction(self, offset_x: float, offset_y: float) -> None:
        """Turn the view by a mouse offset, keeping the pitch within limits."""
        self.yaw += offset_x * self.sensibility
        self.pitch += offset_y * self.sensibility
        self.pitch = min(max(self.pitch, MIN_PITCH), MAX_PITCH)

        rad_yaw = math.radians(self.yaw)
        rad_pitch = math.radians(self.pitch)
        self.gaze_x = math.cos(rad_yaw) * math.cos(rad_pitch)
        self.gaze_y = math.sin(rad_pitch)
        self.gaze_z = math.sin(rad_yaw) * math.cos(rad_pitch)

    def _walk_direction(self) -> tuple[float, float]:
        move_x = move_z = 0.0
        if "w" in self.keys:
            move_x += self.gaze_x
            move_z += self.gaze_z
        if "s" in self.keys:
            move_x -= self.gaze_x
            move_z -= self.gaze_z
        if "a" in self.keys:
            move_x += self.gaze_z
            move_z -= self.gaze_x
        if "d" in self.keys:
            move_x -= self.gaze_z
            move_z += self.gaze_x

        # Normalise so that moving diagonally is not faster.
        length = math.hypot(move_x, move_z)
        if length > 0:
            move_x /= length
            move_z /= length
        return move_x, move_z

    def move(self, blocks: Iterable[BlockLike]) -> None:
        """Advance one tick of walking, jumping and gravity against the blocks."""
        blocks = list(blocks)
        move_x, move_z = self._walk_direction()

        self.x += move_x * self.speed
        if check_collisions(self, blocks) is not None:
            self.x -= move_x * self.speed

        self.z += move_z * self.speed
        if check_collisions(self, blocks) is not None:
            self.z -= move_z * self.speed

        if " " in self.keys and not self.is_jumping:
            self.jump_velocity = self.jump_strength
            self.is_jumping = True

        self.y += self.jump_velocity
        self.jump_velocity += GRAVITY

        collided = check_collisions(self, blocks)
        if collided is None:
            return
        if collision_direction(self, collided) is CollisionDirection.BOTTOM:
            self.is_jumping = False
            self.jump_velocity = 0.0
            self.y = collided.y + collided.collision_box.height - self.collision_y_offset
        else:
            self.y -= self.jump_velocity
            self.jump_velocity = 0.0

    def look_at(self) -> tuple[Vec3, Vec3, Vec3]:
        """Return the camera eye, the point looked at and the up vector."""
        eye = (self.x, self.y, self.z)
        center = (self.x + self.gaze_x, self.y + self.gaze_y, self.z + self.gaze_z)
        return eye, center, (0.0, 1.0, 0.0)