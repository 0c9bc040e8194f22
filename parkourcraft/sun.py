"""Position of the sun, which drifts against the player's movement."""

from __future__ import annotations

from .player import Player

PARALLAX_FACTOR = 0.2
SUN_INITIAL_POSITION = (-9000.0, 4000.0, -9000.0)
SUN_SIZE = 300.0

Vec3 = tuple[float, float, float]


def sun_position(player: Player) -> Vec3:
    """Return where the sun is drawn for the player's current position."""
    start_x, start_y, start_z = SUN_INITIAL_POSITION
    scale = 1000 * PARALLAX_FACTOR
    return (
        start_x - player.x * scale,
        start_y - player.y * scale,
        start_z - player.z * scale,
    )