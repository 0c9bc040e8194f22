"""Losing and winning: falling off the stage and reaching the award block."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .collision import AABB, RelativeCollisionBox, check_collision
from .parse_blocks import load_blocks_from_file
from .player import Player
from .routines import player_aabb
from .world import World

MIN_Y_PLAYER = -5
RESPAWN_POSITION = (0.0, 20.0, 0.5)
RESPAWN_GAZE_Y = -1.9
VICTORY_STAGE_PATH = "./3d-objects/victory.conf"
AWARD_COLLISION_BOX = RelativeCollisionBox(0.09, 0.18, 0.09)


def is_dead(player: Player) -> bool:
    """Return True once the player has fallen below the stage."""
    return player.y <= MIN_Y_PLAYER


def respawn_player(player: Player) -> None:
    """Put the player back at the respawn point, looking down."""
    player.gaze_y = RESPAWN_GAZE_Y
    player.x, player.y, player.z = RESPAWN_POSITION


@dataclass
class VictoryTracker:
    """Detects when the player reaches the award and loads the victory stage once."""

    victory_stage: str | os.PathLike = VICTORY_STAGE_PATH
    is_winner: bool = False

    def check(self, world: World) -> bool:
        """Check for victory; return True once the player has won."""
        if self.is_winner:
            return True
        if world.award is None:
            raise ValueError("no award block has been set")

        award = world.award.block
        award_box = AABB(
            x=award.x,
            y=award.y,
            z=award.z,
            width=AWARD_COLLISION_BOX.width,
            height=AWARD_COLLISION_BOX.height,
            depth=AWARD_COLLISION_BOX.depth,
        )
        if check_collision(player_aabb(world.player), award_box):
            load_blocks_from_file(self.victory_stage, world)
            self.is_winner = True
        return self.is_winner