"""The game loop's logic: input handling, physics ticks and per-frame state."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from .blocks import BlockBehavior, MovingBlock
from .game_conditions import VICTORY_STAGE_PATH, VictoryTracker, is_dead, respawn_player
from .stage import award_position, load_stage
from .sun import sun_position
from .world import World

STAGE_PATH = "./3d-objects/stage-1.conf"
TICK_MILLISECONDS = 16

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class Frame:
    """What a rendered frame shows: camera, sun and award placement."""

    camera: tuple[Vec3, Vec3, Vec3]
    sun: Vec3
    award: Vec3


@dataclass
class Game:
    """A running parkour game on one stage."""

    stage_path: str | os.PathLike = STAGE_PATH
    victory_path: str | os.PathLike = VICTORY_STAGE_PATH
    world: World = field(init=False)
    tracker: VictoryTracker = field(init=False)
    _ignore_warp: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self.world = World()
        load_stage(self.stage_path, self.world)
        self.tracker = VictoryTracker(self.victory_path)

    def key_down(self, key: str) -> None:
        """Handle a key being pressed."""
        self.world.player.set_key(key, True)

    def key_up(self, key: str) -> None:
        """Handle a key being released."""
        self.world.player.set_key(key, False)

    def mouse_motion(self, x: int, y: int, width: int, height: int) -> Optional[tuple[float, float]]:
        """Turn the view by the pointer's offset from the window centre.

        Returns the point the pointer should be warped back to, or None when
        the motion was the echo of a previous warp and was ignored.
        """
        if self._ignore_warp:
            self._ignore_warp = False
            return None
        center_x = float(width // 2)
        center_y = float(height // 2)
        self.world.player.change_look_direction(x - center_x, center_y - y)
        self._ignore_warp = True
        return center_x, center_y

    def tick(self) -> None:
        """Advance the player's physics by one timer step."""
        self.world.player.move(self.world.blocks)

    def frame(self) -> Optional[Frame]:
        """Run the per-frame game rules; None when the player had to respawn."""
        self.tracker.check(self.world)
        player = self.world.player
        if is_dead(player):
            respawn_player(player)
            return None

        for entry in self.world.blocks:
            if entry.behavior is BlockBehavior.MOVING and isinstance(entry.block, MovingBlock):
                entry.block.update()

        return Frame(
            camera=player.look_at(),
            sun=sun_position(player),
            award=award_position(self.world.award),
        )