# parkourcraft

The game logic of a small block-world parkour game. It loads a stage of
blocks from a plain-text description, moves a first-person player with
walking, jumping and gravity, resolves axis-aligned box collisions, bobs
moving platforms up and down, and detects when the player has fallen off
the world or touched the award block at the end of the stage.

The package has no dependencies beyond the standard library.

## Stage files

A stage is one entry per line:

```
x y z BEHAVIOR TYPE size=S [speed=V] [amplitude=A]
```

* `BEHAVIOR` is one of `BLOCK_T_SPAWN`, `BLOCK_T_NONE` and `BLOCK_T_MOVING`.
  A spawn line moves the player to `x y z` and adds no block; it needs no
  `size=`.
* `TYPE` is one of `BLOCK_T_INVISIBLE`, `BLOCK_T_GRASS`, `BLOCK_T_VICTORY`
  and `BLOCK_T_WOOD`.
* Every other line must carry `size=`; the block's collision box is a cube
  of that size anchored at `x y z`.
* Moving blocks also read `speed=` and `amplitude=`, each 0 when absent.
  A moving block rises by `speed` per step until it is 0.8 above where it
  started, then sinks back. The amplitude is stored and shown by
  `Block.describe`, but does not change the path.

Blank lines are skipped. An unknown behaviour or type name, a line with
fewer than five fields, malformed coordinates or a missing `size=` raise
`ValueError`.

When a stage is loaded with `parkourcraft.stage.load_stage`, its last block
becomes the award block.

## Using the package

```python
from parkourcraft.world import World
from parkourcraft.parse_blocks import load_blocks
from parkourcraft.collision import AABB, check_collision

world = World()
entries = load_blocks(
    [
        "0 5 0 BLOCK_T_SPAWN BLOCK_T_NONE",
        "0 0 0 BLOCK_T_NONE BLOCK_T_GRASS size=1",
        "2 0 0 BLOCK_T_MOVING BLOCK_T_WOOD size=1 speed=0.01 amplitude=0.8",
        "4 0 0 BLOCK_T_NONE BLOCK_T_VICTORY size=1",
    ],
    world,
)
assert len(world.blocks) == 3
assert (world.player.x, world.player.y, world.player.z) == (0.0, 5.0, 0.0)

a = AABB(x=0, y=0, z=0, width=1, height=1, depth=1)
b = AABB(x=0.5, y=0.5, z=0.5, width=1, height=1, depth=1)
assert check_collision(a, b)
```

### Running a game

`parkourcraft.game.Game(stage_path, victory_path)` creates a `World` and
loads the stage file straight away. The defaults are
`./3d-objects/stage-1.conf` and `./3d-objects/victory.conf`, relative to
the working directory.

* `key_down(key)` and `key_up(key)` record held keys: `w`, `a`, `s`, `d`
  walk and `" "` (space) jumps.
* `mouse_motion(x, y, width, height)` turns the view by the pointer's
  offset from the window centre and returns that centre, the point to warp
  the pointer back to. The next call is taken as the echo of that warp,
  ignored, and returns `None`.
* `tick()` advances the player's physics by one step; the intended rate is
  one step every 16 ms.
* `frame()` checks for victory, respawns the player at `(0, 20, 0.5)` and
  returns `None` if they have fallen to `y <= -5`, and otherwise steps the
  moving blocks and returns a `Frame` with the camera (eye, centre, up),
  the sun position and the position of the award.

When the player touches the award block, the victory stage file is loaded
into the same world, once.

### Modules

* `parkourcraft.collision`: `AABB`, `RelativeCollisionBox`,
  `CollisionDirection` and `check_collision`. Touching faces do not count
  as a collision.
* `parkourcraft.blocks`: `Block`, `MovingBlock` (with `update()`),
  `BlockBehavior` and `BlockKind`.
* `parkourcraft.block_list`: `BlockList`, which gives each added block a
  `BlockEntry` with an id counting up from 1.
* `parkourcraft.player`: `Player`, with `place`, `set_key`,
  `change_look_direction` (pitch held between -89 and 80 degrees),
  `move(blocks)` and `look_at()`.
* `parkourcraft.routines`: `player_aabb`, `block_aabb`, `check_collisions`
  (the first block the player overlaps) and `collision_direction` (the side
  that was hit).
* `parkourcraft.world`: `World`, holding the blocks, the player and the
  award entry.
* `parkourcraft.parse_blocks`: `parse_behavior`, `parse_block_type`,
  `load_blocks` and `load_blocks_from_file`.
* `parkourcraft.stage`: `load_stage` and `award_position`.
* `parkourcraft.game_conditions`: `is_dead`, `respawn_player` and
  `VictoryTracker`.
* `parkourcraft.sun`: `sun_position`, the sun shifted against the player's
  position.
* `parkourcraft.mesh`: `parse_mesh`, `load_mesh` and `import_object` read
  Wavefront OBJ geometry (`v`, `vt`, `vn`, `f`), splitting quads into two
  triangles and skipping larger faces. `ImportedObject.next_rotation()`
  gives a spin angle that advances one degree per call and wraps at 360.

## What it does not do

The package draws nothing. It opens no window, loads no textures, plays no
music and installs no command. It produces the positions and state a
renderer needs (camera, sun, award, block positions and meshes); showing
them and feeding keyboard and mouse events into `Game` is left to the
caller.