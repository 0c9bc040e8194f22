import pytest

from parkourcraft.game import Game
from parkourcraft.sun import sun_position


@pytest.fixture
def paths(tmp_path):
    stage = tmp_path / "stage.conf"
    stage.write_text(
        "0 0.5 0 BLOCK_T_SPAWN BLOCK_T_GRASS\n"
        "0 -1 0 BLOCK_T_NONE BLOCK_T_GRASS size=1\n"
        "3 0 3 BLOCK_T_MOVING BLOCK_T_WOOD size=1 speed=0.01 amplitude=1\n"
        "8 0 8 BLOCK_T_NONE BLOCK_T_VICTORY size=1\n",
        encoding="utf-8",
    )
    victory = tmp_path / "victory.conf"
    victory.write_text("20 20 20 BLOCK_T_NONE BLOCK_T_VICTORY size=1\n", encoding="utf-8")
    return stage, victory


@pytest.fixture
def game(paths):
    stage, victory = paths
    return Game(stage, victory)


def test_game_loads_stage(game):
    assert len(game.world.blocks) == 3
    assert game.world.award.block.x == 8
    assert game.world.player.y == 0.5


def test_keys_are_tracked(game):
    game.key_down("w")
    assert "w" in game.world.player.keys
    game.key_up("w")
    assert "w" not in game.world.player.keys


def test_mouse_motion_turns_and_ignores_warp_echo(game):
    player = game.world.player
    yaw = player.yaw
    assert game.mouse_motion(1060, 540, 1920, 1080) == (960.0, 540.0)
    turned = player.yaw
    assert turned > yaw
    assert game.mouse_motion(1060, 540, 1920, 1080) is None
    assert player.yaw == turned
    assert game.mouse_motion(1060, 540, 1920, 1080) == (960.0, 540.0)
    assert player.yaw > turned


def test_mouse_at_centre_keeps_view(game):
    player = game.world.player
    yaw, pitch = player.yaw, player.pitch
    game.mouse_motion(960, 540, 1920, 1080)
    assert (player.yaw, player.pitch) == (yaw, pitch)


def test_tick_applies_gravity(game):
    start = game.world.player.y
    for _ in range(5):
        game.tick()
    assert game.world.player.y < start


def test_frame_respawns_dead_player(game):
    game.world.player.place(0, -10, 0)
    assert game.frame() is None
    assert game.world.player.y == 20


def test_frame_reports_camera_and_sun(game):
    frame = game.frame()
    player = game.world.player
    assert frame.sun == sun_position(player)
    assert frame.camera == player.look_at()
    assert frame.award[0] == 8


def test_frame_moves_moving_blocks(game):
    moving = list(game.world.blocks)[1].block
    start = moving.y
    game.frame()
    assert moving.y == pytest.approx(start + moving.speed)


def test_frame_detects_victory(game):
    game.world.player.place(8, 0.18, 8)
    game.frame()
    assert game.tracker.is_winner is True
    assert len(game.world.blocks) == 4


def test_missing_stage_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Game(tmp_path / "absent.conf", tmp_path / "victory.conf")