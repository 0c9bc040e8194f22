import math

import pytest

from parkourcraft.blocks import Block
from parkourcraft.player import GRAVITY, MAX_PITCH, MIN_PITCH, Player


def test_default_gaze_points_along_negative_z():
    player = Player()
    assert player.gaze_x == pytest.approx(0.0, abs=1e-9)
    assert player.gaze_y == 0.0
    assert player.gaze_z == pytest.approx(-1.0)


def test_place_sets_position():
    player = Player()
    player.place(1.5, 2.5, -3.5)
    assert (player.x, player.y, player.z) == (1.5, 2.5, -3.5)


def test_pitch_is_clamped():
    player = Player()
    player.change_look_direction(0.0, 1e6)
    assert player.pitch == MAX_PITCH
    player.change_look_direction(0.0, -1e7)
    assert player.pitch == MIN_PITCH


def test_gaze_stays_unit_length():
    player = Player()
    player.change_look_direction(123.0, 456.0)
    length = math.sqrt(player.gaze_x**2 + player.gaze_y**2 + player.gaze_z**2)
    assert length == pytest.approx(1.0)


def test_key_press_and_release():
    player = Player()
    player.set_key("w", True)
    assert "w" in player.keys
    player.set_key("w", False)
    assert "w" not in player.keys


def test_walk_forward_in_empty_space():
    player = Player()
    player.set_key("w", True)
    player.move([])
    assert player.x == pytest.approx(player.gaze_x * player.speed)
    assert player.z == pytest.approx(player.gaze_z * player.speed)
    assert player.y == 0.0
    assert player.jump_velocity == pytest.approx(GRAVITY)


def test_diagonal_walk_is_normalised():
    player = Player()
    player.set_key("w", True)
    player.set_key("d", True)
    player.move([])
    assert math.hypot(player.x, player.z) == pytest.approx(player.speed)


def test_opposite_keys_cancel():
    player = Player()
    player.set_key("a", True)
    player.set_key("d", True)
    player.move([])
    assert (player.x, player.z) == (0.0, 0.0)


def test_landing_snaps_to_block_top():
    player = Player()
    block = Block(0.0, 0.0, 0.0, 1.0)
    player.place(0.45, 0.999 - player.collision_y_offset, 0.45)
    player.move([block])
    assert player.y == pytest.approx(block.y + block.collision_box.height - player.collision_y_offset)
    assert player.jump_velocity == 0.0
    assert player.is_jumping is False


def test_jump_starts_upward_motion():
    player = Player()
    player.set_key(" ", True)
    player.move([])
    assert player.is_jumping is True
    assert player.y == pytest.approx(player.jump_strength)
    assert player.jump_velocity == pytest.approx(player.jump_strength + GRAVITY)


def test_no_double_jump_while_airborne():
    player = Player()
    player.set_key(" ", True)
    player.move([])
    velocity = player.jump_velocity
    player.move([])
    assert player.jump_velocity == pytest.approx(velocity + GRAVITY)


def test_hitting_ceiling_stops_rise():
    player = Player()
    ceiling = Block(0.0, 0.0, 0.0, 1.0)
    start_y = -0.01 - player.collision_box.height - player.collision_y_offset
    player.place(0.45, start_y, 0.45)
    player.set_key(" ", True)
    player.move([ceiling])
    assert player.jump_velocity == 0.0
    assert player.y == pytest.approx(start_y + player.jump_strength - (player.jump_strength + GRAVITY))


def test_look_at_uses_gaze():
    player = Player()
    player.place(1.0, 2.0, 3.0)
    eye, center, up = player.look_at()
    assert eye == (1.0, 2.0, 3.0)
    assert center == pytest.approx((1.0 + player.gaze_x, 2.0 + player.gaze_y, 3.0 + player.gaze_z))
    assert up == (0.0, 1.0, 0.0)