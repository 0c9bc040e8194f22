import pytest

from parkourcraft.player import Player
from parkourcraft.sun import PARALLAX_FACTOR, sun_position


def test_sun_at_initial_position_for_origin():
    assert sun_position(Player()) == (-9000.0, 4000.0, -9000.0)


def test_sun_moves_against_player_x():
    base = sun_position(Player())
    moved = sun_position(Player(x=1))
    assert moved[0] - base[0] == pytest.approx(-1000 * PARALLAX_FACTOR)
    assert moved[1:] == base[1:]


def test_sun_moves_against_player_z():
    base = sun_position(Player())
    moved = sun_position(Player(z=1))
    assert moved[2] - base[2] == pytest.approx(-1000 * PARALLAX_FACTOR)
    assert moved[:2] == base[:2]


def test_sun_sinks_as_player_rises():
    assert sun_position(Player(y=2))[1] < sun_position(Player(y=1))[1]