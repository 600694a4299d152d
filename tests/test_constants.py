import os

import pytest

from endgame import constants
from endgame.constants import resource_path


def test_resource_path_joins_resource_dir():
    path = resource_path("frog.png")
    assert path == os.path.join(constants.RESOURCE_DIR, "frog.png")


def test_sprite_paths_point_into_resource_dir():
    assert constants.FROG == resource_path("frog.png")
    assert constants.ZOMBIE == resource_path("zombie_stand.png")
    assert constants.BULLET2 == resource_path("clown.png")


@pytest.mark.parametrize(
    "value, name",
    [
        (constants.MC_DOWN_STAND, "down_stand.png"),
        (constants.MC_UP_MOVE1, "up_move.png"),
        (constants.MC_RIGHT_MOVE2, "right_move2.png"),
        (constants.ZOMBIE_LEFT_MOVE1, "zombie_move1_left.png"),
        (constants.STUDENT_GIRL_LEFT_MOVE1, "alived4_move1_left.png"),
    ],
)
def test_hero_and_enemy_sprite_paths(value, name):
    assert value == resource_path(name)


@pytest.mark.parametrize("name", ["", "   "])
def test_empty_resource_name_rejected(name):
    with pytest.raises(ValueError):
        resource_path(name)


def test_absolute_resource_name_rejected():
    with pytest.raises(ValueError):
        resource_path(os.path.abspath("frog.png"))