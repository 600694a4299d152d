import pytest
from pygame import Rect

from endgame.constants import (
    MC_DOWN_MOVE1,
    MC_LEFT_MOVE1,
    MC_LEFT_MOVE2,
    MC_LEFT_STAND,
    MC_RIGHT_MOVE1,
    MC_RIGHT_MOVE2,
    MC_RIGHT_STAND,
    MC_UP_STAND,
    SCR_HEIGHT,
    SCR_WIDTH,
)
from endgame.entities import Hero, Obstacle
from endgame.movement import (
    check_collision,
    direction_towards,
    move_hero,
    stand_sprite,
    walk_sprite,
)


def hero_at(x, y):
    return Hero(rect=Rect(x, y, 70, 91))


def test_top_edge_blocks_up():
    assert check_collision(hero_at(500, 3), [], "w") is True
    assert check_collision(hero_at(500, 300), [], "w") is False


def test_bottom_edge_blocks_down():
    assert check_collision(hero_at(500, SCR_HEIGHT - 91), [], "s") is True
    assert check_collision(hero_at(500, 100), [], "s") is False


def test_side_edges_block():
    assert check_collision(hero_at(2, 300), [], "a") is True
    assert check_collision(hero_at(SCR_WIDTH - 70, 300), [], "d") is True
    assert check_collision(hero_at(600, 300), [], "a") is False


def test_obstacle_above_blocks_up():
    wall = [Obstacle(Rect(600, 200, 100, 50))]
    assert check_collision(hero_at(620, 200), wall, "w") is True
    assert check_collision(hero_at(620, 300), wall, "w") is False


def test_obstacle_right_blocks_right():
    wall = [Obstacle(Rect(500, 340, 50, 50))]
    assert check_collision(hero_at(430, 300), wall, "d") is True
    assert check_collision(hero_at(200, 300), wall, "d") is False


def test_unknown_key_raises():
    with pytest.raises(ValueError):
        check_collision(hero_at(500, 300), [], "x")


def test_move_right_changes_position_and_sprite():
    hero = hero_at(500, 300)
    moved = move_hero(hero, {"d"}, [], 0)
    assert moved == "d"
    assert hero.rect.x == 500 + hero.speed_x
    assert hero.rect.y == 300
    assert hero.sprite in {MC_RIGHT_MOVE1, MC_RIGHT_STAND, MC_RIGHT_MOVE2}


def test_move_nothing_pressed():
    hero = hero_at(500, 300)
    assert move_hero(hero, set(), [], 0) is None
    assert (hero.rect.x, hero.rect.y) == (500, 300)


def test_move_last_direction_wins():
    hero = hero_at(500, 300)
    assert move_hero(hero, {"w", "d"}, [], 0) == "d"
    assert hero.rect.y == 300 - hero.speed_y
    assert hero.rect.x == 500 + hero.speed_x


def test_blocked_move_does_nothing():
    hero = hero_at(2, 300)
    assert move_hero(hero, {"a"}, [], 0) is None
    assert hero.rect.x == 2


@pytest.mark.parametrize(
    "mouse, expected",
    [((300, 120), "d"), ((0, 100), "a"), ((110, 300), "s"), ((100, 0), "w"), ((200, 200), "d")],
)
def test_direction_towards(mouse, expected):
    assert direction_towards(mouse[0], mouse[1], hero_at(100, 100)) == expected


def test_stand_sprite():
    assert stand_sprite("w") == MC_UP_STAND
    assert stand_sprite("a") == MC_LEFT_STAND
    with pytest.raises(ValueError):
        stand_sprite(None)


def test_walk_sprite_cycles_three_frames():
    assert walk_sprite("s", 0) == MC_DOWN_MOVE1
    frames = {walk_sprite("a", t) for t in range(0, 1000, 10)}
    assert frames == {MC_LEFT_MOVE1, MC_LEFT_STAND, MC_LEFT_MOVE2}
    with pytest.raises(ValueError):
        walk_sprite("q", 0)