"""Screen geometry, speeds and sprite locations shared across the game."""

import os

SCR_WIDTH = 1280
SCR_HEIGHT = 720

GG_WIDTH = 70
GG_HEIGHT = GG_WIDTH * 1.303
HERO_RECT_HEIGHT = int(GG_HEIGHT)

ABS_BUL_SP = 20
ABS_ENEMY_BUL_SP = 10

RESOURCE_DIR = "resource"


def resource_path(name):
    """Return the path of a file inside the resource directory."""
    if not name or not name.strip():
        raise ValueError("resource name must not be empty")
    if os.path.isabs(name):
        raise ValueError(f"resource name must be relative: {name!r}")
    return os.path.join(RESOURCE_DIR, name)


FROG = resource_path("frog.png")
ZOMBIE = resource_path("zombie_stand.png")
BULLET1 = resource_path("bullet.png")
BULLET2 = resource_path("clown.png")
BULLET3 = resource_path("frog.png")

MC_DOWN_STAND = resource_path("down_stand.png")
MC_DOWN_MOVE1 = resource_path("down_move.png")
MC_DOWN_MOVE2 = resource_path("down_move2.png")

MC_LEFT_STAND = resource_path("left_stand.png")
MC_LEFT_MOVE1 = resource_path("left_move.png")
MC_LEFT_MOVE2 = resource_path("left_move2.png")

MC_UP_STAND = resource_path("up_stand.png")
MC_UP_MOVE1 = resource_path("up_move.png")
MC_UP_MOVE2 = resource_path("up_move2.png")

MC_RIGHT_STAND = resource_path("right_stand.png")
MC_RIGHT_MOVE1 = resource_path("right_move.png")
MC_RIGHT_MOVE2 = resource_path("right_move2.png")

ZOMBIE_LEFT_MOVE1 = resource_path("zombie_move1_left.png")
ZOMBIE_LEFT_MOVE2 = resource_path("zombie_move2_left.png")
ZOMBIE_RIGHT_MOVE1 = resource_path("zombie_move1_right.png")
ZOMBIE_RIGHT_MOVE2 = resource_path("zombie_move2_right.png")

ZOMBIE_DEAD = resource_path("zombie_dead.png")
ZOMBIE_DEAD1 = resource_path("alived1_right.png")
ZOMBIE_DEAD2 = resource_path("alived2_right.png")
ZOMBIE_DEAD3 = resource_path("alived3_right.png")
ZOMBIE_DEAD4 = resource_path("alived4_right.png")

STUDENT_LEFT_MOVE1 = resource_path("alived2_left_move1.png")
STUDENT_LEFT_MOVE2 = resource_path("alived2_left_move2.png")
STUDENT_RIGHT_MOVE1 = resource_path("alived2_move1.png")
STUDENT_RIGHT_MOVE2 = resource_path("alived2_move2.png")

STUDENT_GIRL_RIGHT_MOVE2 = resource_path("alived4_move2.png")
STUDENT_GIRL_RIGHT_MOVE1 = resource_path("alived4_move1.png")
STUDENT_GIRL_LEFT_MOVE2 = resource_path("alived4_move2_left.png")
STUDENT_GIRL_LEFT_MOVE1 = resource_path("alived4_move1_left.png")