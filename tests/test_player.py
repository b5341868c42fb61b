import pygame
import pytest

from invaders.bullet import Bullet
from invaders.geometry import WIN_WIDTH, Rect
from invaders.player import (
    BULLET_IMAGE_MARGIN,
    PLAYER_BULLET_NUM,
    PLAYER_IMAGE_WIDTH,
    PLAYER_INIT_X,
    PLAYER_INIT_Y,
    Player,
)
from invaders.world import World


@pytest.fixture
def world(tmp_path):
    return World(tmp_path)


def _frame(world, keys, dt=0.1):
    world.keyboard.update(keys)
    world.delta_time = dt


def test_initial_rect(world):
    player = Player(world)
    assert player.rect() == Rect(PLAYER_INIT_X, PLAYER_INIT_Y, 48, 48)
    assert player.x == 488


def test_bullets_registered_before_player(world):
    player = Player(world)
    assert len(player.bullets) == PLAYER_BULLET_NUM
    assert world.new_objects[-1] is player
    assert world.new_objects[:-1] == player.bullets
    assert all(isinstance(b, Bullet) and not b.fired for b in player.bullets)


def test_shoot_fires_first_free_bullet(world):
    player = Player(world)
    player.shoot()
    first = player.bullets[0]
    assert first.fired
    assert (first.x, first.y) == (player.x + BULLET_IMAGE_MARGIN, player.y)
    assert not any(b.fired for b in player.bullets[1:])


def test_shoot_runs_out_of_bullets(world):
    player = Player(world)
    for _ in range(PLAYER_BULLET_NUM + 2):
        player.shoot()
    assert all(b.fired for b in player.bullets)


def test_first_frame_of_press_does_not_move(world):
    player = Player(world)
    _frame(world, {pygame.K_LEFT})
    player.update()
    assert player.x == PLAYER_INIT_X


def test_held_left_moves_left(world):
    player = Player(world)
    _frame(world, {pygame.K_LEFT})
    player.update()
    _frame(world, {pygame.K_LEFT})
    player.update()
    assert player.x < PLAYER_INIT_X
    assert player.x == pytest.approx(PLAYER_INIT_X - player.speed * 0.1)


def test_held_right_moves_right(world):
    player = Player(world)
    for _ in range(3):
        _frame(world, {pygame.K_RIGHT})
        player.update()
    assert player.x > PLAYER_INIT_X


def test_cannot_leave_left_edge(world):
    player = Player(world)
    player.x = 0.0
    for _ in range(3):
        _frame(world, {pygame.K_LEFT})
        player.update()
    assert player.x == 0.0


def test_cannot_leave_right_edge(world):
    player = Player(world)
    player.x = float(WIN_WIDTH - PLAYER_IMAGE_WIDTH)
    for _ in range(3):
        _frame(world, {pygame.K_RIGHT})
        player.update()
    assert player.x == WIN_WIDTH - PLAYER_IMAGE_WIDTH


def test_space_fires_once_then_cooldown(world):
    player = Player(world)
    _frame(world, {pygame.K_SPACE})
    player.update()
    assert sum(b.fired for b in player.bullets) == 1
    _frame(world, set())
    player.update()
    _frame(world, {pygame.K_SPACE})
    player.update()
    assert sum(b.fired for b in player.bullets) == 1


def test_space_fires_again_after_cooldown(world):
    player = Player(world)
    _frame(world, {pygame.K_SPACE})
    player.update()
    _frame(world, set(), dt=1.0)
    player.update()
    _frame(world, {pygame.K_SPACE})
    player.update()
    assert sum(b.fired for b in player.bullets) == 2