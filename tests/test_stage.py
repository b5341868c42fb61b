import pygame
import pytest

from invaders.enemy import Enemy, EnemyType
from invaders.geometry import Rect
from invaders.player import Player
from invaders.stage import (
    ENEMY_ALIGN_X,
    ENEMY_LEFT_MARGIN,
    ENEMY_NUM,
    ENEMY_TOP_MARGIN,
    Stage,
    intersect_rect,
)
from invaders.world import World


@pytest.fixture
def world(tmp_path):
    return World(tmp_path)


def test_intersect_overlapping():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert intersect_rect(a, b)
    assert intersect_rect(b, a)


def test_intersect_touching_edges_is_false():
    a = Rect(0, 0, 10, 10)
    assert not intersect_rect(a, Rect(10, 0, 10, 10))
    assert not intersect_rect(a, Rect(0, 10, 10, 10))


def test_intersect_disjoint_and_contained():
    a = Rect(0, 0, 10, 10)
    assert not intersect_rect(a, Rect(50, 50, 5, 5))
    assert intersect_rect(a, Rect(2, 2, 3, 3))


def test_stage_registers_everything(world):
    stage = Stage(world)
    assert world.new_objects[0] is stage
    assert sum(isinstance(o, Player) for o in world.new_objects) == 1
    assert sum(isinstance(o, Enemy) for o in world.new_objects) == ENEMY_NUM
    assert len(stage.enemies) == 70


def test_enemy_types_by_row(world):
    stage = Stage(world)
    assert stage.enemies[0].enemy_type is EnemyType.BOSS
    assert stage.enemies[10].enemy_type is EnemyType.KNIGHT
    assert stage.enemies[20].enemy_type is EnemyType.MID
    assert all(e.enemy_type is EnemyType.ZAKO for e in stage.enemies[30:])


def test_enemy_grid_positions(world):
    stage = Stage(world)
    first = stage.enemies[0]
    assert (first.x, first.y) == (ENEMY_LEFT_MARGIN, ENEMY_TOP_MARGIN)
    assert ENEMY_LEFT_MARGIN == 237
    second = stage.enemies[1]
    assert second.x - first.x == ENEMY_ALIGN_X
    for enemy in stage.enemies:
        assert enemy.x_origin == enemy.x
        assert enemy.max_move_x == ENEMY_LEFT_MARGIN
    assert [e.enemy_id for e in stage.enemies] == list(range(ENEMY_NUM))


def test_fired_bullet_kills_enemy(world):
    stage = Stage(world)
    target = stage.enemies[5]
    bullet = stage.player.bullets[0]
    bullet.set_position(target.x + 1, target.y + 1)
    bullet.fired = True
    stage.update()
    assert not target.alive
    assert not bullet.fired
    assert sum(not e.alive for e in stage.enemies) == 1


def test_unfired_bullet_does_not_hit(world):
    stage = Stage(world)
    target = stage.enemies[5]
    bullet = stage.player.bullets[0]
    bullet.set_position(target.x + 1, target.y + 1)
    stage.update()
    assert target.alive


def test_is_game_over_while_g_held(world):
    stage = Stage(world)
    assert not stage.is_game_over()
    world.keyboard.update({pygame.K_g})
    assert stage.is_game_over()
    world.keyboard.update({pygame.K_g})
    assert stage.is_game_over()
    world.keyboard.update(set())
    assert not stage.is_game_over()


def test_draw_without_background_leaves_surface(world):
    stage = Stage(world)
    surface = pygame.Surface((64, 64))
    surface.fill((0, 0, 0))
    stage.draw(surface)
    assert surface.get_at((10, 10))[:3] == (0, 0, 0)


def test_draw_blends_background(tmp_path):
    image_dir = tmp_path / "Assets" / "画像"
    image_dir.mkdir(parents=True)
    background = pygame.Surface((4, 4))
    background.fill((255, 0, 0))
    pygame.image.save(background, str(image_dir / "bg.png"))
    stage = Stage(World(tmp_path))
    surface = pygame.Surface((1024, 768))
    surface.fill((0, 0, 0))
    stage.draw(surface)
    red, green, blue = surface.get_at((10, 10))[:3]
    assert 150 < red < 255
    assert (green, blue) == (0, 0)