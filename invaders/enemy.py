"""Invaders that sway side to side, fire beams and explode when removed."""

from __future__ import annotations

import enum
import math
from pathlib import Path

import pygame

from .effect import Effect
from .enemy_beam import EnemyBeam
from .geometry import Point, Rect
from .world import GameObject, World

ENEMY_IMAGE_WIDTH = 48
ENEMY_IMAGE_HEIGHT = 48
ENEMY_INIT_X = 100.0
ENEMY_INIT_Y = 100.0
ENEMY_INIT_SPEED = 100.0
MOVE_PERIOD = 10.0
BEAM_INTERVAL = 3.0
BEAM_TIMER = "enemy_beam"


class EnemyType(enum.IntEnum):
    ZAKO = 0
    MID = 1
    KNIGHT = 2
    BOSS = 3


ENEMY_IMAGE_PATHS = {
    EnemyType.ZAKO: Path("Assets", "画像", "tiny_ship10.png"),
    EnemyType.MID: Path("Assets", "画像", "tiny_ship16.png"),
    EnemyType.KNIGHT: Path("Assets", "画像", "tiny_ship9.png"),
    EnemyType.BOSS: Path("Assets", "画像", "tiny_ship18.png"),
}


class Enemy(GameObject):
    """An invader swinging around ``x_origin``; all enemies share one beam timer."""

    def __init__(
        self, world: World, enemy_id: int = 0, enemy_type: EnemyType = EnemyType.ZAKO
    ) -> None:
        super().__init__(world)
        self.enemy_id = enemy_id
        self.enemy_type = EnemyType(enemy_type)
        self.image = world.image(ENEMY_IMAGE_PATHS[self.enemy_type])
        self.x = ENEMY_INIT_X
        self.y = ENEMY_INIT_Y
        self.speed = ENEMY_INIT_SPEED
        self.size = Point(ENEMY_IMAGE_WIDTH, ENEMY_IMAGE_HEIGHT)
        self.max_move_x = 0.0
        self.x_origin = 0.0
        self.move_time = 0.0

    def update(self) -> None:
        dt = self.world.delta_time
        omega = 2.0 * math.pi / MOVE_PERIOD
        self.move_time += dt
        self.x = self.x_origin + self.max_move_x / 2.0 * math.sin(omega * self.move_time)

        timer = self.world.timers.get(BEAM_TIMER, BEAM_INTERVAL)
        if timer < 0:
            EnemyBeam(
                self.world, self.x + ENEMY_IMAGE_WIDTH // 2, self.y + ENEMY_IMAGE_HEIGHT
            )
            timer = BEAM_INTERVAL
        self.world.timers[BEAM_TIMER] = timer - dt

    def draw(self, surface: pygame.Surface) -> None:
        self._blit(surface, self.image, Rect(self.x, self.y, ENEMY_IMAGE_WIDTH, ENEMY_IMAGE_HEIGHT))

    def destroy(self) -> None:
        """Leave an explosion where the enemy was."""
        Effect(self.world, Point(self.x, self.y))

    def set_position(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.size.x, self.size.y)