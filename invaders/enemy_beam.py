"""An enemy shot that falls until it leaves the bottom of the screen."""

from __future__ import annotations

from pathlib import Path

import pygame

from .geometry import WIN_HEIGHT, Point, Rect
from .world import GameObject, World

ENEMY_BEAM_IMAGE_WIDTH = 11
ENEMY_BEAM_IMAGE_HEIGHT = 21
ENEMY_BEAM_INIT_SPEED = 250.0
ENEMY_BEAM_IMAGE_PATH = Path("Assets", "画像", "ebeams.png")


class EnemyBeam(GameObject):
    """A falling enemy shot; dies once it is below the screen."""

    def __init__(self, world: World, x: float = -10.0, y: float = -10.0) -> None:
        super().__init__(world)
        self.image = world.image(ENEMY_BEAM_IMAGE_PATH)
        self.position = Point(float(x), float(y))
        self.speed = ENEMY_BEAM_INIT_SPEED
        self.size = Point(ENEMY_BEAM_IMAGE_WIDTH, ENEMY_BEAM_IMAGE_HEIGHT)
        self.fired = True

    def update(self) -> None:
        self.position.y += self.speed * self.world.delta_time
        if self.position.y > WIN_HEIGHT:
            self.fired = False
            self.alive = False

    def draw(self, surface: pygame.Surface) -> None:
        if self.fired:
            self._blit(surface, self.image, self.rect())

    def set_position(self, x: float, y: float) -> None:
        self.position = Point(float(x), float(y))

    def rect(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.size.x, self.size.y)