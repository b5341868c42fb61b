"""The player's shot, which flies upward until it leaves the screen."""

from __future__ import annotations

from pathlib import Path

import pygame

from .geometry import Point, Rect
from .world import GameObject, World

BULLET_IMAGE_WIDTH = 13
BULLET_IMAGE_HEIGHT = 33
BULLET_INIT_SPEED = 200.0
BULLET_IMAGE_PATH = Path("Assets", "画像", "laserBlue01.png")


class Bullet(GameObject):
    """A reusable player shot; drawn only while fired."""

    def __init__(self, world: World, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(world)
        self.image = world.image(BULLET_IMAGE_PATH)
        self.x = float(x)
        self.y = float(y)
        self.speed = BULLET_INIT_SPEED
        self.size = Point(BULLET_IMAGE_WIDTH, BULLET_IMAGE_HEIGHT)
        self.fired = False

    def update(self) -> None:
        self.y -= self.speed * self.world.delta_time
        if self.y < 0:
            self.fired = False

    def draw(self, surface: pygame.Surface) -> None:
        if self.fired:
            self._blit(surface, self.image, self.rect())

    def set_position(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.size.x, self.size.y)