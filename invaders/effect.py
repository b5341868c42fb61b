"""A short explosion animation played from a sprite sheet."""

from __future__ import annotations

from pathlib import Path

import pygame

from .geometry import Point, Rect
from .world import GameObject, World

ANIME_TIME = 1.0
EFFECT_IMAGE_SIZE = 48
EFFECT_IMAGE_PATH = Path("Assets", "画像", "explosion.png")
MAX_FRAME = 9
DIV_NUM = 3
FRAME_TIME = ANIME_TIME / MAX_FRAME


class Effect(GameObject):
    """An explosion that steps through its frames and dies after its lifetime."""

    def __init__(self, world: World, position: Point) -> None:
        super().__init__(world)
        self.frames = world.image_frames(
            EFFECT_IMAGE_PATH, MAX_FRAME, DIV_NUM, DIV_NUM, EFFECT_IMAGE_SIZE, EFFECT_IMAGE_SIZE
        )
        self.position = Point(position.x, position.y)
        self.anime_timer = ANIME_TIME
        self.frame_timer = FRAME_TIME
        self.frame = 0

    def update(self) -> None:
        dt = self.world.delta_time
        self.anime_timer -= dt
        if self.anime_timer < 0:
            self.alive = False
        self.frame_timer -= dt
        if self.frame_timer < 0:
            self.frame += 1
            self.frame_timer = FRAME_TIME - self.frame_timer

    def draw(self, surface: pygame.Surface) -> None:
        image = self.frames[min(self.frame, len(self.frames) - 1)]
        rect = Rect(self.position.x, self.position.y, EFFECT_IMAGE_SIZE, EFFECT_IMAGE_SIZE)
        self._blit(surface, image, rect)