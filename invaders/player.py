"""The player's ship: moves along the bottom of the screen and fires a small pool of shots."""

from __future__ import annotations

import functools
from pathlib import Path

import pygame

from .bullet import Bullet
from .geometry import WIN_HEIGHT, WIN_WIDTH, Point, Rect
from .world import GameObject, World

PLAYER_INIT_SPEED = 250.0
PLAYER_IMAGE_WIDTH = 48
PLAYER_IMAGE_HEIGHT = 48
PLAYER_BASE_MARGIN = 32
PLAYER_INIT_X = float(WIN_WIDTH // 2 - PLAYER_IMAGE_WIDTH // 2)
PLAYER_INIT_Y = float(WIN_HEIGHT - PLAYER_IMAGE_HEIGHT - PLAYER_BASE_MARGIN)
BULLET_IMAGE_MARGIN = 17
BULLET_INTERVAL = 0.5
PLAYER_BULLET_NUM = 5
PLAYER_IMAGE_PATH = Path("Assets", "画像", "tiny_ship5.png")
BULLET_TIMER = "player_bullet"


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _draw_text(
    surface: pygame.Surface, text: str, position: tuple[int, int], color: tuple[int, int, int]
) -> None:
    surface.blit(_font(24).render(text, True, color), position)


class Player(GameObject):
    """The ship steered with the arrow keys; space fires when the shared cooldown allows."""

    def __init__(self, world: World) -> None:
        super().__init__(world, register=False)
        self.image = world.image(PLAYER_IMAGE_PATH)
        self.x = PLAYER_INIT_X
        self.y = PLAYER_INIT_Y
        self.speed = PLAYER_INIT_SPEED
        self.size = Point(PLAYER_IMAGE_WIDTH, PLAYER_IMAGE_HEIGHT)
        self.bullets = [Bullet(world) for _ in range(PLAYER_BULLET_NUM)]
        world.add(self)

    def update(self) -> None:
        dt = self.world.delta_time
        keyboard = self.world.keyboard
        next_x = self.x
        if keyboard.keep_count(pygame.K_LEFT):
            next_x = self.x - self.speed * dt
        if keyboard.keep_count(pygame.K_RIGHT):
            next_x = self.x + self.speed * dt
        if next_x >= 0 and next_x + PLAYER_IMAGE_WIDTH <= WIN_WIDTH:
            self.x = next_x

        timer = self.world.timers.get(BULLET_TIMER, 0.0)
        if timer > 0.0:
            timer -= dt
        if keyboard.is_key_down(pygame.K_SPACE) and timer <= 0.0:
            self.shoot()
            timer = BULLET_INTERVAL
        self.world.timers[BULLET_TIMER] = timer

    def draw(self, surface: pygame.Surface) -> None:
        self._blit(
            surface, self.image, Rect(self.x, self.y, PLAYER_IMAGE_WIDTH, PLAYER_IMAGE_HEIGHT)
        )
        _draw_text(surface, "Player Draw!", (100, 100), (255, 255, 0))

    def shoot(self) -> None:
        """Fire the first shot that is not already in flight, if any."""
        bullet = next((b for b in self.bullets if not b.fired), None)
        if bullet is not None:
            bullet.set_position(self.x + BULLET_IMAGE_MARGIN, self.y)
            bullet.fired = True

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.size.x, self.size.y)