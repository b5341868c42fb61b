"""The playing field: the player, the invader formation and shot-versus-invader hits."""

from __future__ import annotations

from pathlib import Path

import pygame

from .enemy import Enemy, EnemyType
from .geometry import WIN_HEIGHT, WIN_WIDTH, Rect
from .input import Keyboard
from .player import Player
from .world import GameObject, World

ENEMY_COLUMN_SIZE = 10
ENEMY_ROW_SIZE = 7
ENEMY_NUM = ENEMY_COLUMN_SIZE * ENEMY_ROW_SIZE
ENEMY_ALIGN_X = 55.0
ENEMY_ALIGN_Y = 50.0
ENEMY_LEFT_MARGIN = int((WIN_WIDTH - ENEMY_ALIGN_X * ENEMY_COLUMN_SIZE) / 2)
ENEMY_TOP_MARGIN = 75
ROW_TYPES = (
    EnemyType.BOSS,
    EnemyType.KNIGHT,
    EnemyType.MID,
    EnemyType.ZAKO,
    EnemyType.ZAKO,
    EnemyType.ZAKO,
    EnemyType.ZAKO,
)
BACKGROUND_PATH = Path("Assets", "画像", "bg.png")
BACKGROUND_ALPHA = 200


def intersect_rect(a: Rect, b: Rect) -> bool:
    """True if the two rectangles overlap; touching edges do not count."""
    x_overlap = a.x < b.x + b.width and b.x < a.x + a.width
    y_overlap = a.y < b.y + b.height and b.y < a.y + a.height
    return x_overlap and y_overlap


def _is_held(keyboard: Keyboard, key: int) -> bool:
    return keyboard.is_key_down(key) or keyboard.keep_count(key) > 0


class Stage(GameObject):
    """Builds the player and the invader grid, and resolves player shots against invaders."""

    def __init__(self, world: World) -> None:
        super().__init__(world)
        self.player = Player(world)
        self.enemies: list[Enemy] = []
        for index in range(ENEMY_NUM):
            row, column = divmod(index, ENEMY_COLUMN_SIZE)
            enemy = Enemy(world, index, ROW_TYPES[row])
            x = column * ENEMY_ALIGN_X + ENEMY_LEFT_MARGIN
            enemy.max_move_x = float(ENEMY_LEFT_MARGIN)
            enemy.set_position(x, row * ENEMY_ALIGN_Y + ENEMY_TOP_MARGIN)
            enemy.x_origin = x
            self.enemies.append(enemy)
        self.background = world.image(BACKGROUND_PATH)

    def update(self) -> None:
        for enemy in self.enemies:
            for bullet in self.player.bullets:
                if bullet.fired and enemy.alive and intersect_rect(enemy.rect(), bullet.rect()):
                    bullet.fired = False
                    enemy.alive = False

    def draw(self, surface: pygame.Surface) -> None:
        if self.background is None:
            return
        background = pygame.transform.scale(self.background, (WIN_WIDTH, WIN_HEIGHT))
        background.set_alpha(BACKGROUND_ALPHA)
        surface.blit(background, (0, 0))

    def is_game_over(self) -> bool:
        """The game ends while G is held."""
        return _is_held(self.world.keyboard, pygame.K_g)