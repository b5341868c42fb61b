"""A title scene object that starts a stage when S is held."""

from __future__ import annotations

import enum

import pygame

from .player import _draw_text
from .stage import Stage, _is_held
from .world import GameObject, World


class SceneState(enum.Enum):
    TITLE = 0
    PLAY = 1
    GAMEOVER = 2


class SceneTransition(GameObject):
    """Shows the title and switches to play, creating a stage, once S is held."""

    def __init__(self, world: World) -> None:
        super().__init__(world)
        self.state = SceneState.TITLE

    def update(self) -> None:
        if self.state is SceneState.TITLE and _is_held(self.world.keyboard, pygame.K_s):
            self.state = SceneState.PLAY
            Stage(self.world)

    def draw(self, surface: pygame.Surface) -> None:
        if self.state is SceneState.TITLE:
            _draw_text(surface, "Invader Game", (100, 100), (0, 0, 0))