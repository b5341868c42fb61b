"""The game loop: title, play and game-over screens around a world of objects."""

from __future__ import annotations

import argparse
import enum
from collections.abc import Iterable
from pathlib import Path

import pygame

from .geometry import WIN_HEIGHT, WIN_WIDTH
from .player import _draw_text
from .stage import Stage
from .world import World

BG_COLOR = (30, 30, 30)
FRAME_WAIT_MS = 16


class GameState(enum.Enum):
    TITLE = 0
    PLAY = 1
    GAMEOVER = 2


class Game:
    """Drives the screens and the world one frame at a time."""

    def __init__(self, asset_dir: str | Path = ".") -> None:
        self.world = World(asset_dir)
        self.state = GameState.TITLE
        self.stage: Stage | None = None

    def _new_stage(self) -> None:
        self.world.clear()
        self.stage = Stage(self.world)

    def step(self, pressed: Iterable[int], dt: float) -> bool:
        """Advance one frame with the keys held and the elapsed seconds.

        Returns False once Escape is held and the game should stop.
        """
        held = frozenset(pressed)
        self.world.keyboard.update(held)
        self.world.delta_time = dt

        if self.state is GameState.TITLE:
            if pygame.K_SPACE in held:
                self._new_stage()
                self.state = GameState.PLAY
        elif self.state is GameState.PLAY:
            if self.stage is not None and self.stage.is_game_over():
                self.state = GameState.GAMEOVER
        elif self.state is GameState.GAMEOVER:
            if pygame.K_r in held:
                self._new_stage()
                self.state = GameState.PLAY
            elif pygame.K_t in held:
                self.stage = None
                self.world.clear()
                self.state = GameState.TITLE

        self.world.flush_new()
        self.world.update()
        self.world.reap()
        return pygame.K_ESCAPE not in held

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(BG_COLOR)
        self.world.draw(surface)
        if self.state is GameState.TITLE:
            _draw_text(surface, "インベーダーゲーム", (300, 200), (255, 255, 255))
            _draw_text(surface, "スペースキーでスタート", (300, 250), (255, 255, 255))
        elif self.state is GameState.PLAY:
            _draw_text(
                surface, f"gameObjects: {len(self.world.objects)}", (10, 10), (255, 255, 255)
            )
        else:
            _draw_text(surface, "ゲームオーバー", (300, 200), (255, 0, 0))
            _draw_text(
                surface, "Rキーでリトライ / Tキーでタイトルへ", (300, 250), (255, 255, 255)
            )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play the invader game.")
    parser.add_argument("--assets", default=".", help="directory that holds the Assets folder")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption("TITLE")
        game = Game(args.assets)
        held: set[int] = set()
        previous = pygame.time.get_ticks()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    held.add(event.key)
                elif event.type == pygame.KEYUP:
                    held.discard(event.key)
            now = pygame.time.get_ticks()
            if not game.step(held, (now - previous) / 1000.0):
                running = False
            game.draw(screen)
            pygame.display.flip()
            pygame.time.wait(FRAME_WAIT_MS)
            previous = now
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())