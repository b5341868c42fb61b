"""Game objects and the world that owns, updates, draws and removes them."""

from __future__ import annotations

import abc
from pathlib import Path

import pygame

from .geometry import Rect
from .input import Keyboard


class GameObject(abc.ABC):
    """Something that lives in a world, updates every frame and draws itself."""

    def __init__(self, world: World, *, register: bool = True) -> None:
        self.world = world
        self.alive = True
        if register:
            world.add(self)

    @abc.abstractmethod
    def update(self) -> None:
        """Advance the object by the world's current frame time."""

    @abc.abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw the object onto ``surface``."""

    def destroy(self) -> None:
        """Called once when the world removes the object."""

    @staticmethod
    def _blit(surface: pygame.Surface, image: pygame.Surface | None, rect: Rect) -> None:
        if image is None:
            return
        size = (int(rect.width), int(rect.height))
        if image.get_size() != size:
            image = pygame.transform.scale(image, size)
        surface.blit(image, (int(rect.x), int(rect.y)))


class World:
    """Owns the live game objects, frame time, keyboard state and loaded images."""

    def __init__(self, asset_dir: str | Path = ".", keyboard: Keyboard | None = None) -> None:
        self.asset_dir = Path(asset_dir)
        self.keyboard = keyboard if keyboard is not None else Keyboard()
        self.objects: list[GameObject] = []
        self.new_objects: list[GameObject] = []
        self.delta_time = 0.0
        self.timers: dict[str, float] = {}
        self._images: dict[str, pygame.Surface | None] = {}

    def add(self, obj: GameObject) -> None:
        """Queue ``obj`` to join the world on the next flush."""
        self.new_objects.append(obj)

    def flush_new(self) -> None:
        """Move queued objects into the live list."""
        self.objects.extend(self.new_objects)
        self.new_objects.clear()

    def update(self) -> None:
        for obj in self.objects:
            obj.update()

    def draw(self, surface: pygame.Surface) -> None:
        for obj in self.objects:
            obj.draw(surface)

    def reap(self) -> list[GameObject]:
        """Remove dead objects, destroy them and return them."""
        dead = [obj for obj in self.objects if not obj.alive]
        self.objects = [obj for obj in self.objects if obj.alive]
        for obj in dead:
            obj.destroy()
        return dead

    def clear(self) -> None:
        self.objects.clear()
        self.new_objects.clear()

    def image(self, path: str | Path) -> pygame.Surface | None:
        """Load an image below the asset directory, or None if it cannot be read."""
        key = str(path)
        if key not in self._images:
            try:
                self._images[key] = pygame.image.load(str(self.asset_dir / path))
            except (pygame.error, OSError):
                self._images[key] = None
        return self._images[key]

    def image_frames(
        self, path: str | Path, count: int, columns: int, rows: int, width: int, height: int
    ) -> list[pygame.Surface | None]:
        """Split a sprite sheet into ``count`` frames, row by row."""
        sheet = self.image(path)
        if sheet is None or count > columns * rows:
            return [None] * count
        sheet_width, sheet_height = sheet.get_size()
        if sheet_width < columns * width or sheet_height < rows * height:
            return [None] * count
        frames: list[pygame.Surface | None] = []
        for index in range(count):
            row, column = divmod(index, columns)
            frames.append(sheet.subsurface((column * width, row * height, width, height)))
        return frames