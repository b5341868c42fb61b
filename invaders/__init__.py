"""A space-invaders style arcade game built on pygame: world, objects, stage and game loop."""

__version__ = "0.1.0"