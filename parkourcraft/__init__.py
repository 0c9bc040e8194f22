"""Block-world parkour game logic: stages, player physics, collisions and OBJ meshes."""

__version__ = "0.1.0"