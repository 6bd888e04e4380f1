"""The streaming set of terrain chunks surrounding the player."""

from __future__ import annotations

import math

from .heightmap import absolute_pos_to_grid, chunks_around_player
from .terrain import Chunk

INITIAL_RADIUS = 3
LIGHT_ROTATION_SPEED = 0.2


def light_direction(time: float) -> tuple[float, float, float]:
    """Direction of the rotating sun at a given time."""
    angle = time * LIGHT_ROTATION_SPEED
    return (math.cos(angle), -math.sin(angle), -0.5)


class World:
    """Loaded chunks keyed by grid position."""

    def __init__(self) -> None:
        span = range(-INITIAL_RADIUS, INITIAL_RADIUS + 1)
        self.chunks: dict[tuple[int, int], Chunk] = {
            (i, j): Chunk(i, j) for i in span for j in span
        }
        for chunk in self.chunks.values():
            chunk.load()

    def update(self, target_x: float, target_z: float) -> Chunk:
        """Load chunks near the target, drop far ones, return the one underfoot."""
        grid = (absolute_pos_to_grid(target_x), absolute_pos_to_grid(target_z))
        visible = chunks_around_player(*grid)
        for pos in visible:
            if pos not in self.chunks:
                chunk = Chunk(*pos)
                chunk.load()
                self.chunks[pos] = chunk
        keep = set(visible)
        for pos in [p for p in self.chunks if p not in keep]:
            self.chunks.pop(pos).unload()
        return self.chunks[grid]

    def chunk_at(self, grid_x: int, grid_z: int) -> Chunk:
        """Loaded chunk at a grid position; KeyError if it is not loaded."""
        return self.chunks[(grid_x, grid_z)]