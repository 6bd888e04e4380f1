"""Tree placement and tree shader uniforms."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .config import MAX_TERRAIN_HEIGHT, TERRAIN_SCALE, TERRAIN_SIZE, TREE_COUNT
from .heightmap import height_at_point
from .rng import MersenneTwister

MAX_ATTEMPTS = TREE_COUNT * 10
MIN_TREE_HEIGHT = 0.11
MAX_TREE_HEIGHT = 0.3
TREE_CHANCE_CUTOFF = 0.8
MOON_COLOR = (0.2, 0.3, 0.5)


def generate_chunk_vegetation(heightmap: np.ndarray, grid_x: int, grid_z: int,
                              seed: int) -> list[tuple[float, float, float]]:
    """World positions of the trees growing on one chunk."""
    origin_x = grid_x * TERRAIN_SIZE * TERRAIN_SCALE
    origin_z = grid_z * TERRAIN_SIZE * TERRAIN_SCALE
    rng = MersenneTwister(seed)

    positions: list[tuple[float, float, float]] = []
    attempts = 0
    while len(positions) < TREE_COUNT and attempts < MAX_ATTEMPTS:
        attempts += 1
        x = rng.uniform_int(0, TERRAIN_SIZE)
        z = rng.uniform_int(0, TERRAIN_SIZE)

        height = height_at_point(heightmap, x, z)
        if height < MIN_TREE_HEIGHT or height > MAX_TREE_HEIGHT:
            continue
        if rng.uniform_float(0.0, 1.0) < TREE_CHANCE_CUTOFF:
            continue

        positions.append((
            origin_x + x * TERRAIN_SCALE,
            height * MAX_TERRAIN_HEIGHT * TERRAIN_SCALE,
            origin_z + z * TERRAIN_SCALE,
        ))
    return positions


def tree_passive_uniforms() -> dict[str, float]:
    """Constant wind parameters of the tree shader."""
    return {"freqX": 1.0, "speedX": 0.6}


def tree_light_uniforms(light_dir: Sequence[float]) -> dict[str, tuple[float, ...]]:
    """Sun and moon lighting uniforms for the tree shader."""
    sun = tuple(float(c) for c in light_dir)
    return {
        "lightDirection": sun,
        "moonDirection": tuple(-c for c in sun),
        "moonColor": MOON_COLOR,
    }


def tree_time_uniforms(time: float) -> dict[str, float]:
    """Animation clock uniform for the tree shader."""
    return {"time": float(time)}