"""Water plane geometry, placement and shader uniforms."""

from __future__ import annotations

from typing import Sequence

from .config import MAX_TERRAIN_HEIGHT, TERRAIN_SCALE, TERRAIN_SIZE
from .mesh import Mesh, generate_plane_mesh

WATER_RESOLUTION = 20


def water_passive_uniforms() -> dict[str, float]:
    """Constant wave parameters of the water shader."""
    return {
        "uvScale": 10.0,
        "freqX": 1.0,
        "freqY": 1.0,
        "ampX": 0.1,
        "ampY": 0.1,
        "speedX": 0.8,
        "speedY": 0.8,
    }


def water_light_uniforms(light_dir: Sequence[float]) -> dict[str, tuple[float, ...]]:
    """Light direction uniform for the water shader."""
    return {"lightDir": tuple(float(c) for c in light_dir)}


def water_time_uniforms(time: float) -> dict[str, float]:
    """Animation clock uniform for the water shader."""
    return {"time": float(time)}


def water_position(grid_x: int, grid_z: int) -> tuple[float, float, float]:
    """World position of the water plane covering a chunk."""
    side = TERRAIN_SIZE * TERRAIN_SCALE
    return (
        side * (grid_x + 0.5),
        MAX_TERRAIN_HEIGHT * TERRAIN_SCALE / 10.0,
        side * (grid_z + 0.5),
    )


def generate_water_mesh() -> Mesh:
    """Unscaled water plane, one chunk wide before TERRAIN_SCALE is applied."""
    return generate_plane_mesh(TERRAIN_SIZE, TERRAIN_SIZE, WATER_RESOLUTION, WATER_RESOLUTION)