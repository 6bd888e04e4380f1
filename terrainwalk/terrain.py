"""Terrain chunks: heightmap, mesh, colour texture and trees."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .config import HEIGHTMAP_SEED, MAX_TERRAIN_HEIGHT, TERRAIN_SIZE
from .heightmap import generate_blended_heightmap, generate_chunk_seed
from .mesh import Mesh, chunk_transform, generate_heightmap_mesh
from .vegetation import generate_chunk_vegetation

MOON_COLOR = (0.2, 0.3, 0.5)

_BANDS = (
    (0.08, (0, 0, 50, 255)),      # deep water
    (0.105, (0, 0, 200, 255)),    # water
    (0.11, (200, 180, 100, 255)), # sand
    (0.3, (70, 120, 50, 255)),    # lowland
    (0.5, (127, 106, 79, 255)),   # mountains
)
_TOP_COLOR = (200, 200, 200, 255)
_PALETTE = np.array([color for _, color in _BANDS] + [_TOP_COLOR], dtype=np.uint8)


def terrain_color(value: float) -> tuple[int, int, int, int]:
    """RGBA colour of terrain at a normalised height."""
    for limit, color in _BANDS:
        if value < limit:
            return color
    return _TOP_COLOR


def colorize_heightmap(heightmap: np.ndarray) -> np.ndarray:
    """Turn a grayscale heightmap into an RGBA texture of shape (h, w, 4)."""
    hm = np.asarray(heightmap)
    if hm.ndim == 3:
        hm = hm[..., 0]
    values = hm.astype(np.float32) / np.float32(255.0)
    conditions = [values < np.float32(limit) for limit, _ in _BANDS]
    band = np.select(conditions, list(range(len(_BANDS))), default=len(_BANDS))
    return _PALETTE[band]


def terrain_passive_uniforms() -> dict[str, tuple[float, ...]]:
    """Constant diffuse tint of the terrain shader."""
    return {"colDiffuse": (1.0, 0.8, 0.6, 1.0)}


def terrain_light_uniforms(light_dir: Sequence[float]) -> dict[str, tuple[float, ...]]:
    """Sun and moon lighting uniforms for the terrain shader."""
    sun = tuple(float(c) for c in light_dir)
    return {
        "lightDirection": sun,
        "moonDirection": tuple(-c for c in sun),
        "moonColor": MOON_COLOR,
    }


class Chunk:
    """One square tile of the endless terrain, addressed by grid position."""

    def __init__(self, position_x: int, position_z: int) -> None:
        self.grid_position = (position_x, position_z)
        self.seed = generate_chunk_seed(position_x, position_z)
        self.heightmap = generate_blended_heightmap(position_x, position_z, HEIGHTMAP_SEED)
        self.transform = chunk_transform(position_x, position_z)
        self.mesh: Optional[Mesh] = None
        self.texture: Optional[np.ndarray] = None
        self.tree_positions: list[tuple[float, float, float]] = []
        self.is_loaded = False

    def load(self) -> None:
        """Build the world-space mesh, colour texture and tree positions."""
        local = generate_heightmap_mesh(
            self.heightmap, (TERRAIN_SIZE, MAX_TERRAIN_HEIGHT, TERRAIN_SIZE)
        )
        self.mesh = local.transformed(self.transform)
        self.texture = colorize_heightmap(self.heightmap)
        grid_x, grid_z = self.grid_position
        self.tree_positions = generate_chunk_vegetation(self.heightmap, grid_x, grid_z, self.seed)
        self.is_loaded = True

    def unload(self) -> None:
        """Release the generated mesh, texture and trees if loaded."""
        if self.is_loaded:
            self.mesh = None
            self.texture = None
            self.tree_positions = []
            self.is_loaded = False

    @property
    def tree_count(self) -> int:
        return len(self.tree_positions)