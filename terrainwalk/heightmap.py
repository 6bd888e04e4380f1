"""Procedural heightmaps and chunk grid helpers."""

from __future__ import annotations

import math

import numpy as np

from .config import CHUNK_RADIUS, TERRAIN_SCALE, TERRAIN_SIZE

_INT32_MASK = 0xFFFFFFFF

_PERMUTATION = np.random.RandomState(0).permutation(256)
_P = np.concatenate([_PERMUTATION, _PERMUTATION]).astype(np.int64)


def _fade(t: np.ndarray) -> np.ndarray:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(t: np.ndarray, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return a + t * (b - a)


def _grad(hashed: np.ndarray, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
    h = hashed & 15
    u = np.where(h < 8, x, y)
    v = np.where(h < 4, y, np.where((h == 12) | (h == 14), x, z))
    return np.where(h & 1, -u, u) + np.where(h & 2, -v, v)


def _noise3(x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
    x, y, z = (np.asarray(a, dtype=np.float64) for a in np.broadcast_arrays(x, y, z))
    fx, fy, fz = np.floor(x), np.floor(y), np.floor(z)
    xi = fx.astype(np.int64) & 255
    yi = fy.astype(np.int64) & 255
    zi = fz.astype(np.int64) & 255
    x, y, z = x - fx, y - fy, z - fz
    u, v, w = _fade(x), _fade(y), _fade(z)

    a = _P[xi] + yi
    aa = _P[a] + zi
    ab = _P[a + 1] + zi
    b = _P[xi + 1] + yi
    ba = _P[b] + zi
    bb = _P[b + 1] + zi

    return _lerp(
        w,
        _lerp(
            v,
            _lerp(u, _grad(_P[aa], x, y, z), _grad(_P[ba], x - 1, y, z)),
            _lerp(u, _grad(_P[ab], x, y - 1, z), _grad(_P[bb], x - 1, y - 1, z)),
        ),
        _lerp(
            v,
            _lerp(u, _grad(_P[aa + 1], x, y, z - 1), _grad(_P[ba + 1], x - 1, y, z - 1)),
            _lerp(
                u,
                _grad(_P[ab + 1], x, y - 1, z - 1),
                _grad(_P[bb + 1], x - 1, y - 1, z - 1),
            ),
        ),
    )


def _fbm(x: np.ndarray, y: np.ndarray, z: float, lacunarity: float = 2.0,
         gain: float = 0.5, octaves: int = 6) -> np.ndarray:
    total = np.zeros(np.broadcast(x, y).shape)
    frequency = 1.0
    amplitude = 1.0
    for _ in range(octaves):
        total += _noise3(x * frequency, y * frequency, z * frequency) * amplitude
        frequency *= lacunarity
        amplitude *= gain
    return total


def perlin_noise_image(width: int, height: int, offset_x: int, offset_y: int,
                       scale: float) -> np.ndarray:
    """Return a (height, width) uint8 grayscale image of fractal Perlin noise."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    aspect_ratio = width / height
    nx = (np.arange(width) + offset_x) * (scale / width)
    ny = (np.arange(height) + offset_y) * (scale / height)
    if width > height:
        nx = nx * aspect_ratio
    else:
        ny = ny / aspect_ratio
    grid_x, grid_y = np.meshgrid(nx, ny)
    p = np.clip((_fbm(grid_x, grid_y, 1.0) + 1.0) / 2.0, 0.0, 1.0)
    return np.trunc(p * 255.0).astype(np.uint8)


def generate_chunk_seed(x: int, z: int) -> int:
    """Hash chunk grid coordinates into a signed 32-bit seed."""
    value = ((x * 73856093) & _INT32_MASK) ^ ((z * 19349663) & _INT32_MASK)
    return value - (1 << 32) if value >= 1 << 31 else value


def generate_blended_heightmap(position_x: int, position_z: int, seed: int) -> np.ndarray:
    """Blend two noise layers into the heightmap of one chunk."""
    side = TERRAIN_SIZE + 1
    offset_x = position_x * TERRAIN_SIZE + seed
    offset_y = position_z * TERRAIN_SIZE + seed

    base = perlin_noise_image(side, side, offset_x, offset_y, TERRAIN_SCALE * 0.3)
    layer = perlin_noise_image(side, side, offset_x, offset_y, TERRAIN_SCALE * 0.6)

    blended = (base.astype(np.float32) / np.float32(255.0)) * (
        layer.astype(np.float32) / np.float32(255.0)
    )
    blended = np.clip(blended, 0.0, 1.0)
    return (blended * np.float32(255.0)).astype(np.uint8)


def height_at_point(heightmap: np.ndarray, x: int, z: int) -> float:
    """Normalised height in [0, 1] at column x, row z, clamped to the map."""
    rows, cols = heightmap.shape[:2]
    x = min(max(x, 0), cols - 1)
    z = min(max(z, 0), rows - 1)
    value = heightmap[z, x]
    if np.ndim(value):
        value = value[0]
    return float(value) / 255.0


def absolute_pos_to_grid(coordinate: float) -> int:
    """Grid index of the chunk containing a world coordinate."""
    return math.floor(coordinate / TERRAIN_SIZE / TERRAIN_SCALE)


def chunks_around_player(center_x: int, center_z: int) -> list[tuple[int, int]]:
    """Grid positions of every chunk within CHUNK_RADIUS of the centre."""
    offsets = range(-CHUNK_RADIUS, CHUNK_RADIUS + 1)
    return [(center_x + i, center_z + j) for i in offsets for j in offsets]