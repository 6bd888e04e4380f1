"""Triangle meshes, their generators and ray casting against them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

from .config import TERRAIN_SCALE, TERRAIN_SIZE

_EPSILON = 0.000001


@dataclass(frozen=True)
class RayHit:
    """Result of a ray cast; all fields are zero when nothing was hit."""

    hit: bool = False
    distance: float = 0.0
    point: tuple[float, float, float] = (0.0, 0.0, 0.0)
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)


def _normalized(vectors: np.ndarray) -> np.ndarray:
    lengths = np.linalg.norm(vectors, axis=-1, keepdims=True)
    return np.divide(vectors, lengths, out=vectors.copy(), where=lengths > 0)


@dataclass
class Mesh:
    """Vertex data with optional triangle indices (non-indexed when None)."""

    vertices: np.ndarray
    normals: np.ndarray
    texcoords: np.ndarray
    indices: Optional[np.ndarray] = field(default=None)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangles(self) -> np.ndarray:
        """Triangle corners as an array of shape (n, 3, 3)."""
        if self.indices is None:
            return self.vertices.reshape(-1, 3, 3)
        return self.vertices[self.indices]

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    def transformed(self, matrix: Sequence[Sequence[float]]) -> Mesh:
        """Return a copy with a 4x4 transform applied to positions and normals."""
        m = np.asarray(matrix, dtype=np.float64)
        linear = m[:3, :3]
        vertices = self.vertices @ linear.T + m[:3, 3]
        normals = _normalized(self.normals @ np.linalg.inv(linear))
        indices = None if self.indices is None else self.indices.copy()
        return Mesh(vertices, normals, self.texcoords.copy(), indices)

    def ray_collision(self, origin: Sequence[float], direction: Sequence[float]) -> RayHit:
        """Closest intersection of a ray with any triangle of the mesh."""
        o = np.asarray(origin, dtype=np.float64)
        d = np.asarray(direction, dtype=np.float64)
        tris = self.triangles
        if len(tris) == 0:
            return RayHit()
        p1 = tris[:, 0]
        edge1 = tris[:, 1] - p1
        edge2 = tris[:, 2] - p1

        p = np.cross(d, edge2)
        det = np.einsum("ij,ij->i", edge1, p)
        valid = np.abs(det) >= _EPSILON
        inv_det = np.divide(1.0, det, out=np.zeros_like(det), where=valid)

        tv = o - p1
        u = np.einsum("ij,ij->i", tv, p) * inv_det
        valid &= (u >= 0.0) & (u <= 1.0)

        q = np.cross(tv, edge1)
        v = (q @ d) * inv_det
        valid &= (v >= 0.0) & (u + v <= 1.0)

        t = np.einsum("ij,ij->i", edge2, q) * inv_det
        valid &= t > _EPSILON

        if not valid.any():
            return RayHit()
        candidates = np.where(valid, t, np.inf)
        best = int(np.argmin(candidates))
        distance = float(t[best])
        normal = _normalized(np.cross(edge1[best], edge2[best]))
        point = o + d * distance
        return RayHit(
            True,
            distance,
            tuple(float(c) for c in point),
            tuple(float(c) for c in normal),
        )


def generate_heightmap_mesh(heightmap: np.ndarray, size: Sequence[float]) -> Mesh:
    """Build a terrain mesh spanning `size` from a grayscale heightmap."""
    hm = np.asarray(heightmap)
    gray = hm[..., :3].astype(np.float64).mean(axis=-1) if hm.ndim == 3 else hm.astype(np.float64)
    map_z, map_x = gray.shape
    if map_x < 2 or map_z < 2:
        raise ValueError("heightmap must be at least 2x2")

    scale_x = size[0] / (map_x - 1)
    scale_y = size[1] / 255.0
    scale_z = size[2] / (map_z - 1)

    cell_z, cell_x = np.meshgrid(np.arange(map_z - 1), np.arange(map_x - 1), indexing="ij")
    dx = np.array([0, 0, 1, 1, 0, 1])
    dz = np.array([0, 1, 0, 0, 1, 1])
    gx = cell_x[..., None] + dx
    gz = cell_z[..., None] + dz

    vertices = np.stack(
        [gx * scale_x, gray[gz, gx] * scale_y, gz * scale_z], axis=-1
    ).reshape(-1, 3)
    texcoords = np.stack(
        [gx / (map_x - 1), gz / (map_z - 1)], axis=-1
    ).reshape(-1, 2)

    tris = vertices.reshape(-1, 3, 3)
    face_normals = _normalized(np.cross(tris[:, 1] - tris[:, 0], tris[:, 2] - tris[:, 0]))
    normals = np.repeat(face_normals, 3, axis=0)
    return Mesh(vertices, normals, texcoords)


def generate_plane_mesh(width: float, length: float, res_x: int, res_z: int) -> Mesh:
    """Build a flat, indexed plane centred on the origin in the XZ plane."""
    if res_x < 1 or res_z < 1:
        raise ValueError("plane resolution must be at least 1")
    cols, rows = res_x + 1, res_z + 1
    fx = np.arange(cols) / (cols - 1)
    fz = np.arange(rows) / (rows - 1)
    grid_z, grid_x = np.meshgrid(fz, fx, indexing="ij")

    vertices = np.stack(
        [(grid_x - 0.5) * width, np.zeros_like(grid_x), (grid_z - 0.5) * length], axis=-1
    ).reshape(-1, 3)
    normals = np.tile([0.0, 1.0, 0.0], (len(vertices), 1))
    texcoords = np.stack([grid_x, grid_z], axis=-1).reshape(-1, 2)

    faces = np.arange(res_x * res_z)
    corner = faces + faces // res_x
    indices = np.stack(
        [
            np.stack([corner + cols, corner + 1, corner], axis=-1),
            np.stack([corner + cols, corner + cols + 1, corner + 1], axis=-1),
        ],
        axis=1,
    ).reshape(-1, 3)
    return Mesh(vertices, normals, texcoords, indices)


def chunk_transform(grid_x: int, grid_z: int) -> np.ndarray:
    """Model matrix placing a chunk mesh at its grid position in world space."""
    translate = np.eye(4)
    translate[0, 3] = grid_x * TERRAIN_SIZE
    translate[2, 3] = grid_z * TERRAIN_SIZE
    scale = np.diag([TERRAIN_SCALE, TERRAIN_SCALE, TERRAIN_SCALE, 1.0])
    return scale @ translate