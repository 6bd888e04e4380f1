import numpy as np
import pytest

from terrainwalk.config import HEIGHTMAP_SEED, TERRAIN_SCALE, TERRAIN_SIZE, TREE_COUNT
from terrainwalk.heightmap import generate_blended_heightmap
from terrainwalk.vegetation import (
    generate_chunk_vegetation,
    tree_light_uniforms,
    tree_passive_uniforms,
    tree_time_uniforms,
)

SIDE = TERRAIN_SIZE + 1


def test_fertile_ground_fills_tree_quota():
    heightmap = np.full((SIDE, SIDE), 51, dtype=np.uint8)
    trees = generate_chunk_vegetation(heightmap, 0, 0, 0)
    assert len(trees) == TREE_COUNT
    assert all(y == pytest.approx(51 / 255 * 100 * TERRAIN_SCALE) for _, y, _ in trees)


def test_water_and_peaks_grow_nothing():
    low = np.zeros((SIDE, SIDE), dtype=np.uint8)
    high = np.full((SIDE, SIDE), 200, dtype=np.uint8)
    assert generate_chunk_vegetation(low, 0, 0, 17) == []
    assert generate_chunk_vegetation(high, 0, 0, 17) == []


def test_trees_stay_inside_chunk_on_grid():
    heightmap = np.full((SIDE, SIDE), 51, dtype=np.uint8)
    trees = generate_chunk_vegetation(heightmap, 2, -1, 99)
    origin_x = 2 * TERRAIN_SIZE * TERRAIN_SCALE
    origin_z = -1 * TERRAIN_SIZE * TERRAIN_SCALE
    for x, _, z in trees:
        assert origin_x <= x <= origin_x + TERRAIN_SIZE * TERRAIN_SCALE
        assert origin_z <= z <= origin_z + TERRAIN_SIZE * TERRAIN_SCALE
        assert (x - origin_x) % TERRAIN_SCALE == 0
        assert (z - origin_z) % TERRAIN_SCALE == 0


def test_vegetation_is_deterministic_per_seed():
    heightmap = np.full((SIDE, SIDE), 51, dtype=np.uint8)
    first = generate_chunk_vegetation(heightmap, 0, 0, 5)
    second = generate_chunk_vegetation(heightmap, 0, 0, 5)
    other_seed = generate_chunk_vegetation(heightmap, 0, 0, 6)
    assert len(first) == TREE_COUNT
    assert first == second
    assert first != other_seed


def test_real_terrain_trees_on_lowland():
    heightmap = generate_blended_heightmap(1, 1, HEIGHTMAP_SEED)
    trees = generate_chunk_vegetation(heightmap, 1, 1, 12345)
    assert len(trees) <= TREE_COUNT
    for _, y, _ in trees:
        assert 0.11 * 100 * TERRAIN_SCALE <= y <= 0.3 * 100 * TERRAIN_SCALE


def test_tree_passive_uniforms():
    assert tree_passive_uniforms() == {"freqX": 1.0, "speedX": 0.6}


def test_tree_light_uniforms():
    uniforms = tree_light_uniforms((0.5, -0.25, -0.5))
    assert uniforms["lightDirection"] == (0.5, -0.25, -0.5)
    assert uniforms["moonDirection"] == (-0.5, 0.25, 0.5)
    assert uniforms["moonColor"] == (0.2, 0.3, 0.5)


def test_tree_time_uniforms():
    assert tree_time_uniforms(2.5) == {"time": 2.5}