import numpy as np
import pytest

from terrainwalk.mesh import (
    Mesh,
    RayHit,
    chunk_transform,
    generate_heightmap_mesh,
    generate_plane_mesh,
)


@pytest.fixture
def flat_mesh():
    return generate_heightmap_mesh(np.zeros((3, 3), dtype=np.uint8), (2.0, 255.0, 2.0))


def test_heightmap_mesh_counts(flat_mesh):
    assert flat_mesh.vertex_count == 2 * 2 * 6
    assert flat_mesh.triangle_count == 2 * 2 * 2
    assert flat_mesh.indices is None


def test_flat_heightmap_mesh_points_up(flat_mesh):
    assert np.allclose(flat_mesh.vertices[:, 1], 0.0)
    assert np.allclose(flat_mesh.normals, [0.0, 1.0, 0.0])
    assert flat_mesh.vertices[:, 0].min() == 0.0
    assert flat_mesh.vertices[:, 0].max() == 2.0


def test_heightmap_mesh_height_scaling():
    heightmap = np.zeros((3, 3), dtype=np.uint8)
    heightmap[1, 1] = 255
    mesh = generate_heightmap_mesh(heightmap, (2.0, 100.0, 2.0))
    assert mesh.vertices[:, 1].max() == pytest.approx(100.0)
    assert np.all(mesh.normals[:, 1] > 0.0)


def test_heightmap_mesh_texcoords_in_unit_square(flat_mesh):
    assert flat_mesh.texcoords.min() == 0.0
    assert flat_mesh.texcoords.max() == 1.0


def test_heightmap_mesh_rejects_tiny_map():
    with pytest.raises(ValueError):
        generate_heightmap_mesh(np.zeros((1, 5), dtype=np.uint8), (1.0, 1.0, 1.0))


def test_ray_hits_flat_mesh(flat_mesh):
    hit = flat_mesh.ray_collision((0.5, 10.0, 0.7), (0.0, -1.0, 0.0))
    assert hit.hit
    assert hit.distance == pytest.approx(10.0)
    assert hit.point == pytest.approx((0.5, 0.0, 0.7))
    assert hit.normal == pytest.approx((0.0, 1.0, 0.0))


def test_ray_misses_outside_mesh(flat_mesh):
    assert flat_mesh.ray_collision((5.0, 10.0, 5.0), (0.0, -1.0, 0.0)) == RayHit()


def test_ray_pointing_away_misses(flat_mesh):
    assert not flat_mesh.ray_collision((0.5, 10.0, 0.5), (0.0, 1.0, 0.0)).hit


def test_ray_takes_closest_hit():
    lower = generate_heightmap_mesh(np.zeros((2, 2), dtype=np.uint8), (1.0, 1.0, 1.0))
    upper = lower.transformed(np.array([[1, 0, 0, 0], [0, 1, 0, 3], [0, 0, 1, 0], [0, 0, 0, 1.0]]))
    both = Mesh(
        np.concatenate([lower.vertices, upper.vertices]),
        np.concatenate([lower.normals, upper.normals]),
        np.concatenate([lower.texcoords, upper.texcoords]),
    )
    hit = both.ray_collision((0.2, 10.0, 0.3), (0.0, -1.0, 0.0))
    assert hit.distance == pytest.approx(7.0)


def test_chunk_transform_scales_after_translating():
    assert chunk_transform(0, 0) @ np.array([1.0, 1.0, 1.0, 1.0]) == pytest.approx([4, 4, 4, 1])


def test_transformed_places_chunk(flat_mesh):
    moved = flat_mesh.transformed(chunk_transform(1, 2))
    assert np.allclose(moved.vertices, (flat_mesh.vertices + [150.0, 0.0, 300.0]) * 4.0)
    assert np.allclose(moved.normals, flat_mesh.normals)
    assert flat_mesh.vertices[:, 0].max() == 2.0


def test_plane_mesh_layout():
    plane = generate_plane_mesh(2.0, 4.0, 1, 1)
    assert plane.vertex_count == 4
    assert plane.triangle_count == 2
    assert sorted(set(plane.vertices[:, 0])) == [-1.0, 1.0]
    assert sorted(set(plane.vertices[:, 2])) == [-2.0, 2.0]
    assert set(plane.indices.ravel()) == {0, 1, 2, 3}


@pytest.mark.parametrize("res_x, res_z", [(1, 3), (20, 20), (4, 2)])
def test_plane_mesh_counts(res_x, res_z):
    plane = generate_plane_mesh(10.0, 10.0, res_x, res_z)
    assert plane.vertex_count == (res_x + 1) * (res_z + 1)
    assert plane.triangle_count == 2 * res_x * res_z
    assert plane.indices.max() == plane.vertex_count - 1


def test_plane_mesh_ray_hit_faces_up():
    plane = generate_plane_mesh(2.0, 4.0, 1, 1)
    hit = plane.ray_collision((0.3, 5.0, 0.2), (0.0, -1.0, 0.0))
    assert hit.hit
    assert hit.distance == pytest.approx(5.0)
    assert hit.normal[1] > 0.0


def test_plane_mesh_rejects_zero_resolution():
    with pytest.raises(ValueError):
        generate_plane_mesh(1.0, 1.0, 0, 1)