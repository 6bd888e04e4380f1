# terrainwalk

An endless, procedurally generated landscape that you can walk across.

The world is built from square chunks. The terrain of each chunk comes from
two blended Perlin noise layers. Each chunk is coloured by height: deep water,
shallow water, sand, grassland, mountains and snow. Trees are scattered over
the grassland. Chunks within two grid cells of the player are generated as the
player moves, and chunks that fall out of range are dropped. Generation is
deterministic: the same grid position always gives the same heightmap and the
same trees.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
terrainwalk
```

This opens a 1200×800 window with a top-down map of the loaded chunks. Each
chunk is drawn with its height-coloured texture, trees are drawn as small green
dots and the player as a blue square in the centre of the window. The map
follows the player.

Controls:

- Mouse: turn the camera around the player, which sets the walking direction
- Mouse wheel: move the camera closer or further away
- W / A / S / D: walk, relative to the camera direction
- Space: jump

The player falls under gravity, follows the ground of the chunk it stands on,
can climb small steps and is stopped by steep terrain in front of it.

Two lines in the corner show the player's world position and the grid cell of
the chunk underfoot, and the frame rate is shown as well.

## Using the pieces

The generation and simulation code works without a window:

```python
from terrainwalk.heightmap import generate_blended_heightmap, chunks_around_player
from terrainwalk.player import Camera, Controls, Player
from terrainwalk.terrain import Chunk, terrain_color
from terrainwalk.world import World, light_direction

heightmap = generate_blended_heightmap(0, 0, 1123)   # (151, 151) uint8 array

chunk = Chunk(2, -1)
chunk.load()            # builds chunk.mesh, chunk.texture and chunk.tree_positions
print(chunk.tree_count)

world = World()                      # loads a 7×7 block of chunks around the origin
underfoot = world.update(0.0, 0.0)   # streams chunks, returns the one at that point
tile = world.chunk_at(0, 0)

player = Player((0.0, 150.0, 0.0))
camera = Camera()
player.update(Controls(forward=True), camera, underfoot.mesh)

print(chunks_around_player(0, 0))
print(terrain_color(0.2))
print(light_direction(1.5))
```

Other modules:

- `terrainwalk.mesh` — `Mesh` with `transformed` and `ray_collision`
  (returning a `RayHit`), plus `generate_heightmap_mesh`,
  `generate_plane_mesh` and `chunk_transform`.
- `terrainwalk.rng` — `MersenneTwister`, a 32-bit Mersenne Twister with
  `next_u32`, `uniform_int` and `uniform_float`, used for tree placement.
- `terrainwalk.vegetation` — `generate_chunk_vegetation` and the tree shader
  uniform values.
- `terrainwalk.water` — the water plane mesh (`generate_water_mesh`), its
  per-chunk position (`water_position`) and the water shader uniform values.

## What it does not do

The window is a flat, top-down map; there is no 3D rendering. The shader
uniform functions (`terrain_light_uniforms`, `tree_time_uniforms`,
`water_passive_uniforms` and the like) only return the values as
dictionaries, and no shaders are compiled or used. The water plane and the
rotating light direction are computed but are not drawn in the window.