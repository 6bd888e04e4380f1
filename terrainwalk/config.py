"""World dimensions and generation settings."""

TERRAIN_SIZE = 150
TERRAIN_SCALE = 4.0
MAX_TERRAIN_HEIGHT = 100

RANDOM_TERRAIN = True

CHUNK_RADIUS = 2
CHUNK_DIAMETER = CHUNK_RADIUS * 2 + 1
TREE_COUNT = 50

WORLD_SIZE = TERRAIN_SIZE * TERRAIN_SCALE

HEIGHTMAP_SEED = 1123