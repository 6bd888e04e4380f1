"""Interactive window: walk the endless terrain seen from above."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .config import TERRAIN_SCALE, TERRAIN_SIZE, WORLD_SIZE
from .heightmap import absolute_pos_to_grid
from .player import Camera, Controls, Player
from .world import World

WIDTH, HEIGHT = 1200, 800
PIXELS_PER_UNIT = 0.25


def format_status(target: Sequence[float]) -> tuple[str, str]:
    """The two status lines shown in the corner of the window."""
    x, y, z = target
    return (
        "Player position: (%06.3f, %06.3f, %06.3f)" % (x, y, z),
        "Grid position: (%03i, %03i)" % (absolute_pos_to_grid(x), absolute_pos_to_grid(z)),
    )


class TerrainWindow:
    """A window that runs the world simulation and draws a map view of it."""

    def __init__(self) -> None:
        import pyglet
        from pyglet.window import key

        self._pyglet = pyglet
        self._key = key
        self.window = pyglet.window.Window(WIDTH, HEIGHT, "Terreno Procedural")
        self.window.set_exclusive_mouse(True)
        self.keys = key.KeyStateHandler()
        self.window.push_handlers(self.keys)
        self.window.push_handlers(
            on_draw=self._on_draw,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_scroll=self._on_mouse_scroll,
        )
        self.world = World()
        self.player = Player((0.0, WORLD_SIZE / 4, 0.0))
        self.camera = Camera()
        self.time = 0.0
        self._mouse = [0.0, 0.0]
        self._wheel = 0.0
        self._images: dict[tuple[int, int], object] = {}
        self._fps = pyglet.window.FPSDisplay(self.window)
        self._labels = [
            pyglet.text.Label("", x=10, y=HEIGHT - 30 - 20 * i, font_size=14, color=(0, 0, 255, 255))
            for i in range(2)
        ]
        pyglet.clock.schedule_interval(self._tick, 1 / 60)

    def _on_mouse_motion(self, x, y, dx, dy) -> None:
        self._mouse[0] += dx
        self._mouse[1] -= dy

    def _on_mouse_scroll(self, x, y, scroll_x, scroll_y) -> None:
        self._wheel += scroll_y

    def _tick(self, dt: float) -> None:
        self.time += dt
        target = self.camera.target
        chunk = self.world.update(target[0], target[2])
        k = self._key
        controls = Controls(
            mouse_dx=self._mouse[0], mouse_dy=self._mouse[1], wheel=self._wheel,
            forward=self.keys[k.W], back=self.keys[k.S],
            left=self.keys[k.A], right=self.keys[k.D], jump=self.keys[k.SPACE],
        )
        self._mouse = [0.0, 0.0]
        self._wheel = 0.0
        self.player.update(controls, self.camera, chunk.mesh)
        for pos in [p for p in self._images if p not in self.world.chunks]:
            del self._images[pos]

    def _image(self, pos, chunk):
        image = self._images.get(pos)
        if image is None and chunk.texture is not None:
            h, w = chunk.texture.shape[:2]
            image = self._pyglet.image.ImageData(w, h, "RGBA", chunk.texture.tobytes(), pitch=w * 4)
            self._images[pos] = image
        return image

    def _to_screen(self, x: float, z: float) -> tuple[float, float]:
        px, _, pz = self.player.position
        return (WIDTH / 2 + (x - px) * PIXELS_PER_UNIT, HEIGHT / 2 + (z - pz) * PIXELS_PER_UNIT)

    def _on_draw(self) -> None:
        pyglet = self._pyglet
        self.window.clear()
        batch = pyglet.graphics.Batch()
        keep = []
        side = TERRAIN_SIZE * TERRAIN_SCALE * PIXELS_PER_UNIT
        for pos, chunk in self.world.chunks.items():
            image = self._image(pos, chunk)
            if image is None:
                continue
            sx, sy = self._to_screen(pos[0] * TERRAIN_SIZE * TERRAIN_SCALE,
                                     pos[1] * TERRAIN_SIZE * TERRAIN_SCALE)
            sprite = pyglet.sprite.Sprite(image, sx, sy, batch=batch)
            sprite.scale = side / image.width
            keep.append(sprite)
        batch.draw()
        trees = pyglet.graphics.Batch()
        for chunk in self.world.chunks.values():
            for tx, _, tz in chunk.tree_positions:
                sx, sy = self._to_screen(tx, tz)
                keep.append(pyglet.shapes.Circle(sx, sy, 3, color=(20, 90, 20), batch=trees))
        w = self.player.size[0] * PIXELS_PER_UNIT * 4
        keep.append(pyglet.shapes.Rectangle(WIDTH / 2 - w / 2, HEIGHT / 2 - w / 2, w, w,
                                            color=(0, 121, 241), batch=trees))
        trees.draw()
        for label, text in zip(self._labels, format_status(self.camera.target)):
            label.text = text
            label.draw()
        self._fps.draw()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="terrainwalk", description="Walk procedural terrain.")
    parser.parse_args(argv)
    import pyglet

    TerrainWindow()
    pyglet.app.run()
    return 0