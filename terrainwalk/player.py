"""Third-person player with gravity, ground following and wall blocking."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from .mesh import Mesh, RayHit

Vec3 = tuple[float, float, float]

MOUSE_SENSITIVITY = 0.003
PITCH_LIMIT = 1.5
JUMP_VELOCITY = 2.0
WALL_MIN_DISTANCE = 0.4
GROUND_CLEARANCE = 0.2
CAMERA_HEIGHT_OFFSET = 2.0


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _length(v: Vec3) -> float:
    return math.sqrt(v[0] ** 2 + v[1] ** 2 + v[2] ** 2)


def _normalize(v: Vec3) -> Vec3:
    length = _length(v)
    if length == 0.0:
        return v
    return (v[0] / length, v[1] / length, v[2] / length)


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


@dataclass
class Controls:
    """Input sampled for one frame."""

    mouse_dx: float = 0.0
    mouse_dy: float = 0.0
    wheel: float = 0.0
    forward: bool = False
    back: bool = False
    left: bool = False
    right: bool = False
    jump: bool = False


@dataclass
class Camera:
    """Perspective camera orbiting the player."""

    position: Vec3 = (0.0, 0.0, 0.0)
    target: Vec3 = (0.0, 0.0, 0.0)
    up: Vec3 = (0.0, 1.0, 0.0)
    fovy: float = 90.0


@dataclass
class Player:
    """A box-shaped walker steered relative to an orbiting camera."""

    position: Vec3
    size: Vec3 = (1.5, 2.5, 1.5)
    velocity: Vec3 = (0.0, 0.0, 0.0)
    move_speed: float = 0.5
    camera_radius: float = 20.0
    gravity: float = 0.05
    is_on_ground: bool = False
    step_height: float = 1.0
    yaw: float = 0.0
    pitch: float = field(default=9.0)

    def __init__(self, start_position: Vec3) -> None:
        self.position = tuple(float(c) for c in start_position)
        self.size = (1.5, 2.5, 1.5)
        self.velocity = (0.0, 0.0, 0.0)
        self.move_speed = 0.5
        self.camera_radius = 20.0
        self.gravity = 0.05
        self.is_on_ground = False
        self.step_height = 1.0
        self.yaw = 0.0
        self.pitch = 9.0

    @staticmethod
    def _cast(mesh: Optional[Mesh], origin: Vec3, direction: Vec3) -> RayHit:
        if mesh is None or _length(direction) == 0.0:
            return RayHit()
        return mesh.ray_collision(origin, direction)

    def update(self, controls: Controls, camera: Camera, mesh: Optional[Mesh]) -> None:
        """Advance one frame: steer, collide, fall and move the camera."""
        self.yaw += controls.mouse_dx * MOUSE_SENSITIVITY
        self.pitch -= controls.mouse_dy * MOUSE_SENSITIVITY
        self.pitch = min(max(self.pitch, -PITCH_LIMIT), PITCH_LIMIT)

        if controls.wheel > 0:
            self.camera_radius -= 1.0
        elif controls.wheel < 0:
            self.camera_radius += 1.0

        cam_x = math.sin(self.yaw) * math.cos(self.pitch) * self.camera_radius
        cam_y = math.sin(self.pitch) * self.camera_radius
        cam_z = math.cos(self.yaw) * -math.cos(self.pitch) * self.camera_radius

        forward = _normalize((cam_x, 0.0, cam_z))
        right = _normalize(_cross(forward, camera.up))

        move: Vec3 = (0.0, 0.0, 0.0)
        if controls.forward:
            move = _sub(move, forward)
        if controls.back:
            move = _add(move, forward)
        if controls.right:
            move = _sub(move, right)
        if controls.left:
            move = _add(move, right)
        vx, vy, vz = self.velocity
        if controls.jump:
            vy = JUMP_VELOCITY
        move = _normalize(move)

        x, y, z = self.position
        proposed = (x + move[0] * self.move_speed, y, z + move[2] * self.move_speed)
        wall = self._cast(mesh, self.position, _normalize(_sub(proposed, self.position)))
        if not (wall.hit and wall.distance < WALL_MIN_DISTANCE):
            x, z = proposed[0], proposed[2]

        vy = 0.0 if self.is_on_ground else vy - self.gravity
        vy = min(max(vy, -1.0), 10.0)
        y += vy
        self.velocity = (vx, vy, vz)

        floor = self._cast(mesh, (x, y, z), (0.0, -1.0, 0.0))
        half = self.size[1] / 2
        ground_y = 0.0
        over_mesh = False
        if floor.hit and floor.distance <= half + GROUND_CLEARANCE + self.step_height:
            ground_y = floor.point[1] + half + GROUND_CLEARANCE
            over_mesh = True

        if y < ground_y:
            y = ground_y
            self.is_on_ground = True
        elif not over_mesh and y - half < 0.0:
            y = half
            self.is_on_ground = True
        else:
            self.is_on_ground = False

        self.position = (x, y, z)
        camera.position = (x + cam_x, y + cam_y + CAMERA_HEIGHT_OFFSET, z + cam_z)
        camera.target = self.position