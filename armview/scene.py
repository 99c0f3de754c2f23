"""Camera state, transforms and scene geometry for the arm viewer."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

Vec3 = tuple[float, float, float]
Segment = tuple[Vec3, Vec3]

FULL_TURN = 360 * 16
NEAR_PLANE = 1.0
FAR_PLANE = 20000.0
FIELD_OF_VIEW = 70.0
BASE_DISTANCE = -40.0
GRID_STEP = 50
GRID_COUNT = 15
WORLD_AXIS_EXTENT = (900, 700)
JOINT_AXIS_EXTENT = (300, 500)


class MouseButton(enum.Flag):
    """Mouse buttons held during a drag."""

    NONE = 0
    LEFT = enum.auto()
    RIGHT = enum.auto()
    MIDDLE = enum.auto()


def _zeros() -> list[float]:
    return [0.0] * 7


@dataclass
class RobotConfig:
    """Per-joint offsets: d along z, a along x, alpha about x, joints about z."""

    d: list[float] = field(default_factory=_zeros)
    a: list[float] = field(default_factory=_zeros)
    alpha: list[float] = field(default_factory=_zeros)
    joints: list[float] = field(default_factory=_zeros)


@dataclass
class GlobalConfig:
    """Which scene elements are drawn."""

    draw_grid: bool = False
    draw_world_coord: bool = False
    draw_joint1_coord: bool = False
    draw_joint2_coord: bool = False
    draw_joint3_coord: bool = False
    draw_joint4_coord: bool = False
    draw_joint5_coord: bool = False
    draw_joint6_coord: bool = False
    draw_desk: bool = False


def normalize_angle(angle: int) -> int:
    """Bring an angle in sixteenths of a degree into the range 0..5760."""
    while angle < 0:
        angle += FULL_TURN
    while angle > FULL_TURN:
        angle -= FULL_TURN
    return angle


def translate(x: float, y: float, z: float) -> np.ndarray:
    """Return the 4x4 translation matrix."""
    m = np.eye(4)
    m[:3, 3] = (x, y, z)
    return m


def rotate(angle: float, x: float, y: float, z: float) -> np.ndarray:
    """Return the 4x4 rotation of angle degrees about the axis (x, y, z)."""
    axis = np.array([x, y, z], dtype=float)
    length = np.linalg.norm(axis)
    if length == 0:
        raise ValueError("rotation axis must not be zero")
    ux, uy, uz = axis / length
    theta = math.radians(angle)
    c, s = math.cos(theta), math.sin(theta)
    t = 1.0 - c
    m = np.eye(4)
    m[:3, :3] = [
        [ux * ux * t + c, ux * uy * t - uz * s, ux * uz * t + uy * s],
        [uy * ux * t + uz * s, uy * uy * t + c, uy * uz * t - ux * s],
        [ux * uz * t - uy * s, uy * uz * t + ux * s, uz * uz * t + c],
    ]
    return m


def perspective(width: int, height: int) -> np.ndarray:
    """Return the projection matrix used for a viewport of the given size."""
    if width < 0 or height < 0:
        raise ValueError("viewport size must not be negative")
    if height == 0:
        raise ValueError("viewport height must not be zero")
    aspect = width / height
    top = math.tan(FIELD_OF_VIEW / 360.0 * 3.14159) * NEAR_PLANE
    right = top * aspect
    n, f = NEAR_PLANE, FAR_PLANE
    m = np.zeros((4, 4))
    m[0, 0] = 2 * n / (2 * right)
    m[1, 1] = 2 * n / (2 * top)
    m[2, 2] = -(f + n) / (f - n)
    m[2, 3] = -2 * f * n / (f - n)
    m[3, 2] = -1.0
    return m


def grid_lines(step: int = GRID_STEP, num: int = GRID_COUNT) -> list[Segment]:
    """Return the line segments of the square floor grid in the z=0 plane."""
    extent = num * step
    segments: list[Segment] = []
    for i in range(-num, num + 1):
        pos = i * step
        segments.append(((pos, -extent, 0), (pos, extent, 0)))
        segments.append(((-extent, pos, 0), (extent, pos, 0)))
    return segments


def axis_lines(extent_xy: float, extent_z: float) -> list[Segment]:
    """Return the x, y and z axis segments of a coordinate frame."""
    return [
        ((-extent_xy, 0, 0), (extent_xy, 0, 0)),
        ((0, -extent_xy, 0), (0, extent_xy, 0)),
        ((0, 0, 0), (0, 0, extent_z)),
    ]


@dataclass
class ViewState:
    """Camera rotation, zoom and pan driven by mouse drags."""

    x_rot: float = -2584.0
    y_rot: float = 1376.0
    z_rot: float = 0.0
    zoom: int = -1600
    x_tran: int = 0
    y_tran: int = -500
    last_pos: tuple[int, int] = (0, 0)
    x_rotation_listeners: list[Callable[[float], None]] = field(
        default_factory=list, repr=False, compare=False
    )
    y_rotation_listeners: list[Callable[[float], None]] = field(
        default_factory=list, repr=False, compare=False
    )

    def set_x_rotation(self, angle: float) -> bool:
        """Set the x rotation; return whether it changed."""
        if angle == self.x_rot:
            return False
        self.x_rot = angle
        for listener in self.x_rotation_listeners:
            listener(angle)
        return True

    def set_y_rotation(self, angle: float) -> bool:
        """Set the y rotation; return whether it changed."""
        if angle == self.y_rot:
            return False
        self.y_rot = angle
        for listener in self.y_rotation_listeners:
            listener(angle)
        return True

    def set_xy_translate(self, dx: int, dy: int) -> None:
        """Pan the view by a mouse movement."""
        self.x_tran += int(3 * dx)
        self.y_tran -= int(3 * dy)

    def set_zoom(self, zoom: float) -> None:
        """Set the distance along the viewing axis."""
        self.zoom = int(zoom)

    def press(self, x: int, y: int) -> None:
        """Record where a mouse button went down."""
        self.last_pos = (x, y)

    def drag(self, x: int, y: int, buttons: MouseButton) -> None:
        """Rotate, zoom or pan according to the buttons held while moving."""
        dx = x - self.last_pos[0]
        dy = y - self.last_pos[1]
        if MouseButton.LEFT in buttons:
            self.set_x_rotation(self.x_rot + 4 * dy)
            self.set_y_rotation(self.y_rot - 4 * dx)
        elif MouseButton.RIGHT in buttons:
            self.set_zoom(self.zoom + 5 * dy)
        elif MouseButton.MIDDLE in buttons:
            self.set_xy_translate(dx, dy)
        self.last_pos = (x, y)

    def view_matrix(self) -> np.ndarray:
        """Return the model-view matrix applied before drawing the scene."""
        return (
            translate(0.0, 0.0, BASE_DISTANCE)
            @ translate(0.0, 0.0, self.zoom)
            @ translate(self.x_tran, self.y_tran, 0.0)
            @ rotate(self.x_rot / 16.0, 1.0, 0.0, 0.0)
            @ rotate(self.y_rot / 16.0, 0.0, 1.0, 0.0)
            @ rotate(self.z_rot / 16.0, 0.0, 0.0, 1.0)
            @ rotate(90.0, 1.0, 0.0, 0.0)
        )