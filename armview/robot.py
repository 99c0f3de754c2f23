"""Kinematic chain and link models of the six-axis desktop arm."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

import numpy as np

from armview.scene import GlobalConfig, RobotConfig, rotate, translate
from armview.stl import StlModel, load_stl

Rgb = tuple[int, int, int]

LINK_FILES = (
    "base_link.STL",
    "link_1.STL",
    "link_2.STL",
    "link_3.stl",
    "link_4.STL",
    "link_5.STL",
    "link_6.STL",
)
DESK_FILE = "desk.stl"
LINK_RATIO = 1000.0
DESK_RATIO = 1.0
DESK_HEIGHT = 490.0

GREEN: Rgb = (20, 126, 60)
GREY: Rgb = (169, 169, 169)
DESK_COLOR: Rgb = GREY
JOINT_AXIS_COLORS: tuple[Rgb, ...] = (
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (0, 255, 255),
    (255, 0, 255),
)

# Fixed frame changes between consecutive links, applied before each joint's
# own d / theta / a / alpha transform.
_FRAME_ADJUSTMENTS: dict[int, np.ndarray] = {
    1: np.eye(4),
    2: rotate(90.0, 1.0, 0.0, 0.0),
    3: translate(300.0, 0.0, 0.0),
    4: translate(260.0, 0.0, 0.0) @ rotate(-90.0, 0.0, 0.0, 1.0),
    5: translate(0.0, 0.0, 110.0) @ rotate(-90.0, 1.0, 0.0, 0.0),
    6: translate(0.0, 0.0, 110.0) @ rotate(90.0, 1.0, 0.0, 0.0),
}
_JOINT_OFFSETS: dict[int, float] = {2: 90.0}


def default_config() -> RobotConfig:
    """Return the arm's default link offsets and joint angles."""
    return RobotConfig(
        d=[0.0, 127.0, -122.0, -101.0, -1.0, 0.0, 0.0],
        a=[0.0] * 7,
        alpha=[0.0, 0.0, 180.0, 0.0, 0.0, 0.0, 0.0],
        joints=[0.0] * 7,
    )


def default_global_config() -> GlobalConfig:
    """Return the default scene switches: only the grid is drawn."""
    return GlobalConfig(draw_grid=True)


def load_models(directory: str | PathLike[str]) -> tuple[list[StlModel], StlModel]:
    """Load the seven link meshes and the desk mesh from a directory."""
    base = Path(directory)
    links = [load_stl(base / name, LINK_RATIO) for name in LINK_FILES]
    desk = load_stl(base / DESK_FILE, DESK_RATIO)
    return links, desk


@dataclass
class Ddr6Robot:
    """The arm's configuration, scene switches and meshes."""

    config: RobotConfig = field(default_factory=default_config)
    global_config: GlobalConfig = field(default_factory=default_global_config)
    links: list[StlModel] = field(default_factory=list)
    desk: StlModel | None = None

    def desk_pose(self) -> np.ndarray:
        """Return the transform the desk is drawn at."""
        return translate(0.0, 0.0, DESK_HEIGHT)

    def link_poses(self) -> list[np.ndarray]:
        """Return the 4x4 transform of each of the seven links, base first."""
        cfg = self.config
        pose = self.desk_pose() if self.global_config.draw_desk else np.eye(4)
        poses = [pose]
        for joint in range(1, 7):
            pose = (
                pose
                @ _FRAME_ADJUSTMENTS[joint]
                @ translate(0.0, 0.0, cfg.d[joint])
                @ rotate(cfg.joints[joint] + _JOINT_OFFSETS.get(joint, 0.0), 0.0, 0.0, 1.0)
                @ translate(cfg.a[joint], 0.0, 0.0)
                @ rotate(cfg.alpha[joint], 1.0, 0.0, 0.0)
            )
            poses.append(pose)
        return poses

    def link_colors(self) -> list[Rgb]:
        """Return the colour of each link, alternating green and grey."""
        return [GREEN if index % 2 == 0 else GREY for index in range(7)]