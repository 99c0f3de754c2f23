"""Editing the arm's configuration from control widgets and joint readings."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from armview.robot import Ddr6Robot

JOINT_COUNT = 6
_SLOTS = 7
# Checked in this order: "doubleSpinBox_a" is a prefix of "doubleSpinBox_alpha".
_SPIN_BOX_PREFIXES = (
    ("doubleSpinBox_d", "D"),
    ("doubleSpinBox_JVars", "JOINT"),
    ("doubleSpinBox_alpha", "ALPHA"),
    ("doubleSpinBox_a", "A"),
)


class Parameter(enum.Enum):
    """Which per-joint quantity a control edits."""

    D = "d"
    A = "a"
    ALPHA = "alpha"
    JOINT = "joints"


def parse_spin_box_name(name: str) -> tuple[Parameter, int]:
    """Return the parameter and joint index that a spin box name refers to."""
    for prefix, member in _SPIN_BOX_PREFIXES:
        if prefix in name:
            last = name[-1:]
            if not last.isdigit():
                raise ValueError(f"spin box name {name!r} does not end in a joint index")
            return Parameter[member], int(last)
    raise ValueError(f"unknown spin box name {name!r}")


def _check_index(index: int) -> None:
    if not 0 <= index < _SLOTS:
        raise IndexError(f"joint index {index} out of range 0..{_SLOTS - 1}")


@dataclass
class RobotController:
    """Applies control input to a robot and notifies listeners to redraw."""

    robot: Ddr6Robot = field(default_factory=Ddr6Robot)
    hidden: bool = False
    listeners: list[Callable[[], None]] = field(default_factory=list, repr=False)

    def _changed(self) -> None:
        for listener in self.listeners:
            listener()

    def set_control_joints(self, joints: Sequence[float]) -> None:
        """Show six measured joint angles; the second joint is mirrored."""
        if len(joints) != JOINT_COUNT:
            raise ValueError(f"expected {JOINT_COUNT} joint angles, got {len(joints)}")
        target = self.robot.config.joints
        for slot, angle in enumerate(joints, start=1):
            target[slot] = -float(angle) if slot == 2 else float(angle)
        self._changed()

    def set_joint(self, index: int, value: float) -> None:
        """Set one joint angle in whole degrees; joint 2 is mirrored."""
        _check_index(index)
        degrees = int(value)
        self.robot.config.joints[index] = float(-degrees if index == 2 else degrees)
        self._changed()

    def set_d(self, index: int, value: float) -> None:
        """Set one link's offset along z."""
        self._set(Parameter.D, index, value)

    def set_a(self, index: int, value: float) -> None:
        """Set one link's offset along x."""
        self._set(Parameter.A, index, value)

    def set_alpha(self, index: int, value: float) -> None:
        """Set one link's twist about x."""
        self._set(Parameter.ALPHA, index, value)

    def _set(self, parameter: Parameter, index: int, value: float) -> None:
        _check_index(index)
        getattr(self.robot.config, parameter.value)[index] = float(value)
        self._changed()

    def apply_spin_box(self, name: str, value: float) -> Parameter:
        """Route a spin box change by its name; return the parameter edited."""
        parameter, index = parse_spin_box_name(name)
        if parameter is Parameter.JOINT:
            self.set_joint(index, value)
        else:
            self._set(parameter, index, value)
        return parameter

    def update_display(self, grid: bool, world_coord: bool, desk: bool) -> None:
        """Switch the grid, world axes and desk on or off."""
        cfg = self.robot.global_config
        cfg.draw_grid = bool(grid)
        cfg.draw_world_coord = bool(world_coord)
        cfg.draw_desk = bool(desk)
        self._changed()

    def set_hidden(self, hidden: bool) -> None:
        """Hide or show the 3D view."""
        self.hidden = bool(hidden)