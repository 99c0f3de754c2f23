# armview

Describe a six-axis articulated robot arm and follow its joint angles over a
serial line.

## What is in the package

- `armview.stl` reads STL meshes. `parse_ascii_stl(text)` and
  `parse_binary_stl(data)` return lists of `Triangle` objects.
  `load_stl(path, ratio)` reads a file and picks the ASCII reader when the
  file starts with `solid`; otherwise it uses the binary reader. It returns
  an `StlModel`. `StlModel.scaled()` returns the triangles with every
  normal and vertex multiplied by the model's ratio. `Triangle.vertex(index)`
  accepts 0, 1 or 2 and raises `IndexError` for any other index. Malformed or
  truncated data raises `ValueError`.
- `armview.scene` holds the basic data types and transforms:
  - data types: the per-joint parameters (`RobotConfig`: `d`, `a`, `alpha`,
    `joints`, seven slots each), the display switches (`GlobalConfig`) and
    the mouse-driven camera (`ViewState`). `ViewState` offers `press`,
    `drag` with `MouseButton` flags, `set_x_rotation`, `set_y_rotation`,
    `set_zoom`, `set_xy_translate` and `view_matrix`. A left-button drag
    rotates, a right-button drag zooms and a middle-button drag pans.
  - 4×4 matrix helpers built with numpy: `translate`, `rotate` (angle in
    degrees about an axis) and `perspective(width, height)`.
  - geometry and angles: `grid_lines` and `axis_lines` return line segments,
    and `normalize_angle` works in sixteenths of a degree.
- `armview.robot` models the arm itself:
  - `Ddr6Robot` holds a configuration, display switches and meshes.
    `link_poses()` returns the 4×4 transform of each of the seven links,
    base first. When the desk switch is on, the whole arm is raised onto the
    desk. `desk_pose()` gives the desk's transform, and `link_colors()`
    alternates green and grey.
  - `default_config()` and `default_global_config()` give the standard
    parameters; by default only the grid is switched on.
  - `load_models(directory)` loads the seven link meshes (`base_link.STL`,
    `link_1.STL` … `link_6.STL`) and `desk.stl` from a directory.
- `armview.control.RobotController` edits a robot's configuration and calls
  its listeners after each change:
  - `set_joint` sets a joint in whole degrees.
  - `set_control_joints` takes six measured angles.
  - `set_d`, `set_a` and `set_alpha` set the other per-joint parameters.
  - `update_display` switches the grid, world axes and desk.
  - `set_hidden` hides or shows the view.

  Joint 2 is mirrored in `set_joint` and `set_control_joints`.
  `apply_spin_box(name, value)` routes a value by a control name such as
  `doubleSpinBox_JVars3` or `doubleSpinBox_alpha2`;
  `parse_spin_box_name` does the lookup and returns a `Parameter`.
- `armview.protocol` handles the controller's frames:
  - A frame is an `0xAA` header, six `(id, high, low)` encoder triples in
    hundredths of a degree, an `0xFF` trailer, and a checksum. The checksum
    is the low eight bits of the sum of the bytes between the header and the
    trailer.
  - `decode_frame` returns angles keyed by joint id 1 to 6, and
    `encode_frame` builds a frame from six angles.
  - `checksum` computes the checksum byte.
  - Bad frames raise `FrameError`.
- `armview.serial_link` handles the serial port:
  - `SerialSettings` holds the port name, baud rate (115200, 57600, 38400,
    19200 or 9600), parity (`NONE`, `ODD`, `EVEN`, `MARK`, `SPACE`) and stop
    bits (`1`, `1.5`, `2`).
  - `SerialLink` opens and closes the port, and can be used as a context
    manager. It sends and receives raw bytes, and `read_joints()` decodes
    one frame.
  - `list_ports()` lists the serial ports present.

## Installation

```
pip install armview
```

## Command line

List the serial ports:

```
armview --list-ports
```

Print the joint angles arriving on a port until interrupted:

```
armview --port /dev/ttyUSB0 --baudrate 115200 --parity NONE --stopbits 1
```

`--count N` stops after N reads. Each decoded frame is printed as a line such
as `J1=10.00 J2=20.50 …`. Frames that fail to decode are reported on standard
error and skipped. `armview --help` lists all options.

## Library use

```python
from armview.stl import load_stl

model = load_stl("link_1.STL", 1000)
for triangle in model.scaled():
    print(triangle.vertex(0))
```

```python
from armview.protocol import FrameError, decode_frame, encode_frame

frame = encode_frame([10.0, 20.5, 0.0, 90.0, 180.0, 359.99])
try:
    angles = decode_frame(frame)
except FrameError as error:
    print("rejected frame:", error)
```

```python
from armview.control import RobotController
from armview.robot import Ddr6Robot

robot = Ddr6Robot()
controller = RobotController(robot)
controller.set_joint(1, 45)
for pose in robot.link_poses():
    print(pose)
```

## What it does not do

armview has no graphical window and draws nothing on screen.
- It computes the link transforms, camera matrices, grid and axis segments,
  and the scaled mesh triangles. Rendering them is left to the caller.
- The command only prints joint angles. It does not show a 3D view of the
  arm.

## Running the tests

```
pip install armview[test]
pytest
```