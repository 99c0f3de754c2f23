"""Six-axis articulated arm model: STL meshes, link poses, view control and serial joint frames."""

__version__ = "0.1.0"

__all__ = ["app", "control", "protocol", "robot", "scene", "serial_link", "stl"]