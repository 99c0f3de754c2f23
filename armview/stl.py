"""Reading triangle meshes from ASCII and binary STL files."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

Vec3 = tuple[float, float, float]

_ZERO: Vec3 = (0.0, 0.0, 0.0)
_HEADER_SIZE = 80
_COUNT = struct.Struct("<i")
_FACET = struct.Struct("<12fH")
_ASCII_MAGIC = b"solid"


def _vec(x: float, y: float, z: float) -> Vec3:
    return (float(x), float(y), float(z))


@dataclass(frozen=True)
class Triangle:
    """One facet of a mesh: a normal vector and three vertices."""

    normal: Vec3 = _ZERO
    vertices: tuple[Vec3, Vec3, Vec3] = (_ZERO, _ZERO, _ZERO)

    def __post_init__(self) -> None:
        if len(self.vertices) != 3:
            raise ValueError(f"a triangle needs 3 vertices, got {len(self.vertices)}")
        object.__setattr__(self, "normal", _vec(*self.normal))
        object.__setattr__(self, "vertices", tuple(_vec(*v) for v in self.vertices))

    def vertex(self, index: int) -> Vec3:
        """Return vertex 0, 1 or 2."""
        if not 0 <= index <= 2:
            raise IndexError(f"invalid vertex index {index}; expected 0, 1 or 2")
        return self.vertices[index]


@dataclass
class StlModel:
    """A mesh together with the scale factor it is drawn at."""

    triangles: list[Triangle] = field(default_factory=list)
    ratio: float = 1.0

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self.triangles)

    def __len__(self) -> int:
        return len(self.triangles)

    def scaled(self) -> list[Triangle]:
        """Return the triangles with normals and vertices multiplied by the ratio."""
        r = self.ratio
        return [
            Triangle(
                normal=tuple(r * c for c in tri.normal),
                vertices=tuple(tuple(r * c for c in v) for v in tri.vertices),
            )
            for tri in self.triangles
        ]


def _floats(words: list[str], line: str) -> Vec3:
    if len(words) != 3:
        raise ValueError(f"expected three coordinates in line {line!r}")
    try:
        return _vec(*(float(w) for w in words))
    except ValueError as exc:
        raise ValueError(f"bad coordinate in line {line!r}") from exc


def parse_ascii_stl(text: str) -> list[Triangle]:
    """Parse the text of an ASCII STL file into triangles."""
    triangles: list[Triangle] = []
    normal: Vec3 = _ZERO
    points: list[Vec3] = []
    for raw in text.splitlines():
        words = raw.split()
        if not words:
            continue
        keyword = words[0]
        if keyword == "facet":
            points = []
            normal = _floats(words[2:5], raw.strip())
        elif keyword == "vertex":
            points.append(_floats(words[1:4], raw.strip()))
        elif keyword == "endloop" and len(points) == 3:
            triangles.append(Triangle(normal=normal, vertices=tuple(points)))
    return triangles


def parse_binary_stl(data: bytes) -> list[Triangle]:
    """Parse the bytes of a binary STL file into triangles."""
    if len(data) < _HEADER_SIZE + _COUNT.size:
        raise ValueError("binary STL data is shorter than its header")
    (count,) = _COUNT.unpack_from(data, _HEADER_SIZE)
    count = max(count, 0)
    start = _HEADER_SIZE + _COUNT.size
    end = start + count * _FACET.size
    if len(data) < end:
        raise ValueError(
            f"binary STL declares {count} triangles but holds only "
            f"{(len(data) - start) // _FACET.size}"
        )
    triangles = []
    for values in _FACET.iter_unpack(data[start:end]):
        nx, ny, nz, *coords, _attributes = values
        triangles.append(
            Triangle(
                normal=(nx, ny, nz),
                vertices=(tuple(coords[0:3]), tuple(coords[3:6]), tuple(coords[6:9])),
            )
        )
    return triangles


def load_stl(path: str | PathLike[str], ratio: float = 1.0) -> StlModel:
    """Load an STL file, choosing the ASCII reader when it starts with 'solid'."""
    data = Path(path).read_bytes()
    if data[: len(_ASCII_MAGIC)] == _ASCII_MAGIC:
        triangles = parse_ascii_stl(data.decode("utf-8", errors="replace"))
    else:
        triangles = parse_binary_stl(data)
    return StlModel(triangles=triangles, ratio=float(ratio))