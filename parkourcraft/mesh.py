"""Loading of triangle meshes from Wavefront OBJ files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

_MAX_FACE_CORNERS = 10
_TRIANGLE_LAYOUT = ((0, 1, 2),)
_QUAD_LAYOUT = ((0, 1, 2), (0, 2, 3))
_FACE_SEPARATORS = re.compile(r"[ \n]+")
_FACE_CORNER = re.compile(r"\s*([+-]?\d+)(?:/([+-]?\d+)(?:/([+-]?\d+))?)?")


@dataclass
class Mesh:
    """Unindexed triangles: three corners per triangle, in order."""

    vertices: list[Vec3] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    texcoords: list[Vec2] = field(default_factory=list)

    @property
    def num_triangles(self) -> int:
        return len(self.vertices) // 3


def _floats(text: str, count: int, line: str) -> tuple[float, ...]:
    parts = text.split()[:count]
    if len(parts) < count:
        raise ValueError(f"expected {count} numbers in line: {line.rstrip()!r}")
    try:
        return tuple(float(part) for part in parts)
    except ValueError as exc:
        raise ValueError(f"malformed numbers in line: {line.rstrip()!r}") from exc


def _parse_corner(token: str) -> tuple[int, Optional[int], Optional[int]]:
    match = _FACE_CORNER.match(token)
    if match is None:
        raise ValueError(f"malformed face corner: {token!r}")
    vertex, texcoord, normal = match.groups()
    return (
        int(vertex),
        None if texcoord is None else int(texcoord),
        None if normal is None else int(normal),
    )


def _lookup(values: Sequence, index: int):
    position = index - 1
    if not 0 <= position < len(values):
        raise ValueError(f"face index {index} out of range")
    return values[position]


def parse_mesh(lines: Iterable[str]) -> Mesh:
    """Build a mesh from OBJ text lines; quads are split, larger faces skipped."""
    positions: list[Vec3] = []
    normals: list[Vec3] = []
    texcoords: list[Vec2] = []
    mesh = Mesh()

    for line in lines:
        if line.startswith("v "):
            positions.append(_floats(line[2:], 3, line))
        elif line.startswith("vt"):
            texcoords.append(_floats(line[3:], 2, line))
        elif line.startswith("vn"):
            normals.append(_floats(line[3:], 3, line))
        elif line.startswith("f"):
            tokens = [t for t in _FACE_SEPARATORS.split(line[2:]) if t]
            corners = [_parse_corner(t) for t in tokens[:_MAX_FACE_CORNERS]]
            if len(corners) == 3:
                layout = _TRIANGLE_LAYOUT
            elif len(corners) == 4:
                layout = _QUAD_LAYOUT
            else:
                continue
            for triangle in layout:
                for corner in triangle:
                    vertex, texcoord, normal = corners[corner]
                    mesh.vertices.append(_lookup(positions, vertex))
                    if texcoords and texcoord is not None:
                        mesh.texcoords.append(_lookup(texcoords, texcoord))
                    if normals and normal is not None:
                        mesh.normals.append(_lookup(normals, normal))
    return mesh


def load_mesh(path: str | os.PathLike) -> Mesh:
    """Read and parse an OBJ file."""
    with open(path, encoding="utf-8") as handle:
        return parse_mesh(handle)


@dataclass
class ImportedObject:
    """A mesh loaded from disk that spins continuously when drawn."""

    mesh: Mesh
    _rotation: int = field(default=0, init=False, repr=False)

    def next_rotation(self) -> int:
        """Return the current spin angle in degrees and advance it by one."""
        if self._rotation >= 360:
            self._rotation = 0
        angle = self._rotation
        self._rotation += 1
        return angle


def import_object(path: str | os.PathLike) -> ImportedObject:
    """Load an OBJ file as an object ready to be drawn."""
    return ImportedObject(load_mesh(path))