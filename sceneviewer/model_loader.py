"""Loading of Wavefront OBJ geometry into indexed vertex data."""

from __future__ import annotations

import os
from typing import Iterable, Iterator


class ModelLoadError(Exception):
    """Raised when a model file cannot be read or is malformed."""


def _parse_position(fields: list[str], line_number: int) -> tuple[float, float, float]:
    if len(fields) < 3:
        raise ModelLoadError(f"line {line_number}: vertex needs three coordinates")
    try:
        x, y, z = (float(value) for value in fields[:3])
    except ValueError as exc:
        raise ModelLoadError(f"line {line_number}: invalid vertex coordinate") from exc
    return x, y, z


def _parse_corner(field: str, vertex_count: int, line_number: int) -> int:
    index_text = field.split("/", 1)[0]
    try:
        index = int(index_text)
    except ValueError as exc:
        raise ModelLoadError(f"line {line_number}: invalid face index {field!r}") from exc
    if index == 0:
        raise ModelLoadError(f"line {line_number}: face index must not be zero")
    if index > 0:
        return index - 1
    resolved = vertex_count + index
    if resolved < 0:
        raise ModelLoadError(f"line {line_number}: face index {index} out of range")
    return resolved


def _fan(corners: list[int]) -> Iterator[tuple[int, int, int]]:
    for k in range(1, len(corners) - 1):
        yield corners[0], corners[k], corners[k + 1]


def parse_obj(lines: Iterable[str]) -> tuple[list[float], list[int]]:
    """Parse OBJ text into a flat position list and triangle indices.

    Faces are fan-triangulated. Each referenced position appears once in the
    returned vertices, in order of first use; indices refer to those vertices.
    """
    positions: list[tuple[float, float, float]] = []
    faces: list[tuple[int, list[int]]] = []

    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        keyword, *fields = line.split()
        if keyword == "v":
            positions.append(_parse_position(fields, line_number))
        elif keyword == "f":
            corners = [_parse_corner(f, len(positions), line_number) for f in fields]
            faces.append((line_number, corners))

    vertices: list[float] = []
    indices: list[int] = []
    remap: dict[int, int] = {}

    for line_number, corners in faces:
        for triangle in _fan(corners):
            for position_index in triangle:
                if position_index >= len(positions):
                    raise ModelLoadError(
                        f"line {line_number}: face index {position_index + 1} out of range"
                    )
                if position_index not in remap:
                    remap[position_index] = len(vertices) // 3
                    vertices.extend(positions[position_index])
                indices.append(remap[position_index])

    return vertices, indices


def load_obj(path: str | os.PathLike[str]) -> tuple[list[float], list[int]]:
    """Read an OBJ file and return its vertices and triangle indices."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return parse_obj(handle)
    except OSError as exc:
        raise ModelLoadError(f"cannot open {os.fspath(path)}: {exc}") from exc