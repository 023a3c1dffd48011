"""Readers for the editor's resource, sprite and texture table files."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import List, Tuple, Union

from .definitions import CollisionType, ObjectType
from .parameters import CollisionObjectParameter, SpriteObjectParameter

FILE_LINE_END = 3
"""Number of records read after the header line."""

_SPRITE_NAME_LIMIT = 127
_TEXTURE_NAME_LIMIT = 55

PathLike = Union[str, "os.PathLike[str]"]


class DataType(IntEnum):
    """Kinds of data file."""

    MAP_DATA = 0
    SPRITE_DATA = 1


class DataFileError(Exception):
    """A data file could not be read or holds a malformed record."""


def _read_text(path: PathLike) -> str:
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError as exc:
        raise DataFileError(f"cannot read {os.fspath(path)}: {exc}") from exc


def _records(path: PathLike) -> List[Tuple[int, str]]:
    """Return the non-blank lines after the header, up to the record limit."""
    lines = _read_text(path).splitlines()
    records = [
        (number, line)
        for number, line in enumerate(lines[1:], start=2)
        if line.strip()
    ]
    return records[:FILE_LINE_END]


def _fields(path: PathLike, number: int, line: str, count: int) -> List[str]:
    parts = line.split(",")
    if len(parts) < count:
        raise DataFileError(
            f"{os.fspath(path)}:{number}: expected {count} fields, got {len(parts)}"
        )
    return [part.strip() for part in parts[:count]]


def _float(path: PathLike, number: int, text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise DataFileError(f"{os.fspath(path)}:{number}: bad number {text!r}") from None


def _sprite_name(path: PathLike, number: int, text: str) -> str:
    if not text or len(text) > _SPRITE_NAME_LIMIT:
        raise DataFileError(f"{os.fspath(path)}:{number}: bad sprite name {text!r}")
    return text


def read_resource_data(path: PathLike) -> List[CollisionObjectParameter]:
    """Read resource records: type, collision, sprite, x, y, z, rot, sx, sy."""
    result = []
    for number, line in _records(path):
        fields = _fields(path, number, line, 9)
        try:
            object_type = ObjectType(int(fields[0]))
            collision_type = CollisionType(int(fields[1]))
        except ValueError:
            raise DataFileError(
                f"{os.fspath(path)}:{number}: bad object or collision type"
            ) from None
        name = _sprite_name(path, number, fields[2])
        x, y, z, rot, scale_x, scale_y = (
            _float(path, number, text) for text in fields[3:9]
        )
        result.append(
            CollisionObjectParameter(
                object_type, collision_type, name, x, y, z, rot, scale_x, scale_y
            )
        )
    return result


def read_sprite_data(path: PathLike) -> List[SpriteObjectParameter]:
    """Read sprite records: sprite, x, y, z, rot, sx, sy."""
    result = []
    for number, line in _records(path):
        fields = _fields(path, number, line, 7)
        name = _sprite_name(path, number, fields[0])
        x, y, z, rot, scale_x, scale_y = (
            _float(path, number, text) for text in fields[1:7]
        )
        result.append(SpriteObjectParameter(name, x, y, z, rot, scale_x, scale_y))
    return result


def read_texture_data(path: PathLike) -> List[str]:
    """Read the whitespace-separated texture names of a table file."""
    names = _read_text(path).split()
    for name in names:
        if len(name) > _TEXTURE_NAME_LIMIT:
            raise DataFileError(f"{os.fspath(path)}: texture name too long: {name!r}")
    return names