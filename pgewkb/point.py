"""Point geometries in two, three and four dimensions, with and without SRID."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

from pgewkb.ewkb import (
    WKB_POINT,
    ByteOrder,
    CoordinateType,
    EWKBError,
    Geometry,
    SRIDGeometry,
)

__all__ = [
    "Point",
    "PointZ",
    "PointM",
    "PointZM",
    "PointS",
    "PointZS",
    "PointMS",
    "PointZMS",
    "read_point_collection",
]


def _unpack_coords(reader: BinaryIO, byte_order: ByteOrder, count: int) -> tuple:
    fmt = f"{byte_order.prefix}{count}d"
    size = struct.calcsize(fmt)
    data = reader.read(size)
    if len(data) != size:
        raise EWKBError("unexpected end of EWKB data")
    return struct.unpack(fmt, data)


def _pack_point(point: _PointGeometry, buffer: bytearray) -> None:
    values = [getattr(point, name) for name in point._coords]
    buffer += struct.pack(f"<{len(values)}d", *values)


def _read_point(point: _PointGeometry, reader: BinaryIO, byte_order: ByteOrder) -> None:
    values = _unpack_coords(reader, byte_order, len(point._coords))
    for name, coord in zip(point._coords, values):
        setattr(point, name, coord)


class _PointGeometry(Geometry):
    """Shared EWKB handling for every point flavour."""

    base_type: ClassVar[int] = WKB_POINT
    _coords: ClassVar[tuple[str, ...]] = ("x", "y")

    def write(self, buffer: bytearray) -> None:
        """Append the coordinates, little endian, to buffer."""
        _pack_point(self, buffer)

    def read_point(self, reader: BinaryIO, byte_order: ByteOrder) -> None:
        """Read the coordinates of this point from reader."""
        _read_point(self, reader, byte_order)


@dataclass
class Point(_PointGeometry):
    """A two-dimensional point."""

    x: float = 0.0
    y: float = 0.0

    coord_type = CoordinateType.XY
    _coords = ("x", "y")

    def write(self, buffer: bytearray) -> None:
        """Append x and y, little endian, to buffer."""
        _pack_point(self, buffer)

    def read_point(self, reader: BinaryIO, byte_order: ByteOrder) -> None:
        """Read x and y from reader."""
        _read_point(self, reader, byte_order)


@dataclass
class PointZ(_PointGeometry):
    """A point with an elevation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    coord_type = CoordinateType.XYZ
    _coords = ("x", "y", "z")


@dataclass
class PointM(_PointGeometry):
    """A point with a measure."""

    x: float = 0.0
    y: float = 0.0
    m: float = 0.0

    coord_type = CoordinateType.XYM
    _coords = ("x", "y", "m")


@dataclass
class PointZM(_PointGeometry):
    """A point with an elevation and a measure."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    m: float = 0.0

    coord_type = CoordinateType.XYZM
    _coords = ("x", "y", "z", "m")


@dataclass
class PointS(_PointGeometry, SRIDGeometry):
    """A two-dimensional point with an SRID."""

    srid: int = 0
    x: float = 0.0
    y: float = 0.0

    coord_type = CoordinateType.XY
    _coords = ("x", "y")


@dataclass
class PointZS(_PointGeometry, SRIDGeometry):
    """A point with an elevation and an SRID."""

    srid: int = 0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    coord_type = CoordinateType.XYZ
    _coords = ("x", "y", "z")


@dataclass
class PointMS(_PointGeometry, SRIDGeometry):
    """A point with a measure and an SRID."""

    srid: int = 0
    x: float = 0.0
    y: float = 0.0
    m: float = 0.0

    coord_type = CoordinateType.XYM
    _coords = ("x", "y", "m")


@dataclass
class PointZMS(_PointGeometry, SRIDGeometry):
    """A point with an elevation, a measure and an SRID."""

    srid: int = 0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    m: float = 0.0

    coord_type = CoordinateType.XYZM
    _coords = ("x", "y", "z", "m")


_POINT_TYPES: dict[CoordinateType, type[_PointGeometry]] = {
    CoordinateType.XY: Point,
    CoordinateType.XYZ: PointZ,
    CoordinateType.XYM: PointM,
    CoordinateType.XYZM: PointZM,
}


def read_point_collection(
    reader: BinaryIO, byte_order: ByteOrder, count: int, coord_type: CoordinateType
) -> list[_PointGeometry]:
    """Read count points of the given coordinate type from reader."""
    try:
        point_type = _POINT_TYPES[CoordinateType(coord_type)]
    except (ValueError, KeyError):
        raise EWKBError(f"unsupported coordinate type: {coord_type}") from None
    points = []
    for _ in range(count):
        point = point_type()
        point.read_point(reader, byte_order)
        points.append(point)
    return points