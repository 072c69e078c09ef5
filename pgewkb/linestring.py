"""LineString geometries in two, three and four dimensions, with and without SRID."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, ClassVar

from pgewkb.ewkb import (
    WKB_LINESTRING,
    ByteOrder,
    CoordinateType,
    Geometry,
    SRIDGeometry,
    write_geometry_collection,
)
from pgewkb.point import Point, PointM, PointZ, PointZM, read_point_collection

__all__ = [
    "LineString",
    "LineStringZ",
    "LineStringM",
    "LineStringZM",
    "LineStringS",
    "LineStringZS",
    "LineStringMS",
    "LineStringZMS",
]


def _write_line(line: _LineStringGeometry, buffer: bytearray) -> None:
    write_geometry_collection(buffer, len(line.points), line.write_elements)


def _write_points(line: _LineStringGeometry, buffer: bytearray) -> None:
    for point in line.points:
        point.write(buffer)


def _read_points(
    line: _LineStringGeometry, reader: BinaryIO, byte_order: ByteOrder, count: int
) -> None:
    line.points = read_point_collection(reader, byte_order, count, line.coord_type)


class _LineStringGeometry(Geometry):
    """Shared EWKB handling for every line string flavour."""

    base_type: ClassVar[int] = WKB_LINESTRING
    points: list

    def __len__(self) -> int:
        return len(self.points)

    def write(self, buffer: bytearray) -> None:
        """Append the point count followed by the points to buffer."""
        _write_line(self, buffer)

    def write_elements(self, buffer: bytearray) -> None:
        """Append every point, little endian, to buffer."""
        _write_points(self, buffer)

    def read_elements(self, reader: BinaryIO, byte_order: ByteOrder, count: int) -> None:
        """Replace the points with count points read from reader."""
        _read_points(self, reader, byte_order, count)


@dataclass
class LineString(_LineStringGeometry):
    """A two-dimensional line string."""

    points: list[Point] = field(default_factory=list)

    coord_type = CoordinateType.XY

    def write(self, buffer: bytearray) -> None:
        """Append the point count followed by the points to buffer."""
        _write_line(self, buffer)

    def write_elements(self, buffer: bytearray) -> None:
        """Append every point, little endian, to buffer."""
        _write_points(self, buffer)

    def read_elements(self, reader: BinaryIO, byte_order: ByteOrder, count: int) -> None:
        """Replace the points with count points read from reader."""
        _read_points(self, reader, byte_order, count)


@dataclass
class LineStringZ(_LineStringGeometry):
    """A line string whose points carry an elevation."""

    points: list[PointZ] = field(default_factory=list)

    coord_type = CoordinateType.XYZ


@dataclass
class LineStringM(_LineStringGeometry):
    """A line string whose points carry a measure."""

    points: list[PointM] = field(default_factory=list)

    coord_type = CoordinateType.XYM


@dataclass
class LineStringZM(_LineStringGeometry):
    """A line string whose points carry an elevation and a measure."""

    points: list[PointZM] = field(default_factory=list)

    coord_type = CoordinateType.XYZM


@dataclass
class LineStringS(_LineStringGeometry, SRIDGeometry):
    """A two-dimensional line string with an SRID."""

    srid: int = 0
    points: list[Point] = field(default_factory=list)

    coord_type = CoordinateType.XY


@dataclass
class LineStringZS(_LineStringGeometry, SRIDGeometry):
    """A line string with elevations and an SRID."""

    srid: int = 0
    points: list[PointZ] = field(default_factory=list)

    coord_type = CoordinateType.XYZ


@dataclass
class LineStringMS(_LineStringGeometry, SRIDGeometry):
    """A line string with measures and an SRID."""

    srid: int = 0
    points: list[PointM] = field(default_factory=list)

    coord_type = CoordinateType.XYM


@dataclass
class LineStringZMS(_LineStringGeometry, SRIDGeometry):
    """A line string with elevations, measures and an SRID."""

    srid: int = 0
    points: list[PointZM] = field(default_factory=list)

    coord_type = CoordinateType.XYZM