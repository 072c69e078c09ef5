"""Extended well-known binary (EWKB) encoding and decoding for PostGIS geometries."""

from __future__ import annotations

import abc
import binascii
import enum
import io
import struct
from dataclasses import dataclass
from typing import BinaryIO, Callable, ClassVar, Union

WKB_POINT = 1
WKB_LINESTRING = 2
WKB_POLYGON = 3
WKB_MULTIPOINT = 4
WKB_MULTILINESTRING = 5
WKB_MULTIPOLYGON = 6

WKB_Z_FLAG = 0x80000000
WKB_M_FLAG = 0x40000000
WKB_SRID_FLAG = 0x20000000

_BASE_TYPE_MASK = 0x1FFFFFFF

ReaderLike = Union[BinaryIO, bytes, bytearray, memoryview]


class ByteOrder(enum.IntEnum):
    """Byte order marker that starts every (E)WKB value."""

    XDR = 0  # big endian
    NDR = 1  # little endian

    @property
    def prefix(self) -> str:
        """The struct format prefix for this byte order."""
        return ">" if self is ByteOrder.XDR else "<"


class CoordinateType(enum.IntEnum):
    """Dimensions carried by each coordinate."""

    XY = 0
    XYZ = 1
    XYM = 2
    XYZM = 3


@dataclass(frozen=True)
class GeometryInfo:
    """Metadata decoded from a WKB type code."""

    base_type: int
    coord_type: CoordinateType
    has_srid: bool


class EWKBError(ValueError):
    """Raised when EWKB data cannot be encoded or decoded."""


def _read(reader: BinaryIO, byte_order: ByteOrder, fmt: str) -> tuple:
    fmt = byte_order.prefix + fmt
    size = struct.calcsize(fmt)
    data = reader.read(size)
    if len(data) != size:
        raise EWKBError("unexpected end of EWKB data")
    return struct.unpack(fmt, data)


def get_geometry_info(wkb_type: int) -> GeometryInfo:
    """Split a WKB type code into base type, coordinate type and SRID flag."""
    has_z = bool(wkb_type & WKB_Z_FLAG)
    has_m = bool(wkb_type & WKB_M_FLAG)
    if has_z and has_m:
        coord_type = CoordinateType.XYZM
    elif has_z:
        coord_type = CoordinateType.XYZ
    elif has_m:
        coord_type = CoordinateType.XYM
    else:
        coord_type = CoordinateType.XY
    return GeometryInfo(
        base_type=wkb_type & _BASE_TYPE_MASK,
        coord_type=coord_type,
        has_srid=bool(wkb_type & WKB_SRID_FLAG),
    )


def build_wkb_type(base_type: int, coord_type: CoordinateType, has_srid: bool) -> int:
    """Build a WKB type code from its parts."""
    wkb_type = base_type
    if coord_type == CoordinateType.XYZ:
        wkb_type |= WKB_Z_FLAG
    elif coord_type == CoordinateType.XYM:
        wkb_type |= WKB_M_FLAG
    elif coord_type == CoordinateType.XYZM:
        wkb_type |= WKB_Z_FLAG | WKB_M_FLAG
    if has_srid:
        wkb_type |= WKB_SRID_FLAG
    return wkb_type


def decode_ewkb(value: Union[str, bytes, bytearray, memoryview]) -> io.BytesIO:
    """Turn a hex-encoded EWKB value, as PostgreSQL returns it, into a byte stream."""
    if isinstance(value, memoryview):
        value = value.tobytes()
    if not isinstance(value, (str, bytes, bytearray)):
        raise TypeError(f"unsupported type: {type(value).__name__}")
    try:
        data = binascii.unhexlify(value)
    except (binascii.Error, ValueError) as exc:
        raise EWKBError(f"invalid hex encoding: {exc}") from exc
    return io.BytesIO(data)


def encode_ewkb(data: Union[bytes, bytearray]) -> str:
    """Hex-encode EWKB bytes."""
    return bytes(data).hex()


class SRIDGeometry:
    """Marker for geometries that carry a spatial reference identifier."""

    srid: int


class Geometry(abc.ABC):
    """Base class of every geometry that can be stored as EWKB."""

    base_type: ClassVar[int]
    coord_type: ClassVar[CoordinateType] = CoordinateType.XY

    @property
    def wkb_type(self) -> int:
        """The WKB type code of this geometry, flags included."""
        return build_wkb_type(
            self.base_type, self.coord_type, isinstance(self, SRIDGeometry)
        )

    @abc.abstractmethod
    def write(self, buffer: bytearray) -> None:
        """Append the geometry body (without header or SRID) to buffer."""

    def read_data(self, reader: BinaryIO, byte_order: ByteOrder, info: GeometryInfo) -> None:
        """Fill this geometry from the body that follows the EWKB header."""
        read_geometry_data(reader, byte_order, self, info)

    def scan(self, value: Union[str, bytes, bytearray, memoryview]) -> "Geometry":
        """Load this geometry from a hex-encoded EWKB value."""
        read_ewkb(decode_ewkb(value), self)
        return self

    def value(self) -> str:
        """The hex-encoded EWKB value of this geometry."""
        return encode_ewkb(write_ewkb(self))


def write_ewkb(geometry: Geometry) -> bytes:
    """Encode a geometry as little-endian EWKB."""
    buffer = bytearray(struct.pack("<BI", ByteOrder.NDR, geometry.wkb_type))
    if isinstance(geometry, SRIDGeometry):
        try:
            buffer += struct.pack("<i", geometry.srid)
        except struct.error as exc:
            raise EWKBError(f"SRID out of range: {geometry.srid!r}") from exc
    try:
        geometry.write(buffer)
    except struct.error as exc:
        raise EWKBError(f"cannot encode geometry: {exc}") from exc
    return bytes(buffer)


def read_ewkb(reader: ReaderLike, geometry: Geometry) -> None:
    """Decode EWKB from reader into geometry."""
    if isinstance(reader, (bytes, bytearray, memoryview)):
        reader = io.BytesIO(bytes(reader))
    (order_byte,) = _read(reader, ByteOrder.NDR, "B")
    try:
        byte_order = ByteOrder(order_byte)
    except ValueError:
        raise EWKBError("unsupported byte order") from None

    (wkb_type,) = _read(reader, byte_order, "I")
    info = get_geometry_info(wkb_type)

    if info.has_srid:
        if not isinstance(geometry, SRIDGeometry):
            raise EWKBError(
                f"geometry type {type(geometry).__name__} does not support SRID "
                "but EWKB contains SRID"
            )
        (geometry.srid,) = _read(reader, byte_order, "i")

    try:
        geometry.read_data(reader, byte_order, info)
    except struct.error as exc:
        raise EWKBError(f"malformed geometry data: {exc}") from exc


def read_geometry_data(
    reader: BinaryIO, byte_order: ByteOrder, geometry: Geometry, info: GeometryInfo
) -> None:
    """Read the body of a geometry according to its base type."""
    if info.base_type == WKB_POINT:
        read_point = getattr(geometry, "read_point", None)
        if read_point is None:
            raise EWKBError(
                f"geometry type {type(geometry).__name__} cannot read point data"
            )
        read_point(reader, byte_order)
    elif info.base_type == WKB_LINESTRING:
        read_elements = getattr(geometry, "read_elements", None)
        if read_elements is None:
            raise EWKBError(
                f"geometry type {type(geometry).__name__} is not a collection geometry"
            )
        (count,) = _read(reader, byte_order, "I")
        read_elements(reader, byte_order, count)
    else:
        raise EWKBError(f"unsupported geometry type: {info.base_type}")


def write_geometry_collection(
    buffer: bytearray, count: int, write_elements: Callable[[bytearray], None]
) -> None:
    """Append an element count followed by the elements themselves."""
    try:
        buffer += struct.pack("<I", count)
    except struct.error as exc:
        raise EWKBError(f"element count out of range: {count!r}") from exc
    write_elements(buffer)