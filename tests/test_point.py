import io
import struct

import pytest

from pgewkb.ewkb import (
    WKB_POINT,
    ByteOrder,
    CoordinateType,
    EWKBError,
    build_wkb_type,
)
from pgewkb.point import (
    Point,
    PointM,
    PointMS,
    PointS,
    PointZ,
    PointZM,
    PointZMS,
    PointZS,
    read_point_collection,
)


def test_point_basic_round_trip():
    p = Point(x=1.0, y=2.0)
    p2 = Point()
    p2.scan(p.value())
    assert (p2.x, p2.y) == (1.0, 2.0)


def test_point_s_basic_round_trip():
    p = PointS(srid=4326, x=-122.4194, y=37.7749)
    p2 = PointS()
    p2.scan(p.value())
    assert p2.srid == 4326
    assert (p2.x, p2.y) == (p.x, p.y)


def test_point_zs_basic_round_trip():
    p = PointZS(srid=4326, x=-122.4194, y=37.7749, z=100.0)
    p2 = PointZS()
    p2.scan(p.value())
    assert p2.srid == 4326
    assert (p2.x, p2.y, p2.z) == (p.x, p.y, p.z)


@pytest.mark.parametrize(
    "geometry, expected",
    [
        (Point(), build_wkb_type(WKB_POINT, CoordinateType.XY, False)),
        (PointZ(), build_wkb_type(WKB_POINT, CoordinateType.XYZ, False)),
        (PointM(), build_wkb_type(WKB_POINT, CoordinateType.XYM, False)),
        (PointZM(), build_wkb_type(WKB_POINT, CoordinateType.XYZM, False)),
        (PointS(), build_wkb_type(WKB_POINT, CoordinateType.XY, True)),
        (PointZS(), build_wkb_type(WKB_POINT, CoordinateType.XYZ, True)),
        (PointMS(), build_wkb_type(WKB_POINT, CoordinateType.XYM, True)),
        (PointZMS(), build_wkb_type(WKB_POINT, CoordinateType.XYZM, True)),
    ],
)
def test_point_get_type(geometry, expected):
    assert geometry.wkb_type == expected


@pytest.mark.parametrize(
    "geometry, expected",
    [
        (Point(), 0x00000001),
        (PointZ(), 0x80000001),
        (PointM(), 0x40000001),
        (PointZM(), 0xC0000001),
        (PointS(), 0x20000001),
        (PointZS(), 0xA0000001),
        (PointMS(), 0x60000001),
        (PointZMS(), 0xE0000001),
    ],
)
def test_point_type_codes(geometry, expected):
    assert geometry.wkb_type == expected


@pytest.mark.parametrize(
    "point",
    [
        Point(x=1.5, y=-2.5),
        PointZ(x=1.0, y=2.0, z=3.0),
        PointM(x=1.0, y=2.0, m=4.0),
        PointZM(x=1.0, y=2.0, z=3.0, m=4.0),
        PointS(srid=3857, x=10.0, y=20.0),
        PointZS(srid=4326, x=1.0, y=2.0, z=3.0),
        PointMS(srid=4326, x=1.0, y=2.0, m=5.0),
        PointZMS(srid=4326, x=1.0, y=2.0, z=3.0, m=4.0),
    ],
)
def test_all_point_types_round_trip(point):
    restored = type(point)().scan(point.value())
    assert restored == point


def test_point_value_hex():
    assert Point(x=1.0, y=2.0).value() == (
        "01" "01000000" "000000000000f03f" "0000000000000040"
    )


def test_point_s_value_hex():
    assert PointS(srid=4326, x=1.0, y=2.0).value() == (
        "01" "01000020" "e6100000" "000000000000f03f" "0000000000000040"
    )


def test_scan_big_endian_point():
    p = Point().scan("00" "00000001" "3ff0000000000000" "4000000000000000")
    assert (p.x, p.y) == (1.0, 2.0)


def test_scan_accepts_bytes():
    p = Point().scan(b"0101000000000000000000f03f0000000000000040")
    assert (p.x, p.y) == (1.0, 2.0)


def test_srid_into_plain_point_fails():
    value = PointS(srid=4326, x=1.0, y=2.0).value()
    with pytest.raises(EWKBError):
        Point().scan(value)


def test_truncated_point_fails():
    value = Point(x=1.0, y=2.0).value()[:-4]
    with pytest.raises(EWKBError):
        Point().scan(value)


def test_invalid_hex_fails():
    with pytest.raises(EWKBError):
        Point().scan("zz")


def test_unsupported_input_type_fails():
    with pytest.raises(TypeError):
        Point().scan(42)


def test_unsupported_byte_order_fails():
    with pytest.raises(EWKBError):
        Point().scan("02" "01000000" "000000000000f03f" "0000000000000040")


def test_linestring_data_into_point_fails():
    with pytest.raises(EWKBError):
        Point().scan("01" "02000000" "00000000")


def test_write_appends_coordinates_only():
    buffer = bytearray(b"\xaa")
    PointZS(srid=4326, x=1.0, y=2.0, z=3.0).write(buffer)
    assert bytes(buffer) == b"\xaa" + struct.pack("<3d", 1.0, 2.0, 3.0)


def test_read_point_big_endian():
    p = PointZM()
    p.read_point(io.BytesIO(struct.pack(">4d", 1.0, 2.0, 3.0, 4.0)), ByteOrder.XDR)
    assert p == PointZM(x=1.0, y=2.0, z=3.0, m=4.0)


def test_read_point_collection_xy():
    data = io.BytesIO(struct.pack("<4d", 1.0, 2.0, 3.0, 4.0))
    points = read_point_collection(data, ByteOrder.NDR, 2, CoordinateType.XY)
    assert points == [Point(x=1.0, y=2.0), Point(x=3.0, y=4.0)]


def test_read_point_collection_xym():
    data = io.BytesIO(struct.pack(">3d", 1.0, 2.0, 9.0))
    points = read_point_collection(data, ByteOrder.XDR, 1, CoordinateType.XYM)
    assert points == [PointM(x=1.0, y=2.0, m=9.0)]


def test_read_point_collection_short_data_fails():
    data = io.BytesIO(struct.pack("<2d", 1.0, 2.0))
    with pytest.raises(EWKBError):
        read_point_collection(data, ByteOrder.NDR, 2, CoordinateType.XY)


def test_read_point_collection_bad_coord_type_fails():
    with pytest.raises(EWKBError):
        read_point_collection(io.BytesIO(b""), ByteOrder.NDR, 0, 7)


def test_srid_out_of_range_fails():
    with pytest.raises(EWKBError):
        PointS(srid=2**40, x=1.0, y=2.0).value()