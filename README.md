# pgewkb

Reads and writes PostGIS geometries in Extended Well-Known Binary (EWKB).
PostgreSQL hands these out as a hex-encoded string.

Supported geometries:

- Points (`pgewkb.point`): `Point`, `PointZ`, `PointM` and `PointZM`, plus
  the SRID-bearing `PointS`, `PointZS`, `PointMS` and `PointZMS`.
- Line strings (`pgewkb.linestring`): `LineString`, `LineStringZ`,
  `LineStringM` and `LineStringZM`, plus `LineStringS`, `LineStringZS`,
  `LineStringMS` and `LineStringZMS`.

All of them are dataclasses. Coordinates are `x`, `y`, `z` and `m`. The
SRID variants also have an `srid` field. A line string keeps its points in
`points`.

## Installation

```
pip install pgewkb
```

## Usage

Every geometry has two methods for moving data to and from the database:

- `value()` returns the hex EWKB string to send to the database.
- `scan(value)` fills the geometry from a hex string, or from hex `bytes`,
  `bytearray` or `memoryview`, and returns the geometry.

```python
from pgewkb.point import Point, PointS
from pgewkb.linestring import LineStringS

p = PointS(srid=4326, x=-122.4194, y=37.7749)
hex_value = p.value()

q = PointS().scan(hex_value)
assert q.srid == 4326 and (q.x, q.y) == (p.x, p.y)

route = LineStringS(srid=4326, points=[Point(-122.4194, 37.7749), Point(2.3522, 48.8566)])
copy = LineStringS().scan(route.value())
assert copy.points == route.points
```

Output is always little-endian. Input may be in either byte order. Each
geometry's `wkb_type` property gives its WKB type code, including the Z, M
and SRID flags.

### Lower-level helpers

The codec itself is in `pgewkb.ewkb`:

- `get_geometry_info(wkb_type)` splits a type code into a `GeometryInfo`.
  That holds `base_type`, `coord_type` (a `CoordinateType`: `XY`, `XYZ`,
  `XYM` or `XYZM`) and `has_srid`.
- `build_wkb_type(base_type, coord_type, has_srid)` builds a type code from
  those parts.
- `decode_ewkb(value)` turns a hex value into an `io.BytesIO`.
  `encode_ewkb(data)` turns raw bytes into a hex string.
- `write_ewkb(geometry)` returns the raw EWKB bytes.
- `read_ewkb(reader, geometry)` decodes raw EWKB into a geometry. The
  reader may be a binary stream or a bytes-like object.
- `read_point_collection(reader, byte_order, count, coord_type)` in
  `pgewkb.point` reads a run of points.

### Errors

Malformed data raises `EWKBError`, a subclass of `ValueError`. This covers:

- invalid hex
- an unknown byte-order marker
- an unsupported geometry type
- an SRID in data read into a geometry that cannot hold one
- data that ends too soon

`decode_ewkb` raises `TypeError` when it is given something other than a
string or bytes.

## What it does not do

- It handles only points and line strings. Type codes for polygons and for
  multi-geometries are defined, but data of those types raises `EWKBError`.
- It does not connect to a database. You pass the strings from `value()` to
  your driver yourself, and you hand query results to `scan()`.

## Tests

```
pip install -e ".[test]"
pytest
```