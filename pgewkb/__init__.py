"""Read and write PostGIS EWKB points and line strings as hex-encoded values."""

__version__ = "0.1.0"
__all__ = ["ewkb", "point", "linestring"]