# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version

from exactgeom.coplanar import CoplanarTriangles
from exactgeom.envelope import Envelope
from exactgeom.errors import (DegenerateGeometryError, GeometryError,
                              InconsistentGeometryError)
from exactgeom.geometry import (GeometryResult, distance, distance_squared,
                                intersection, intersects)
from exactgeom.line import Line
from exactgeom.plane import Plane, are_coplanar
from exactgeom.point import Point, are_collinear, unique_points
from exactgeom.precision import GUARD_DIGITS, RationalSqrt, RoundingMode
from exactgeom.ray import Ray
from exactgeom.rectangle import Rectangle, is_rectangle
from exactgeom.segment import LineSegment
from exactgeom.tetrahedron import Tetrahedron
from exactgeom.triangle import Triangle
from exactgeom.vector import Vector

try:
    __version__ = version("exactgeom")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    'CoplanarTriangles', 'DegenerateGeometryError', 'Envelope',
    'GUARD_DIGITS', 'GeometryError', 'GeometryResult',
    'InconsistentGeometryError', 'Line', 'LineSegment', 'Plane', 'Point',
    'RationalSqrt', 'Ray', 'Rectangle', 'RoundingMode', 'Tetrahedron', 'Triangle',
    'Vector', 'are_collinear', 'are_coplanar', 'distance',
    'distance_squared', 'intersection', 'intersects', 'is_rectangle',
    'unique_points',
]
