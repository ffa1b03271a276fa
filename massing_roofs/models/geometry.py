"""
Core geometry types for Massing Roofs Generator.

Provides Point2D, Point3D, BBox, and Footprint classes used throughout
the roof engine for representing building outlines and roof vertices.

Coordinate convention: footprints lie in the horizontal XY plane,
Z is up (elevation).
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union
import math


# Footprints with |area| at or below this are treated as collinear
MIN_FOOTPRINT_AREA = 1e-9


class FootprintError(ValueError):
    """Raised when a footprint violates the engine's preconditions."""
    pass


@dataclass(frozen=True, slots=True)
class Point2D:
    """2D point in the footprint plane."""
    x: float
    y: float

    def distance_to(self, other: 'Point2D') -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def lerp(self, other: 'Point2D', t: float) -> 'Point2D':
        """Point at parameter t on the segment self -> other."""
        return Point2D(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t
        )

    def at_z(self, z: float) -> 'Point3D':
        """Lift to 3D at elevation z."""
        return Point3D(self.x, self.y, z)


@dataclass(frozen=True, slots=True)
class Point3D:
    """3D point, Z up."""
    x: float
    y: float
    z: float

    def to_2d(self) -> Point2D:
        """Project to XY plane."""
        return Point2D(self.x, self.y)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def distance_to(self, other: 'Point3D') -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)


@dataclass(frozen=True, slots=True)
class BBox:
    """Axis-aligned bounding box in 2D."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        """Span in X direction."""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Span in Y direction."""
        return self.max_y - self.min_y

    @staticmethod
    def from_points(points: Sequence[Point2D]) -> 'BBox':
        """Create bbox from a list of points."""
        if not points:
            raise ValueError("Cannot create BBox from empty point list")

        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return BBox(min(xs), min(ys), max(xs), max(ys))


# Anything to_point2d accepts
PointLike = Union[Point2D, Point3D, Sequence[float]]


def to_point2d(value: PointLike) -> Point2D:
    """
    Coerce a point-like value to Point2D.

    Accepts Point2D, Point3D (Z dropped) and (x, y) / (x, y, z) sequences.
    """
    if isinstance(value, Point2D):
        return value
    if isinstance(value, Point3D):
        return value.to_2d()
    try:
        coords = [float(c) for c in value]
    except (TypeError, ValueError) as e:
        raise FootprintError(f"Invalid footprint point {value!r}: {e}") from e
    if len(coords) not in (2, 3):
        raise FootprintError(
            f"Footprint point must have 2 or 3 coordinates, got {len(coords)}"
        )
    if not all(math.isfinite(c) for c in coords[:2]):
        raise FootprintError(f"Footprint point {value!r} is not finite")
    return Point2D(coords[0], coords[1])


@dataclass(frozen=True)
class Footprint:
    """
    Validated building footprint (simple polygon, no holes).

    The ring is stored open (no repeated closing vertex) and in the
    winding order the caller supplied. Instances are immutable; the roof
    builders work on a counter-clockwise copy (see
    ``processing.footprint.footprint_ring``).

    Attributes:
        ring: Footprint vertices as Point2D

    Raises:
        FootprintError: fewer than 3 vertices, or zero area (collinear)
    """
    ring: Tuple[Point2D, ...]

    def __post_init__(self):
        if len(self.ring) < 3:
            raise FootprintError(
                f"Footprint needs at least 3 vertices, got {len(self.ring)}"
            )
        if abs(polygon_signed_area(self.ring)) <= MIN_FOOTPRINT_AREA:
            raise FootprintError(
                "Footprint is degenerate (all vertices collinear or zero area)"
            )

    @classmethod
    def from_points(cls, points: Iterable[PointLike]) -> 'Footprint':
        """
        Build a footprint from point-like values.

        A closing vertex equal to the first one is dropped.
        """
        if isinstance(points, Footprint):
            return points

        ring = [to_point2d(p) for p in points]
        if len(ring) > 1 and ring[0] == ring[-1]:
            ring = ring[:-1]
        return cls(tuple(ring))


def polygon_signed_area(ring: Sequence[Point2D]) -> float:
    """
    Compute signed area using shoelace formula.

    Args:
        ring: List of polygon vertices

    Returns:
        Signed area (positive = CCW, negative = CW)
    """
    n = len(ring)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += ring[i].x * ring[j].y
        area -= ring[j].x * ring[i].y

    return area / 2.0
