"""
Ear clipping for flat roofs.

Triangulates a simple footprint (convex or concave, either winding) into
n - 2 triangles whose indices refer to the footprint as given and which
all wind counter-clockwise seen from above.
"""

from typing import List, Optional, Sequence, Tuple

from ..models.geometry import Point2D
from .polygon_utils import polygon_signed_area

Triangle = Tuple[int, int, int]


class TriangulationError(Exception):
    """Raised when no ear can be clipped from the remaining polygon."""
    pass


def triangulate_ring(ring: Sequence[Point2D]) -> List[Triangle]:
    """
    Triangulate a simple polygon of either winding.

    Args:
        ring: Footprint vertices

    Returns:
        Index triples into ``ring``, each wound CCW

    Raises:
        TriangulationError: If the ring has fewer than 3 vertices or
            clipping gets stuck (self-intersecting input)
    """
    n = len(ring)
    if n < 3:
        raise TriangulationError("Polygon must have at least 3 vertices")

    # Walk a CW ring backwards so every clipped corner turns left
    if polygon_signed_area(ring) >= 0:
        remaining = list(range(n))
    else:
        remaining = list(range(n - 1, -1, -1))

    triangles = []
    while len(remaining) > 3:
        pos = _find_ear(ring, remaining)
        if pos is None:
            pos = _find_convex_corner(ring, remaining)
        if pos is None:
            raise TriangulationError(
                f"No ear found with {len(remaining)} vertices remaining"
            )

        triangles.append(_corner(remaining, pos))
        del remaining[pos]

    triangles.append((remaining[0], remaining[1], remaining[2]))
    return triangles


def _corner(remaining: List[int], pos: int) -> Triangle:
    m = len(remaining)
    return (remaining[pos - 1], remaining[pos], remaining[(pos + 1) % m])


def _find_ear(ring: Sequence[Point2D], remaining: List[int]) -> Optional[int]:
    """Position of the first convex corner whose triangle holds no other vertex."""
    for pos in range(len(remaining)):
        a, b, c = _corner(remaining, pos)
        if not _turns_left(ring[a], ring[b], ring[c]):
            continue
        blocked = any(
            _point_in_triangle(ring[k], ring[a], ring[b], ring[c])
            for k in remaining if k not in (a, b, c)
        )
        if not blocked:
            return pos
    return None


def _find_convex_corner(ring: Sequence[Point2D], remaining: List[int]) -> Optional[int]:
    for pos in range(len(remaining)):
        a, b, c = _corner(remaining, pos)
        if _turns_left(ring[a], ring[b], ring[c]):
            return pos
    return None


def _turns_left(a: Point2D, b: Point2D, c: Point2D) -> bool:
    return (b.x - a.x) * (c.y - b.y) - (b.y - a.y) * (c.x - b.x) > 0


def _point_in_triangle(p: Point2D, a: Point2D, b: Point2D, c: Point2D) -> bool:
    """Inside or on the boundary."""
    def side(u: Point2D, v: Point2D) -> float:
        return (v.x - u.x) * (p.y - u.y) - (v.y - u.y) * (p.x - u.x)

    d1, d2, d3 = side(a, b), side(b, c), side(c, a)
    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0
    return not (has_neg and has_pos)
