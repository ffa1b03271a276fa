"""
Polygon utilities for Massing Roofs Generator.

Provides area and winding helpers and the area-weighted centroid. The
shoelace sum itself lives beside Footprint in models.geometry.
"""

from typing import List, Sequence

from ..models.geometry import Point2D, polygon_signed_area


def polygon_area(ring: Sequence[Point2D]) -> float:
    """
    Compute unsigned area of polygon.

    Args:
        ring: List of polygon vertices

    Returns:
        Absolute area
    """
    return abs(polygon_signed_area(ring))


def polygon_area_centroid(ring: Sequence[Point2D]) -> Point2D:
    """
    Area-weighted centroid of a simple polygon.

    Roof builders use the vertex mean instead (see processing.footprint);
    this is the true centre of mass, for comparison and reporting.

    Args:
        ring: List of polygon vertices (either winding)

    Returns:
        Centroid point, or the vertex mean for zero-area rings
    """
    n = len(ring)
    if n == 0:
        return Point2D(0.0, 0.0)

    area = polygon_signed_area(ring)
    if abs(area) < 1e-12:
        return Point2D(
            sum(p.x for p in ring) / n,
            sum(p.y for p in ring) / n
        )

    cx = 0.0
    cy = 0.0
    for i in range(n):
        p = ring[i]
        q = ring[(i + 1) % n]
        cross = p.x * q.y - q.x * p.y
        cx += (p.x + q.x) * cross
        cy += (p.y + q.y) * cross

    factor = 1.0 / (6.0 * area)
    return Point2D(cx * factor, cy * factor)


def is_clockwise(ring: Sequence[Point2D]) -> bool:
    """
    Check if polygon ring is clockwise.

    Args:
        ring: List of polygon vertices

    Returns:
        True if clockwise (negative area)
    """
    return polygon_signed_area(ring) < 0


def ensure_ccw(ring: Sequence[Point2D]) -> List[Point2D]:
    """
    Counter-clockwise copy of a ring.

    Always returns a new list, so callers may modify it freely.

    Args:
        ring: List of polygon vertices

    Returns:
        Ring in CCW order
    """
    if is_clockwise(ring):
        return list(reversed(ring))
    return list(ring)
