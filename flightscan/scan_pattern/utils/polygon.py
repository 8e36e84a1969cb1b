# flightscan/scan_pattern/utils/polygon.py
"""
Planar polygon geometry: shoelace area, winding, bounding boxes and the
simplicity check. Inputs are (n, 2) arrays of meters unless a function takes
a geographic Polygon.
"""
from typing import List, Tuple

import numpy as np

from ..constants import ScanConstants
from ..data_models import Edge, PlanarPoint, Point, Polygon
from ..exceptions import DegenerateGeometryError
from .coordinates import project_points

EPS = ScanConstants.GEOMETRY_EPSILON


def signed_area(xy: np.ndarray) -> float:
    """Shoelace area. Positive for counter-clockwise rings."""
    xy = np.asarray(xy, dtype=float).reshape(-1, 2)
    if len(xy) < 3:
        return 0.0
    x, y = xy[:, 0], xy[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))


def area(xy: np.ndarray) -> float:
    return abs(signed_area(xy))


def ensure_counter_clockwise(xy: np.ndarray) -> np.ndarray:
    xy = np.asarray(xy, dtype=float).reshape(-1, 2)
    return xy[::-1].copy() if signed_area(xy) < 0 else xy


def bounding_box(xy: np.ndarray) -> Tuple[float, float, float, float]:
    """Returns (min_x, min_y, max_x, max_y)."""
    xy = np.asarray(xy, dtype=float).reshape(-1, 2)
    if len(xy) == 0:
        raise DegenerateGeometryError(detail="bounding box of an empty point set")
    min_x, min_y = xy.min(axis=0)
    max_x, max_y = xy.max(axis=0)
    return float(min_x), float(min_y), float(max_x), float(max_y)


def polygon_centroid(polygon: Polygon) -> Point:
    """Vertex average. Used as the projection origin, not the area centroid."""
    n = len(polygon.vertices)
    if n == 0:
        return Point(lat=0.0, lng=0.0)
    return Point(lat=sum(v.lat for v in polygon.vertices) / n,
                 lng=sum(v.lng for v in polygon.vertices) / n)


def polygon_area(polygon: Polygon) -> float:
    """Area of a geographic polygon in square meters."""
    if len(polygon.vertices) < 3:
        return 0.0
    return area(project_points(polygon_centroid(polygon), polygon.vertices))


def geo_bounding_box(polygon: Polygon) -> Tuple[Point, Point]:
    """Returns the (min, max) corners in degrees. Empty polygons give the origin twice."""
    if not polygon.vertices:
        return Point(lat=0.0, lng=0.0), Point(lat=0.0, lng=0.0)
    lats = [v.lat for v in polygon.vertices]
    lngs = [v.lng for v in polygon.vertices]
    return Point(lat=min(lats), lng=min(lngs)), Point(lat=max(lats), lng=max(lngs))


def build_edges(xy: np.ndarray) -> List[Edge]:
    """Indexed edge list of the closed ring; edge i joins vertex i to vertex i+1."""
    xy = np.asarray(xy, dtype=float).reshape(-1, 2)
    n = len(xy)
    return [
        Edge(index=i,
             start=PlanarPoint(x=float(xy[i, 0]), y=float(xy[i, 1])),
             end=PlanarPoint(x=float(xy[(i + 1) % n, 0]), y=float(xy[(i + 1) % n, 1])))
        for i in range(n)
    ]


def _cross(o: PlanarPoint, a: PlanarPoint, b: PlanarPoint) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _on_segment(p: PlanarPoint, a: PlanarPoint, b: PlanarPoint) -> bool:
    return (min(a.x, b.x) - EPS <= p.x <= max(a.x, b.x) + EPS and
            min(a.y, b.y) - EPS <= p.y <= max(a.y, b.y) + EPS)


def segments_intersect(a: Edge, b: Edge) -> bool:
    """True when the closed segments share at least one point."""
    p1, p2, p3, p4 = a.start, a.end, b.start, b.end
    d1 = _cross(p3, p4, p1)
    d2 = _cross(p3, p4, p2)
    d3 = _cross(p1, p2, p3)
    d4 = _cross(p1, p2, p4)

    if ((d1 > EPS and d2 < -EPS) or (d1 < -EPS and d2 > EPS)) and \
       ((d3 > EPS and d4 < -EPS) or (d3 < -EPS and d4 > EPS)):
        return True

    # Collinear and touching cases
    if abs(d1) <= EPS and _on_segment(p1, p3, p4): return True
    if abs(d2) <= EPS and _on_segment(p2, p3, p4): return True
    if abs(d3) <= EPS and _on_segment(p3, p1, p2): return True
    if abs(d4) <= EPS and _on_segment(p4, p1, p2): return True
    return False


def _folds_back(a: Edge, b: Edge) -> bool:
    """Adjacent edges a -> b that are collinear and reverse direction overlap each other."""
    if abs(_cross(a.start, a.end, b.end)) > EPS:
        return False
    dot = (a.end.x - a.start.x) * (b.end.x - b.start.x) + (a.end.y - a.start.y) * (b.end.y - b.start.y)
    return dot < 0


def is_simple(xy: np.ndarray) -> bool:
    """
    O(n^2) check that no two non-adjacent edges intersect and no two adjacent
    edges overlap. Fine for hand-drawn survey polygons of tens of vertices.
    """
    edges = build_edges(xy)
    n = len(edges)
    if n < 3:
        return False

    for i in range(n):
        if _folds_back(edges[i], edges[(i + 1) % n]):
            return False

    for i in range(n):
        for j in range(i + 1, n):
            # Adjacent edges share a vertex by construction
            if j == i + 1 or (i == 0 and j == n - 1):
                continue
            if segments_intersect(edges[i], edges[j]):
                return False
    return True
