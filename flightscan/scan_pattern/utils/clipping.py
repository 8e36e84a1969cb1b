# flightscan/scan_pattern/utils/clipping.py
"""
Scan-line clipping in the rotated frame, where every scan line is horizontal.

The clipper is a free function over the indexed edge list so it can be fed
synthetic polygons without any projection or rotation.
"""
import math
from typing import List, Sequence

import numpy as np

from ..constants import ScanConstants
from ..data_models import Edge, ScanSegment
from ..exceptions import InvalidAngleError
from .polygon import bounding_box, build_edges


def normalize_angle(angle: float) -> float:
    """Folds any finite angle in degrees into [0, 360). Raises InvalidAngleError for inf or nan."""
    if not math.isfinite(angle):
        raise InvalidAngleError(angle)
    normalized = math.fmod(angle, 360.0)
    if normalized < 0:
        normalized += 360.0
    # fmod of a tiny negative value can round up to exactly 360
    return 0.0 if normalized >= 360.0 else normalized + 0.0


def line_offsets(min_y: float, max_y: float, spacing: float) -> List[float]:
    """
    Y values of the scan lines covering [min_y, max_y]. floor(height / spacing)
    lines are centred in the extent, which keeps each boundary at least half a
    step away from the nearest line.
    """
    height = max_y - min_y
    if spacing <= 0 or height <= 0:
        return []
    count = int(math.floor(height / spacing + ScanConstants.GEOMETRY_EPSILON))
    if count == 0:
        return []
    first = min_y + (height - (count - 1) * spacing) / 2.0
    return [first + k * spacing for k in range(count)]


def scan_line_crossings(edges: Sequence[Edge], line_y: float) -> List[float]:
    """
    Sorted X values where the horizontal line y = line_y crosses the ring.

    Each edge is treated as half-open in Y (lower end included, upper end
    excluded), so horizontal edges never cross and a vertex lying on the line
    is counted either zero or two times, which keeps even-odd pairing valid.
    """
    xs = []
    for edge in edges:
        y1, y2 = edge.start.y, edge.end.y
        if (y1 <= line_y < y2) or (y2 <= line_y < y1):
            t = (line_y - y1) / (y2 - y1)
            xs.append(edge.start.x + t * (edge.end.x - edge.start.x))
    xs.sort()
    return xs


def pair_crossings(xs: Sequence[float]) -> List[tuple]:
    """Even-odd pairing of sorted crossings into (enter, exit) spans."""
    spans = []
    for i in range(0, len(xs) - 1, 2):
        enter, exit_ = xs[i], xs[i + 1]
        if exit_ - enter > ScanConstants.MIN_SPAN_LENGTH_M:
            spans.append((enter, exit_))
    return spans


def clip_scan_lines(xy_rotated: np.ndarray, spacing: float) -> List[ScanSegment]:
    """
    Intersects evenly spaced horizontal lines with the rotated polygon.
    Returns the covered spans ordered by Y, then by X within a line.
    """
    edges = build_edges(xy_rotated)
    _, min_y, _, max_y = bounding_box(xy_rotated)

    segments: List[ScanSegment] = []
    for line_index, y in enumerate(line_offsets(min_y, max_y, spacing)):
        xs = scan_line_crossings(edges, y)
        if len(xs) < 2:
            continue
        for enter, exit_ in pair_crossings(xs):
            segments.append(ScanSegment(line_index=line_index, y=y, x_enter=enter, x_exit=exit_))
    return segments
