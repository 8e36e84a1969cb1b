# flightscan/scan_pattern/utils/stitching.py
"""
Boustrophedon stitching of clipped scan segments into one ordered route.
Works entirely in the rotated planar frame.
"""
import math
from itertools import groupby
from typing import List, Optional, Sequence, Tuple

from ..data_models import ScanSegment

XY = Tuple[float, float]


def _distance(a: XY, b: XY) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def orient_segment(segment: ScanSegment, position: XY) -> Tuple[XY, XY]:
    """Returns (entry, exit) with the entry at whichever end is nearer `position`."""
    left = (segment.x_enter, segment.y)
    right = (segment.x_exit, segment.y)
    if _distance(position, right) < _distance(position, left):
        return right, left
    return left, right


def order_line_spans(spans: Sequence[ScanSegment], position: XY) -> List[ScanSegment]:
    """
    Spans of one scan line in flying order: left to right, or right to left
    when `position` is nearer the line's right end.
    """
    ordered = sorted(spans, key=lambda s: s.x_enter)
    left = (ordered[0].x_enter, ordered[0].y)
    right = (ordered[-1].x_exit, ordered[-1].y)
    if _distance(position, right) < _distance(position, left):
        ordered.reverse()
    return ordered


def stitch_segments(segments: Sequence[ScanSegment], start: XY, end: Optional[XY] = None) -> List[XY]:
    """
    Builds [start, entry0, exit0, entry1, exit1, ..., end-or-last-exit].

    Lines are taken in increasing Y and each line is flown in a single
    direction, chosen by whichever end of the line is nearer the current
    position. On evenly spaced lines this alternates direction line by line,
    including lines split into several spans by a concave boundary.
    With no segments the route is a direct transit [start, end-or-start].
    """
    ordered = sorted(segments, key=lambda s: (s.y, s.line_index, s.x_enter))
    route: List[XY] = [start]
    position = start

    for _, spans in groupby(ordered, key=lambda s: s.line_index):
        for segment in order_line_spans(list(spans), position):
            entry, exit_ = orient_segment(segment, position)
            route.extend([entry, exit_])
            position = exit_

    if end is not None:
        route.append(end)
    elif not ordered:
        route.append(start)
    return route
