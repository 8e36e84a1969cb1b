# Geometry helpers for the scan pattern pipeline, one module per stage.

from .clipping import clip_scan_lines, normalize_angle, scan_line_crossings
from .coordinates import destination_point, haversine_distance_m, to_geo, to_planar
from .polygon import bounding_box, is_simple, polygon_area, polygon_centroid
from .stitching import stitch_segments

__all__ = [
    "clip_scan_lines",
    "normalize_angle",
    "scan_line_crossings",
    "destination_point",
    "haversine_distance_m",
    "to_geo",
    "to_planar",
    "bounding_box",
    "is_simple",
    "polygon_area",
    "polygon_centroid",
    "stitch_segments",
]
