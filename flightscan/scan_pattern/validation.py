# flightscan/scan_pattern/validation.py
"""
Structural and parameter checks for a ScanConfig.

Every check runs and appends to the report rather than stopping at the first
problem, so callers see the full set of errors. Warnings never affect
validity.
"""
import logging
import math
from typing import List, Optional

from .data_models import Point, ScanConfig, ScanLimits, ScanValidation
from .exceptions import ProjectionError
from .utils.calculations import estimate_flight_time, estimate_pattern_length, estimate_scan_line_count
from .utils.clipping import normalize_angle
from .utils.coordinates import project_points, rotate_points, to_planar
from .utils.polygon import area, bounding_box, is_simple, polygon_centroid

logger = logging.getLogger(__name__)


def _is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def _point_is_finite(point: Point) -> bool:
    return _is_finite(point.lat) and _is_finite(point.lng)


def _check_vertices(config: ScanConfig, limits: ScanLimits, errors: List[str]) -> bool:
    """Vertex count and coordinate checks. Returns True when geometry checks can proceed."""
    vertices = config.polygon.vertices
    count = len(vertices)
    if count < limits.min_vertices:
        errors.append(f"polygon must have at least {limits.min_vertices} vertices")
    if count > limits.max_vertices:
        errors.append(f"polygon must have at most {limits.max_vertices} vertices")

    coordinates_ok = True
    for i, v in enumerate(vertices, start=1):
        if not _point_is_finite(v):
            errors.append(f"vertex {i} has invalid coordinates")
            coordinates_ok = False
            continue
        if not -90.0 <= v.lat <= 90.0:
            errors.append(f"vertex {i} latitude must be between -90 and 90")
            coordinates_ok = False
        if not -180.0 <= v.lng <= 180.0:
            errors.append(f"vertex {i} longitude must be between -180 and 180")
            coordinates_ok = False
    return count >= max(3, limits.min_vertices) and coordinates_ok


def validate_scan_config(config: ScanConfig, limits: Optional[ScanLimits] = None) -> ScanValidation:
    limits = limits or ScanLimits()
    errors: List[str] = []
    warnings: List[str] = []

    geometry_ok = _check_vertices(config, limits, errors)

    xy = None
    polygon_area_m2 = 0.0
    origin = None
    if geometry_ok:
        origin = polygon_centroid(config.polygon)
        try:
            xy = project_points(origin, config.polygon.vertices)
        except ProjectionError:
            errors.append("polygon cannot be projected at the poles")

    if xy is not None:
        if not is_simple(xy):
            errors.append("polygon is self-intersecting")
        polygon_area_m2 = area(xy)
        if polygon_area_m2 < limits.min_polygon_area:
            errors.append(f"polygon area ({polygon_area_m2:.1f} m²) is too small, "
                          f"minimum is {limits.min_polygon_area:.0f} m²")
        if polygon_area_m2 > limits.max_polygon_area:
            warnings.append(f"polygon area ({polygon_area_m2 / 1e6:.2f} km²) is very large, "
                            f"this may generate many waypoints")

    spacing_ok = _is_finite(config.spacing) and config.spacing > 0
    if not spacing_ok:
        errors.append("spacing must be positive")
    elif config.spacing > limits.max_spacing:
        errors.append(f"spacing must be at most {limits.max_spacing:.0f} meters")

    if not _is_finite(config.altitude) or not limits.min_altitude <= config.altitude <= limits.max_altitude:
        errors.append(f"altitude must be between {limits.min_altitude:.0f} and {limits.max_altitude:.0f} meters")

    speed_ok = _is_finite(config.speed) and config.speed > 0
    if not speed_ok:
        errors.append("speed must be positive")

    angle_ok = _is_finite(config.angle)
    if not angle_ok:
        errors.append("angle must be a finite number")

    start_ok = config.start_point is not None and _point_is_finite(config.start_point)
    if not start_ok:
        errors.append("start point has invalid coordinates")
    end_ok = config.end_point is None or _point_is_finite(config.end_point)
    if not end_ok:
        errors.append("end point has invalid coordinates")

    if xy is not None and spacing_ok and angle_ok:
        _, min_y, _, max_y = bounding_box(rotate_points(xy, normalize_angle(config.angle)))
        line_count = estimate_scan_line_count(max_y - min_y, config.spacing)
        if line_count > limits.dense_line_threshold:
            warnings.append("very dense scan pattern, consider increasing spacing")

        if speed_ok and start_ok and end_ok:
            transit = _transit_distance(origin, config.start_point, config.end_point)
            length = estimate_pattern_length(polygon_area_m2, config.spacing, line_count, transit)
            if estimate_flight_time(length, config.speed) > limits.max_flight_time:
                warnings.append("flight time exceeds typical limits")

    validation = ScanValidation(errors=errors, warnings=warnings)
    if not validation.is_valid:
        logger.warning(f"Scan configuration rejected with {len(errors)} error(s): {'; '.join(errors)}")
    elif warnings:
        logger.info(f"Scan configuration accepted with {len(warnings)} warning(s).")
    return validation


def _transit_distance(origin: Point, start: Point, end: Optional[Point]) -> float:
    """Planar distance from takeoff to the area centre and from there to landing."""
    start_xy = to_planar(origin, start)
    transit = math.hypot(start_xy.x, start_xy.y)
    if end is not None:
        end_xy = to_planar(origin, end)
        transit += math.hypot(end_xy.x, end_xy.y)
    return transit
