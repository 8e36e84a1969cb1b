# flightscan/scan_pattern/core.py
"""
Orchestrates scan pattern generation as a strict pipeline:
project -> rotate -> clip -> stitch -> rotate back -> unproject -> statistics.
Each stage returns new values; nothing is accumulated across stages or calls.
"""
import logging
import math
from typing import List, Optional, Tuple

import numpy as np

from .data_models import (
    Point, ScanConfig, ScanLimits, ScanResult, ScanValidation, ScanWaypoint, WaypointType
)
from .exceptions import InvalidScanConfigError
from .utils.calculations import build_statistics, calculate_path_distance
from .utils.clipping import clip_scan_lines, normalize_angle
from .utils.coordinates import project_points, rotate_points, to_planar, unproject_points, unrotate_points
from .utils.polygon import area, ensure_counter_clockwise, polygon_centroid
from .utils.stitching import stitch_segments
from .validation import validate_scan_config

logger = logging.getLogger(__name__)


def _structural_errors(config: ScanConfig) -> List[str]:
    """Cheap guards run by generation. Full geometric validation is the caller's job."""
    errors = []
    if len(config.polygon.vertices) < 3:
        errors.append("polygon must have at least 3 vertices")
    if not config.spacing > 0:
        errors.append("spacing must be positive")
    if not config.speed > 0:
        errors.append("speed must be positive")
    if not math.isfinite(config.angle):
        errors.append("angle must be a finite number")
    return errors


def _build_waypoints(points: List[Point], altitude: float, speed: float) -> List[ScanWaypoint]:
    last = len(points) - 1
    waypoints = []
    for i, point in enumerate(points):
        if i == 0:
            waypoint_type = WaypointType.TAKEOFF
        elif i == last:
            waypoint_type = WaypointType.LANDING
        else:
            waypoint_type = WaypointType.CRUISE
        waypoints.append(ScanWaypoint(lat=point.lat, lng=point.lng, altitude=altitude,
                                      speed=speed, waypoint_type=waypoint_type))
    return waypoints


def generate_scan_waypoints(config: ScanConfig) -> ScanResult:
    """
    Generates the boustrophedon route covering config.polygon.

    Callers are expected to run validate_scan_config first; only the
    structural guards are re-checked here and raise InvalidScanConfigError.
    """
    errors = _structural_errors(config)
    if errors:
        raise InvalidScanConfigError(errors)

    angle = normalize_angle(config.angle)
    origin = polygon_centroid(config.polygon)

    polygon_xy = ensure_counter_clockwise(project_points(origin, config.polygon.vertices))
    rotated_polygon = rotate_points(polygon_xy, angle)
    segments = clip_scan_lines(rotated_polygon, config.spacing)
    logger.debug(f"Clipped {len(segments)} scan segment(s) at {angle:.1f}° with {config.spacing} m spacing.")

    start = to_planar(origin, config.start_point)
    start_rotated = tuple(rotate_points(np.array([start.x, start.y]), angle)[0])
    end_rotated = None
    if config.end_point is not None:
        end = to_planar(origin, config.end_point)
        end_rotated = tuple(rotate_points(np.array([end.x, end.y]), angle)[0])

    route_rotated = stitch_segments(segments, start_rotated, end_rotated)
    route_xy = unrotate_points(np.array(route_rotated), angle)
    points = unproject_points(origin, route_xy)
    # Endpoints are the caller's own coordinates, not their round-tripped copies.
    points[0] = config.start_point
    if config.end_point is not None:
        points[-1] = config.end_point
    elif not segments:
        points[-1] = config.start_point

    waypoints = _build_waypoints(points, config.altitude, config.speed)
    statistics = build_statistics(
        waypoint_count=len(waypoints),
        scan_line_count=len(segments),
        total_distance=calculate_path_distance(project_points(origin, points)),
        speed=config.speed,
        coverage_area=area(polygon_xy),
    )

    if statistics.scan_line_count == 0:
        logger.warning("No scan line fits inside the polygon; the route is a direct transit with no coverage.")
    logger.info(f"Scan pattern generated: {statistics.scan_line_count} line(s), "
                f"{statistics.waypoint_count} waypoint(s), {statistics.total_distance:.0f} m, "
                f"{statistics.estimated_flight_time:.0f} s.")
    return ScanResult(waypoints=waypoints, statistics=statistics)


class ScanPatternGenerator:
    """Binds a set of validation limits to the validate and generate operations."""

    def __init__(self, limits: Optional[ScanLimits] = None):
        self.limits = limits or ScanLimits()

    def validate(self, config: ScanConfig) -> ScanValidation:
        return validate_scan_config(config, self.limits)

    def generate(self, config: ScanConfig) -> ScanResult:
        return generate_scan_waypoints(config)

    def plan(self, config: ScanConfig) -> Tuple[ScanResult, ScanValidation]:
        """Validates, then generates. Raises InvalidScanConfigError when validation fails."""
        validation = self.validate(config)
        if not validation.is_valid:
            raise InvalidScanConfigError(validation.errors)
        for warning in validation.warnings:
            logger.warning(f"Scan configuration warning: {warning}")
        return self.generate(config), validation
