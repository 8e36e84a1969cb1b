# flightscan/scan_pattern/utils/calculations.py
import math

import numpy as np

from ..data_models import ScanStatistics


def calculate_path_distance(xy: np.ndarray) -> float:
    """Sum of planar Euclidean leg lengths in meters."""
    xy = np.asarray(xy, dtype=float).reshape(-1, 2)
    if len(xy) < 2:
        return 0.0
    return float(np.sum(np.linalg.norm(np.diff(xy, axis=0), axis=1)))


def estimate_flight_time(distance_m: float, speed_mps: float) -> float:
    """Flight time in seconds at constant cruise speed."""
    if speed_mps <= 0:
        return 0.0
    return distance_m / speed_mps


def estimate_scan_line_count(extent_m: float, spacing_m: float) -> int:
    """Number of lines the clipper will place across an extent."""
    if spacing_m <= 0 or extent_m <= 0:
        return 0
    return int(math.floor(extent_m / spacing_m + 1e-9))


def estimate_pattern_length(area_m2: float, spacing_m: float, line_count: int,
                            transit_m: float = 0.0) -> float:
    """
    Rough route length before any path is built: the swept length of the
    area at the given spacing, one crossover per line change, plus transit
    legs to and from the area.
    """
    if spacing_m <= 0:
        return transit_m
    sweep = area_m2 / spacing_m
    crossovers = max(0, line_count - 1) * spacing_m
    return sweep + crossovers + transit_m


def build_statistics(waypoint_count: int, scan_line_count: int, total_distance: float,
                     speed: float, coverage_area: float) -> ScanStatistics:
    return ScanStatistics(
        waypoint_count=waypoint_count,
        scan_line_count=scan_line_count,
        total_distance=total_distance,
        estimated_flight_time=estimate_flight_time(total_distance, speed),
        coverage_area=coverage_area,
    )


def format_distance(meters: float) -> str:
    if meters < 1000:
        return f"{meters:.0f} m"
    return f"{meters / 1000:.2f} km"


def format_duration(seconds: float) -> str:
    if seconds < 60:
        return f"{seconds:.0f}s"
    minutes = int(seconds // 60)
    secs = int(round(seconds % 60))
    if secs == 60:
        minutes, secs = minutes + 1, 0
    if minutes < 60:
        return f"{minutes}m {secs}s" if secs > 0 else f"{minutes}m"
    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes}m" if minutes > 0 else f"{hours}h"


def format_area(square_meters: float, precision: int = 2) -> str:
    if square_meters < 10000:
        return f"{square_meters:.0f} m²"
    return f"{square_meters / 10000:.{precision}f} ha"
