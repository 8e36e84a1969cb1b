# flightscan/scan_pattern/utils/coordinates.py
"""
Local planar projection and rotation between degrees and the meter frame
of a single generation call.

The projection is equirectangular around a fixed origin: accurate to well
under 1% for areas a few kilometers across away from the poles. It is not a
geodesic projection.
"""
import math
from typing import List, Sequence, Tuple

import numpy as np

from ..constants import ScanConstants
from ..data_models import PlanarPoint, Point
from ..exceptions import ProjectionError


def _scales(origin: Point) -> Tuple[float, float]:
    """Returns (meters per degree of longitude, meters per degree of latitude) at the origin."""
    lng_scale = ScanConstants.METERS_PER_DEGREE * math.cos(math.radians(origin.lat))
    if abs(lng_scale) < ScanConstants.GEOMETRY_EPSILON:
        raise ProjectionError(origin.lat)
    return lng_scale, ScanConstants.METERS_PER_DEGREE


def to_planar(origin: Point, p: Point) -> PlanarPoint:
    lng_scale, lat_scale = _scales(origin)
    return PlanarPoint(x=(p.lng - origin.lng) * lng_scale, y=(p.lat - origin.lat) * lat_scale)


def to_geo(origin: Point, p: PlanarPoint) -> Point:
    lng_scale, lat_scale = _scales(origin)
    return Point(lat=origin.lat + p.y / lat_scale, lng=origin.lng + p.x / lng_scale)


def project_points(origin: Point, points: Sequence[Point]) -> np.ndarray:
    """Vectorized to_planar. Returns an (n, 2) array of x, y meters."""
    lng_scale, lat_scale = _scales(origin)
    if not points:
        return np.empty((0, 2))
    coords = np.array([(p.lng, p.lat) for p in points], dtype=float)
    return (coords - np.array([origin.lng, origin.lat])) * np.array([lng_scale, lat_scale])


def unproject_points(origin: Point, xy: np.ndarray) -> List[Point]:
    """Vectorized to_geo."""
    lng_scale, lat_scale = _scales(origin)
    xy = np.asarray(xy, dtype=float).reshape(-1, 2)
    lngs = origin.lng + xy[:, 0] / lng_scale
    lats = origin.lat + xy[:, 1] / lat_scale
    return [Point(lat=float(lat), lng=float(lng)) for lat, lng in zip(lats, lngs)]


def _rotation_matrix(angle_deg: float) -> np.ndarray:
    theta = math.radians(angle_deg)
    c, s = math.cos(theta), math.sin(theta)
    return np.array([[c, -s], [s, c]])


def rotate_points(xy: np.ndarray, angle_deg: float) -> np.ndarray:
    """
    Rotates by -angle in the compass sense (clockwise positive), which is a
    counter-clockwise turn of `angle` in the x-east / y-north frame. A sweep
    advancing along compass heading `angle` ends up advancing along +Y, so its
    scan lines become horizontal.
    """
    xy = np.asarray(xy, dtype=float).reshape(-1, 2)
    return xy @ _rotation_matrix(angle_deg).T


def unrotate_points(xy: np.ndarray, angle_deg: float) -> np.ndarray:
    """Inverse of rotate_points."""
    xy = np.asarray(xy, dtype=float).reshape(-1, 2)
    return xy @ _rotation_matrix(angle_deg)


def haversine_distance_m(p1: Point, p2: Point) -> float:
    lat1_rad, lat2_rad = math.radians(p1.lat), math.radians(p2.lat)
    dlat = lat2_rad - lat1_rad; dlng = math.radians(p2.lng - p1.lng)
    a = math.sin(dlat / 2)**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlng / 2)**2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return ScanConstants.EARTH_RADIUS_M * c


def destination_point(start: Point, bearing_deg: float, distance_m: float) -> Point:
    lat_rad = math.radians(start.lat); lng_rad = math.radians(start.lng); bearing_rad = math.radians(bearing_deg)
    angular_distance = distance_m / ScanConstants.EARTH_RADIUS_M
    dest_lat_rad = math.asin(math.sin(lat_rad) * math.cos(angular_distance) +
                             math.cos(lat_rad) * math.sin(angular_distance) * math.cos(bearing_rad))
    dest_lng_rad = lng_rad + math.atan2(math.sin(bearing_rad) * math.sin(angular_distance) * math.cos(lat_rad),
                                        math.cos(angular_distance) - math.sin(lat_rad) * math.sin(dest_lat_rad))
    return Point(lat=math.degrees(dest_lat_rad), lng=math.degrees(dest_lng_rad))
