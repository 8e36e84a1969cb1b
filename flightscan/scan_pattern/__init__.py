# flightscan/scan_pattern/__init__.py
"""
Initializes the scan_pattern module, defining its public API.

Collaborators call validate_scan_config first and generate_scan_waypoints
only when the report is valid. polygon_area and normalize_angle are exposed
for UI use on their own.
"""
# Pipeline entry points from core.py and validation.py
from .core import ScanPatternGenerator, generate_scan_waypoints
from .validation import validate_scan_config

# Public data models from data_models.py
from .data_models import (
    Point, PlanarPoint, Polygon, ScanConfig, ScanLimits, ScanResult,
    ScanStatistics, ScanValidation, ScanWaypoint, WaypointType
)
from .exceptions import (
    ScanPatternError, InvalidScanConfigError, InvalidAngleError, ProjectionError, DegenerateGeometryError
)

# Pure helpers
from .utils.clipping import normalize_angle
from .utils.polygon import polygon_area, polygon_centroid, geo_bounding_box
from .utils.coordinates import to_planar, to_geo, haversine_distance_m, destination_point

__all__ = [
    'ScanPatternGenerator',
    'generate_scan_waypoints',
    'validate_scan_config',
    'Point',
    'PlanarPoint',
    'Polygon',
    'ScanConfig',
    'ScanLimits',
    'ScanResult',
    'ScanStatistics',
    'ScanValidation',
    'ScanWaypoint',
    'WaypointType',
    'ScanPatternError',
    'InvalidScanConfigError',
    'InvalidAngleError',
    'ProjectionError',
    'DegenerateGeometryError',
    'normalize_angle',
    'polygon_area',
    'polygon_centroid',
    'geo_bounding_box',
    'to_planar',
    'to_geo',
    'haversine_distance_m',
    'destination_point',
]
