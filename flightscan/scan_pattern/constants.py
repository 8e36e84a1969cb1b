# flightscan/scan_pattern/constants.py

class ScanConstants:
    # Equirectangular projection: meters per degree of latitude.
    METERS_PER_DEGREE: float = 111320.0
    EARTH_RADIUS_M: float = 6371000.0

    # Planar comparisons, in meters.
    GEOMETRY_EPSILON: float = 1e-9
    MIN_SPAN_LENGTH_M: float = 1e-6

    DEFAULT_SPEED_MPS: float = 5.0

    # Validation limits
    MIN_VERTICES = 3
    MAX_VERTICES = 100
    MIN_POLYGON_AREA_M2: float = 100.0
    MAX_POLYGON_AREA_M2: float = 10000000.0   # 10 km²
    MAX_SPACING_M: float = 1000.0
    MIN_ALTITUDE_M: float = 0.0
    MAX_ALTITUDE_M: float = 200.0

    # Advisory thresholds. UX heuristics, override through ScanLimits.
    DENSE_LINE_THRESHOLD = 500
    MAX_FLIGHT_TIME_SEC: float = 1800.0       # typical multirotor endurance
