# flightscan/scan_pattern/data_models.py
"""
Defines the value types shared by every stage of scan pattern generation.
Geographic types carry degrees, planar types carry meters in the local
tangent-plane frame of a single generation call.
"""
from dataclasses import dataclass, field, asdict
from enum import IntEnum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .constants import ScanConstants


@dataclass(frozen=True)
class Point:
    """A geographic point in degrees."""
    lat: float
    lng: float

    def is_close(self, other: "Point", tolerance_deg: float = 1e-9) -> bool:
        return abs(self.lat - other.lat) <= tolerance_deg and abs(self.lng - other.lng) <= tolerance_deg


@dataclass(frozen=True)
class PlanarPoint:
    """A point in meters, x east and y north of the projection origin."""
    x: float
    y: float


@dataclass(frozen=True)
class Polygon:
    """Single outer ring, implicitly closed. No holes."""
    vertices: Tuple[Point, ...]

    @classmethod
    def from_coords(cls, coords: Sequence[Tuple[float, float]]) -> "Polygon":
        """Builds a polygon from (lat, lng) pairs."""
        return cls(vertices=tuple(Point(lat=lat, lng=lng) for lat, lng in coords))

    def __len__(self) -> int:
        return len(self.vertices)


@dataclass(frozen=True)
class Edge:
    """One polygon edge in the planar frame, addressed by its index in the ring."""
    index: int
    start: PlanarPoint
    end: PlanarPoint


@dataclass(frozen=True)
class ScanSegment:
    """A covered span of one scan line, in the rotated frame."""
    line_index: int
    y: float
    x_enter: float
    x_exit: float

    @property
    def length(self) -> float:
        return abs(self.x_exit - self.x_enter)


@dataclass(frozen=True)
class ScanLimits:
    """Validation limits and advisory thresholds for a scan configuration."""
    min_vertices: int = ScanConstants.MIN_VERTICES
    max_vertices: int = ScanConstants.MAX_VERTICES
    min_polygon_area: float = ScanConstants.MIN_POLYGON_AREA_M2
    max_polygon_area: float = ScanConstants.MAX_POLYGON_AREA_M2
    max_spacing: float = ScanConstants.MAX_SPACING_M
    min_altitude: float = ScanConstants.MIN_ALTITUDE_M
    max_altitude: float = ScanConstants.MAX_ALTITUDE_M
    dense_line_threshold: int = ScanConstants.DENSE_LINE_THRESHOLD
    max_flight_time: float = ScanConstants.MAX_FLIGHT_TIME_SEC


@dataclass(frozen=True)
class ScanConfig:
    """Input aggregate for one generation call. Read-only to the engine."""
    polygon: Polygon
    altitude: float
    spacing: float
    angle: float
    start_point: Point
    end_point: Optional[Point] = None
    speed: float = ScanConstants.DEFAULT_SPEED_MPS

    @classmethod
    def build(cls, polygon: Polygon, altitude: float, spacing: float, angle: float,
              start_point: Point, end_point: Optional[Point] = None,
              speed: float = ScanConstants.DEFAULT_SPEED_MPS,
              limits: Optional[ScanLimits] = None) -> "ScanConfig":
        """
        Strict constructor: validates the configuration and raises
        InvalidScanConfigError when any error is reported.
        """
        # Imported here to keep data_models free of a module-level cycle.
        from .exceptions import InvalidScanConfigError
        from .validation import validate_scan_config

        config = cls(polygon=polygon, altitude=altitude, spacing=spacing, angle=angle,
                     start_point=start_point, end_point=end_point, speed=speed)
        validation = validate_scan_config(config, limits)
        if not validation.is_valid:
            raise InvalidScanConfigError(validation.errors)
        return config

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScanConfig":
        """
        Reads the JSON layout used by run_scan.py:
        {"polygon": [[lat, lng], ...], "altitude": 50, "spacing": 20, "angle": 0,
         "start_point": [lat, lng], "end_point": [lat, lng] | null, "speed": 5}
        """
        end = data.get('end_point')
        return cls(
            polygon=Polygon.from_coords(data.get('polygon', [])),
            altitude=float(data['altitude']),
            spacing=float(data['spacing']),
            angle=float(data.get('angle', 0.0)),
            start_point=Point(lat=float(data['start_point'][0]), lng=float(data['start_point'][1])),
            end_point=Point(lat=float(end[0]), lng=float(end[1])) if end else None,
            speed=float(data.get('speed', ScanConstants.DEFAULT_SPEED_MPS)),
        )


class WaypointType(IntEnum):
    TAKEOFF = 1
    CRUISE = 2
    LANDING = 3


@dataclass(frozen=True)
class ScanWaypoint:
    """One element of the flight-ordered output path."""
    lat: float
    lng: float
    altitude: float
    speed: float
    waypoint_type: WaypointType = WaypointType.CRUISE
    pause_duration: float = 0.0
    fly_over_mode: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['waypoint_type'] = self.waypoint_type.name.lower()
        return data


@dataclass(frozen=True)
class ScanStatistics:
    waypoint_count: int
    scan_line_count: int
    total_distance: float          # meters
    estimated_flight_time: float   # seconds
    coverage_area: float           # square meters


@dataclass
class ScanValidation:
    """Errors block generation, warnings accompany a still-valid result."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class ScanResult:
    waypoints: List[ScanWaypoint]
    statistics: ScanStatistics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "waypoints": [wp.to_dict() for wp in self.waypoints],
            "statistics": asdict(self.statistics),
        }
