# flightscan/scan_pattern/exceptions.py
"""
Scan Pattern Exceptions
Error types raised by scan configuration building and waypoint generation
"""
from typing import List, Optional


class ScanPatternError(Exception):
    """Base class for all scan pattern errors"""
    pass


class InvalidScanConfigError(ScanPatternError):
    """Scan configuration failed validation and cannot be generated"""
    def __init__(self, errors: List[str], message: str = "Invalid scan configuration"):
        self.errors = list(errors)
        super().__init__(f"{message}: {', '.join(self.errors)}" if self.errors else message)


class ProjectionError(ScanPatternError):
    """The local planar projection is undefined for the requested origin"""
    def __init__(self, lat: float, message: str = "Cannot project around origin"):
        self.lat = lat
        super().__init__(f"{message} at latitude {lat}")


class DegenerateGeometryError(ScanPatternError):
    """Geometry has no usable extent for a scan"""
    def __init__(self, message: str = "Degenerate geometry", detail: Optional[str] = None):
        self.detail = detail
        super().__init__(f"{message} [{detail}]" if detail else message)


class InvalidAngleError(ScanPatternError):
    """Heading is not a finite number of degrees"""
    def __init__(self, angle: float, message: str = "Angle must be a finite number of degrees"):
        self.angle = angle
        super().__init__(f"{message}, got {angle}")
