#!/usr/bin/env python3
# flightscan/scan_pattern/tests/test_validation.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import math
import unittest
from dataclasses import replace
from flightscan.scan_pattern.data_models import Point, Polygon, ScanConfig, ScanLimits
from flightscan.scan_pattern.validation import validate_scan_config

# 0.001° square at the equator, roughly 111 m on a side
SQUARE = Polygon.from_coords([(0, 0), (0, 0.001), (0.001, 0.001), (0.001, 0)])


def make_config(**overrides) -> ScanConfig:
    config = ScanConfig(polygon=SQUARE, altitude=50.0, spacing=20.0, angle=0.0,
                        start_point=Point(lat=0.0, lng=0.0))
    return replace(config, **overrides)


class TestValidConfigurations(unittest.TestCase):
    def test_square_is_valid_without_warnings(self):
        validation = validate_scan_config(make_config())
        self.assertTrue(validation.is_valid)
        self.assertEqual(validation.errors, [])
        self.assertEqual(validation.warnings, [])

    def test_reversed_winding_is_valid(self):
        reversed_square = Polygon(vertices=SQUARE.vertices[::-1])
        self.assertTrue(validate_scan_config(make_config(polygon=reversed_square)).is_valid)

    def test_any_finite_angle_is_accepted(self):
        for angle in (-725.0, 0.0, 90.0, 359.9, 1e4):
            self.assertTrue(validate_scan_config(make_config(angle=angle)).is_valid, angle)

    def test_altitude_bounds_are_inclusive(self):
        self.assertTrue(validate_scan_config(make_config(altitude=0.0)).is_valid)
        self.assertTrue(validate_scan_config(make_config(altitude=200.0)).is_valid)


class TestPolygonErrors(unittest.TestCase):
    def test_too_few_vertices(self):
        polygon = Polygon.from_coords([(0, 0), (0, 0.001)])
        validation = validate_scan_config(make_config(polygon=polygon))
        self.assertFalse(validation.is_valid)
        self.assertIn("polygon must have at least 3 vertices", validation.errors)

    def test_too_many_vertices(self):
        coords = [(0.001 * math.sin(2 * math.pi * i / 120), 0.001 * math.cos(2 * math.pi * i / 120))
                  for i in range(120)]
        validation = validate_scan_config(make_config(polygon=Polygon.from_coords(coords)))
        self.assertIn("polygon must have at most 100 vertices", validation.errors)

    def test_self_intersecting(self):
        bowtie = Polygon.from_coords([(0, 0), (0.001, 0.001), (0, 0.001), (0.001, 0)])
        validation = validate_scan_config(make_config(polygon=bowtie))
        self.assertFalse(validation.is_valid)
        self.assertIn("polygon is self-intersecting", validation.errors)

    def test_area_too_small(self):
        tiny = Polygon.from_coords([(0, 0), (0, 0.00005), (0.00005, 0.00005), (0.00005, 0)])
        validation = validate_scan_config(make_config(polygon=tiny))
        self.assertFalse(validation.is_valid)
        self.assertTrue(any("too small" in e for e in validation.errors), validation.errors)

    def test_vertex_out_of_range(self):
        polygon = Polygon.from_coords([(0, 0), (95, 0.001), (0.001, 0.001)])
        validation = validate_scan_config(make_config(polygon=polygon))
        self.assertIn("vertex 2 latitude must be between -90 and 90", validation.errors)

    def test_non_finite_vertex(self):
        polygon = Polygon.from_coords([(0, 0), (float('nan'), 0.001), (0.001, 0.001)])
        validation = validate_scan_config(make_config(polygon=polygon))
        self.assertIn("vertex 2 has invalid coordinates", validation.errors)


class TestParameterErrors(unittest.TestCase):
    def test_spacing(self):
        self.assertIn("spacing must be positive", validate_scan_config(make_config(spacing=0.0)).errors)
        self.assertIn("spacing must be positive", validate_scan_config(make_config(spacing=-5.0)).errors)
        self.assertIn("spacing must be at most 1000 meters",
                      validate_scan_config(make_config(spacing=1500.0)).errors)

    def test_altitude(self):
        for altitude in (-1.0, 250.0, float('inf')):
            validation = validate_scan_config(make_config(altitude=altitude))
            self.assertIn("altitude must be between 0 and 200 meters", validation.errors)

    def test_speed(self):
        self.assertIn("speed must be positive", validate_scan_config(make_config(speed=0.0)).errors)

    def test_angle(self):
        self.assertIn("angle must be a finite number",
                      validate_scan_config(make_config(angle=float('nan'))).errors)

    def test_start_and_end_points(self):
        bad = Point(lat=float('nan'), lng=0.0)
        self.assertIn("start point has invalid coordinates",
                      validate_scan_config(make_config(start_point=bad)).errors)
        self.assertIn("end point has invalid coordinates",
                      validate_scan_config(make_config(end_point=bad)).errors)

    def test_all_errors_are_reported(self):
        validation = validate_scan_config(make_config(spacing=0.0, altitude=300.0, speed=-1.0))
        self.assertEqual(len(validation.errors), 3)


class TestWarnings(unittest.TestCase):
    def test_dense_pattern(self):
        validation = validate_scan_config(make_config(spacing=0.1))
        self.assertTrue(validation.is_valid)
        self.assertIn("very dense scan pattern, consider increasing spacing", validation.warnings)

    def test_long_flight(self):
        big = Polygon.from_coords([(0, 0), (0, 0.01), (0.01, 0.01), (0.01, 0)])
        validation = validate_scan_config(make_config(polygon=big))
        self.assertTrue(validation.is_valid)
        self.assertEqual(validation.warnings, ["flight time exceeds typical limits"])

    def test_large_area(self):
        huge = Polygon.from_coords([(0, 0), (0, 0.05), (0.05, 0.05), (0.05, 0)])
        validation = validate_scan_config(make_config(polygon=huge))
        self.assertTrue(validation.is_valid)
        self.assertTrue(any("very large" in w for w in validation.warnings), validation.warnings)


class TestCustomLimits(unittest.TestCase):
    def test_raised_altitude_ceiling(self):
        config = make_config(altitude=300.0)
        self.assertFalse(validate_scan_config(config).is_valid)
        self.assertTrue(validate_scan_config(config, ScanLimits(max_altitude=400.0)).is_valid)

    def test_raised_vertex_minimum_skips_geometry_checks(self):
        """Below the vertex minimum only the count is reported, not area or simplicity"""
        collinear = Polygon.from_coords([(0, 0), (0, 0.001), (0, 0.002)])
        validation = validate_scan_config(make_config(polygon=collinear), ScanLimits(min_vertices=4))
        self.assertEqual(validation.errors, ["polygon must have at least 4 vertices"])

    def test_lowered_dense_threshold(self):
        validation = validate_scan_config(make_config(), ScanLimits(dense_line_threshold=3))
        self.assertIn("very dense scan pattern, consider increasing spacing", validation.warnings)


class TestLogging(unittest.TestCase):
    def test_rejection_is_logged(self):
        with self.assertLogs('flightscan.scan_pattern.validation', level='WARNING') as captured:
            validate_scan_config(make_config(speed=0.0))
        self.assertTrue(any("speed must be positive" in line for line in captured.output))


if __name__ == '__main__':
    unittest.main()
