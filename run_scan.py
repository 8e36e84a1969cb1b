# run_scan.py
import os
import sys
import json
import logging
import argparse

# Add the project root to the Python path to ensure imports work correctly
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from flightscan.scan_pattern import ScanConfig, ScanPatternGenerator, InvalidScanConfigError
from flightscan.scan_pattern.utils.calculations import format_area, format_distance, format_duration


def main(argv=None) -> int:
    """
    Loads a scan configuration from JSON, validates it, generates the
    waypoint route and prints a summary plus the full result.
    """
    parser = argparse.ArgumentParser(description="Generate a coverage scan pattern for a survey polygon.")
    parser.add_argument("config", help="path to a JSON scan configuration")
    parser.add_argument("--output", "-o", help="write the JSON result to this file instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    with open(args.config, encoding="utf-8") as f:
        config = ScanConfig.from_dict(json.load(f))

    generator = ScanPatternGenerator()
    try:
        result, validation = generator.plan(config)
    except InvalidScanConfigError as e:
        print("Scan configuration is invalid:")
        for error in e.errors:
            print(f"  - {error}")
        return 1

    stats = result.statistics
    print("--- Scan Pattern ---")
    print(f"Scan lines : {stats.scan_line_count}")
    print(f"Waypoints  : {stats.waypoint_count}")
    print(f"Distance   : {format_distance(stats.total_distance)}")
    print(f"Flight time: {format_duration(stats.estimated_flight_time)}")
    print(f"Area       : {format_area(stats.coverage_area)}")
    for warning in validation.warnings:
        print(f"WARNING: {warning}")
    print("-" * 40)

    payload = json.dumps(result.to_dict(), indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(payload)
        logging.info(f"Scan result written to '{args.output}'.")
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
