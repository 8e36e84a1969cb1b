#!/usr/bin/env python3
# flightscan/scan_pattern/tests/test_run_scan.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout

import run_scan

VALID_CONFIG = {
    "polygon": [[0, 0], [0, 0.001], [0.001, 0.001], [0.001, 0]],
    "altitude": 50,
    "spacing": 20,
    "angle": 0,
    "start_point": [0, 0],
    "end_point": [0.001, 0],
    "speed": 5,
}


class TestRunScan(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _write_config(self, data) -> str:
        path = Path(self.tmp.name) / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    def test_writes_result_file(self):
        out = Path(self.tmp.name) / "result.json"
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = run_scan.main([self._write_config(VALID_CONFIG), "--output", str(out)])
        self.assertEqual(code, 0)
        self.assertIn("Scan lines : 5", stdout.getvalue())
        result = json.loads(out.read_text(encoding="utf-8"))
        self.assertEqual(len(result["waypoints"]), 12)
        self.assertEqual(result["statistics"]["scan_line_count"], 5)

    def test_invalid_config_returns_error_code(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = run_scan.main([self._write_config(dict(VALID_CONFIG, spacing=0))])
        self.assertEqual(code, 1)
        self.assertIn("spacing must be positive", stdout.getvalue())


if __name__ == '__main__':
    unittest.main()
