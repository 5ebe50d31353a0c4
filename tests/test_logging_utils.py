"""JSONL logging tests."""

import json
import tempfile
import unittest
from pathlib import Path

from slidecheck.logging_utils import log_event, result_summary, run_log_path
from slidecheck.models.config import Config
from slidecheck.models.validation import ValidationError, ValidationResult, ValidationWarning


class TestLogging(unittest.TestCase):
    def test_log_event_appends_records(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            log_path = Path(temp_dir) / "run" / "run_log.jsonl"
            log_event(log_path, "INPUT_LOADED", {"slide_count": 2})
            log_event(log_path, "VALIDATE_DONE", {"valid": True})

            lines = log_path.read_text(encoding="utf-8").splitlines()
            self.assertEqual(len(lines), 2)
            first = json.loads(lines[0])
            self.assertEqual(first["event_type"], "INPUT_LOADED")
            self.assertEqual(first["payload"], {"slide_count": 2})
            self.assertTrue(first["timestamp"].endswith("Z"))

    def test_run_log_path(self) -> None:
        config = Config(
            project_root="/proj",
            assets_dir="/proj/assets",
            templates_path="/proj/assets/templates/default_templates.json",
            inputs_dir="/proj/inputs",
            runs_dir="/proj/runs",
        )
        self.assertIsNone(run_log_path(config, None))
        self.assertIsNone(run_log_path(config, ""))
        self.assertEqual(run_log_path(config, "r1"), Path("/proj/runs/r1/run_log.jsonl"))

    def test_result_summary(self) -> None:
        result = ValidationResult.build(
            errors=[
                ValidationError(code="TIMING_OVERLAP", message="a"),
                ValidationError(code="TIMING_OVERLAP", message="b"),
            ],
            warnings=[ValidationWarning(code="LARGE_GAP", message="c")],
        )
        self.assertEqual(
            result_summary(result),
            {
                "valid": False,
                "error_count": 2,
                "warning_count": 1,
                "codes": ["LARGE_GAP", "TIMING_OVERLAP"],
            },
        )


if __name__ == "__main__":
    unittest.main()
