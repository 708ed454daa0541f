# tests/test_infrastructure/test_logging_format.py

"""Tests for logging setup, run summaries, and the progress display"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import INFO
from logging import StreamHandler
from logging import WARNING
from logging import getLogger
from unittest.mock import MagicMock
from unittest.mock import patch

# Local imports
from cc_import_tool.application.models.import_plan import ImportPlan
from cc_import_tool.application.models.scan_result import ScanStatistics
from cc_import_tool.infrastructure.logging import ProgressBarManager
from cc_import_tool.infrastructure.logging import log_run_summary
from cc_import_tool.infrastructure.logging import setup_logging


class TestLoggingConfiguration:
    """Handler and level setup"""

    def test_console_formatter_includes_timestamp(self):
        with patch("cc_import_tool.infrastructure.logging._setup.StreamHandler") as mock_handler_class:
            mock_handler = MagicMock()
            mock_handler_class.return_value = mock_handler

            setup_logging(disable_file_logging=True)

            formatter = mock_handler.setFormatter.call_args[0][0]
            assert "%(asctime)s" in formatter._fmt
            assert "%(levelname)s" in formatter._fmt
            assert "%(message)s" in formatter._fmt

    def test_console_only(self):
        result = setup_logging(log_level="WARNING", disable_file_logging=True)

        root = getLogger()
        assert result is None
        assert root.level == WARNING
        assert [type(h) for h in root.handlers] == [StreamHandler]

    def test_silent_with_file(self, tmp_path):
        log_file = str(tmp_path / "run.log")

        result = setup_logging(log_file=log_file, silent=True)

        root = getLogger()
        assert result == log_file
        assert root.level == DEBUG
        assert [type(h) for h in root.handlers] == [FileHandler]
        assert root.handlers[0].level == DEBUG
        root.handlers[0].close()

    def test_unknown_level_defaults_to_info(self):
        setup_logging(log_level="CHATTY", disable_file_logging=True)

        assert getLogger().handlers[0].level == INFO


class TestRunSummary:
    """Final summary block"""

    def test_summary_contents(self, caplog):
        stats = ScanStatistics(
            total_items=5,
            distinct_creators=2,
            exact_matches=1,
            new_creators=1,
            unknown_creator_items=1,
        )

        with caplog.at_level(INFO):
            log_run_summary(
                archive_path="downloads.zip",
                log_file="logs/run.log",
                start_time=0.0,
                end_time=75.5,
                statistics=stats,
                output_files=["reports/run.json"],
                plan=ImportPlan(duplicate_count=2),
            )

        assert "SCAN COMPLETE" in caplog.text
        assert "Content files found: 5" in caplog.text
        assert "Processing time: 1m 15.5s" in caplog.text
        assert "Items without a creator folder: 1" in caplog.text
        assert "duplicates_skipped: 2" in caplog.text
        assert "Results: reports/run.json" in caplog.text

    def test_summary_for_empty_scan(self, caplog):
        with caplog.at_level(INFO):
            log_run_summary("empty.zip", None, 0.0, 1.0, ScanStatistics())

        assert "nothing to import" in caplog.text


class TestProgressBarManager:
    """Progress display, enabled and disabled"""

    def test_disabled_logs_instead(self, caplog):
        progress = ProgressBarManager(enabled=False)

        with caplog.at_level(INFO):
            with progress.phase_context("scan", "Scanning downloads.zip"):
                progress.update_task("scan", 3)

        assert progress.progress is None
        assert "Scanning downloads.zip" in caplog.text

    def test_enabled_tracks_counts(self):
        progress = ProgressBarManager(enabled=True)
        progress.start()
        try:
            progress.create_phase_task("scan", "Scanning")
            progress.update_task("scan", 7)
            assert progress.counts["scan"] == 7
            progress.complete_task("scan", "Done")
        finally:
            progress.stop()

        assert "scan" not in progress.tasks
        assert "scan" not in progress.counts

    def test_update_unknown_phase_is_ignored(self):
        progress = ProgressBarManager(enabled=True)

        progress.update_task("missing", 1)

        assert progress.counts == {}
