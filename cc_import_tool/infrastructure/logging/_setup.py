# cc_import_tool/infrastructure/logging/_setup.py

"""Logging configuration and setup for CLI"""

# Standard library imports
from datetime import datetime
from logging import CRITICAL
from logging import DEBUG
from logging import ERROR
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import WARNING
from logging import getLogger
from os import makedirs
from os.path import exists

# Local imports
from cc_import_tool.application.models.import_plan import ImportPlan
from cc_import_tool.application.models.scan_result import ScanStatistics


def get_default_log_path() -> str:
    """Generate default log file path with timestamp"""
    log_dir = "logs"
    if not exists(log_dir):
        makedirs(log_dir)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{log_dir}/cc_import_{timestamp}.log"


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = False,
) -> str | None:
    """Configure logging for the application

    Args:
        log_file: Path to log file (auto-generated if None and file logging enabled)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output
        disable_file_logging: If True, disable file logging

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    level = _resolve_level(log_level)

    root_logger = getLogger()
    # File handler records DEBUG regardless of console level
    root_logger.setLevel(level if disable_file_logging else DEBUG)
    root_logger.handlers = []

    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if not disable_file_logging:
        if log_file is None:
            log_file = get_default_log_path()

        file_handler = FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(DEBUG)  # Always log debug to file
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

        getLogger(__name__).info(f"Logging to file: {log_file}")
        return log_file

    return None


def _resolve_level(log_level: str) -> int:
    """Map a level name to its numeric value, defaulting to INFO"""
    levels = {
        "DEBUG": DEBUG,
        "INFO": INFO,
        "WARNING": WARNING,
        "ERROR": ERROR,
        "CRITICAL": CRITICAL,
    }
    return levels.get(log_level.upper(), INFO)


def log_run_summary(
    archive_path: str,
    log_file: str | None,
    start_time: float,
    end_time: float,
    statistics: ScanStatistics,
    output_files: list[str] | None = None,
    plan: ImportPlan | None = None,
) -> None:
    """Log final run summary with statistics

    Args:
        archive_path: Archive that was scanned
        log_file: Path to log file (if any)
        start_time: Processing start time
        end_time: Processing end time
        statistics: Counts from the analysis
        output_files: Files written by exporters
        plan: Default import plan, when one was built
    """
    logger = getLogger(__name__)

    processing_time = end_time - start_time
    minutes = int(processing_time // 60)
    seconds = processing_time % 60

    summary_lines = ["", "=" * 80, "SCAN COMPLETE", "=" * 80]
    summary_lines.extend(
        [
            f"Archive: {archive_path}",
            f"Content files found: {statistics.total_items:,}",
            f"Processing time: {minutes}m {seconds:.1f}s",
        ]
    )

    if statistics.total_items > 0:
        summary_lines.extend(
            [
                "",
                "Creators:",
                f"  Distinct: {statistics.distinct_creators:,}",
                f"  Exact matches: {statistics.exact_matches:,}",
                f"  Fuzzy candidates: {statistics.fuzzy_matches:,}",
                f"  New: {statistics.new_creators:,}",
            ]
        )
        if statistics.unknown_creator_items:
            summary_lines.append(
                f"  Items without a creator folder: {statistics.unknown_creator_items:,}"
            )
        if statistics.duplicate_items:
            summary_lines.append(f"  Files already in registry: {statistics.duplicate_items:,}")
    else:
        summary_lines.extend(["", "No content files were found; nothing to import."])

    if plan is not None:
        summary_lines.extend(["", "Default import plan:"])
        summary_lines.extend(f"  {key}: {value:,}" for key, value in plan.summary().items())

    summary_lines.extend(["", "Output:"])
    for output_file in output_files or []:
        summary_lines.append(f"  Results: {output_file}")
    if log_file:
        summary_lines.append(f"  Log: {log_file}")

    summary_lines.append("=" * 80)
    logger.info("\n".join(summary_lines))
