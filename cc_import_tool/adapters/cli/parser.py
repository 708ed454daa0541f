# cc_import_tool/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser
from argparse import Namespace
from datetime import datetime
from os.path import basename
from os.path import dirname
from os.path import join
from pathlib import Path

# Local imports
from cc_import_tool.infrastructure.config import KNOWN_METRICS
from cc_import_tool.infrastructure.config import get_config

DEFAULT_OUTPUT_DIR = "reports"


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser with all CLI options"""
    config = get_config()

    reconciliation_config = config.reconciliation
    output_config = config.output
    logging_config = config.logging

    parser = ArgumentParser(
        description="Scan a custom-content archive and reconcile its creators with a registry",
    )

    # Required arguments
    parser.add_argument("--archive", required=True, help="Path to the ZIP archive to scan")

    # Data sources
    parser.add_argument(
        "--registry",
        default=None,
        help="Registry snapshot JSON (list of {id, name} or {creators, items}); empty if omitted",
    )
    parser.add_argument("--config", default=None, help="Path to configuration JSON file")

    # Output options
    parser.add_argument(
        "--output-filename",
        "-o",
        default=None,
        help="Output file base name (default: reports/[timestamp]_[archive name])",
    )
    parser.add_argument(
        "--output-formats",
        nargs="+",
        choices=["json", "csv"],
        default=output_config.formats,
        help="Output formats to generate (space-separated). JSON is always generated first.",
    )

    # Reconciliation options
    parser.add_argument(
        "--fuzzy-threshold",
        type=float,
        default=None,
        help=f"Minimum similarity (exclusive) for a fuzzy suggestion (default: {reconciliation_config.fuzzy_threshold})",
    )
    parser.add_argument(
        "--metric",
        choices=KNOWN_METRICS,
        default=None,
        help=f"Similarity metric (default: {reconciliation_config.metric})",
    )

    # Verification is on by default, so use store_true to disable it
    parser.add_argument(
        "--no-verify",
        action="store_true",
        help="Skip streaming entry payloads through the decompressor",
    )

    # Memory monitoring options
    parser.add_argument(
        "--monitor-memory",
        action="store_true",
        help="Log memory usage statistics during the scan",
    )
    parser.add_argument(
        "--memory-log-interval",
        type=int,
        default=30,
        help="Seconds between memory usage logs (default: 30)",
    )

    # Logging options
    parser.add_argument(
        "--log-file",
        default=logging_config.log_file,
        help="Path to log file (default: logs/cc_import_[timestamp].log)",
    )
    parser.add_argument("--disable-file-logging", action="store_true", help="Disable file logging")

    # Verbosity - count occurrences: -v (INFO), -vv (DEBUG)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (default: progress bar only, -v: INFO, -vv: DEBUG)",
    )
    parser.add_argument("--silent", action="store_true", help="Suppress all console output")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress display")

    return parser


def resolve_log_level(args: Namespace) -> str:
    """Map verbosity flags to a console log level"""
    if args.verbose >= 2:
        return "DEBUG"
    if args.verbose == 1:
        return "INFO"
    return "WARNING"


def generate_output_filename(args: Namespace) -> str:
    """Generate the output base name for a run

    A user-supplied name keeps its directory (reports/ when it has none) and
    loses a short extension. Otherwise the archive's stem is used. Both get a
    timestamp prefix.

    Example:
        "reports/20250201_143052_downloads"
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    if args.output_filename:
        dir_part = dirname(str(args.output_filename))
        file_part = basename(str(args.output_filename))

        if "." in file_part:
            stem, extension = file_part.rsplit(".", 1)
            if len(extension) < 5:
                file_part = stem

        return join(dir_part or DEFAULT_OUTPUT_DIR, f"{timestamp}_{file_part}")

    return join(DEFAULT_OUTPUT_DIR, f"{timestamp}_{Path(args.archive).stem}")
