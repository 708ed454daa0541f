# cc_import_tool/adapters/cli/main.py

"""
Custom Content Import Tool - CLI Main Module

Command-line interface for scanning a custom-content archive and
reconciling its creator folders with an existing registry.

This CLI uses the public API provided by cc_import_tool.
"""

# Standard library imports
import asyncio
from argparse import Namespace
from logging import getLogger
from time import time

# Local imports
from cc_import_tool.adapters.api import ArchiveImportAnalyzer
from cc_import_tool.adapters.cli.parser import create_argument_parser
from cc_import_tool.adapters.cli.parser import generate_output_filename
from cc_import_tool.adapters.cli.parser import resolve_log_level
from cc_import_tool.core.domain.exceptions import ArchiveError
from cc_import_tool.core.domain.exceptions import RegistryLoadError
from cc_import_tool.infrastructure.config import ConfigLoader
from cc_import_tool.infrastructure.config import get_config
from cc_import_tool.infrastructure.logging import ProgressBarManager
from cc_import_tool.infrastructure.logging import log_phase_header
from cc_import_tool.infrastructure.logging import log_run_summary
from cc_import_tool.infrastructure.logging import setup_logging
from cc_import_tool.infrastructure.persistence import load_registry_snapshot
from cc_import_tool.shared.utils.memory_utils import MemoryMonitor

logger = getLogger(__name__)

SCAN_PHASE = "scan"


def build_config(args: Namespace) -> ConfigLoader:
    """Apply command-line overrides on top of the loaded configuration"""
    config = get_config(args.config)

    reconciliation: dict[str, object] = {}
    if args.fuzzy_threshold is not None:
        reconciliation["fuzzy_threshold"] = args.fuzzy_threshold
    if args.metric is not None:
        reconciliation["metric"] = args.metric

    scanning: dict[str, object] = {}
    if args.no_verify:
        scanning["verify_entries"] = False

    if reconciliation or scanning:
        config = config.with_overrides(reconciliation=reconciliation, scanning=scanning)
    return config


def main() -> None:
    """Main CLI entry point using the public API"""
    parser = create_argument_parser()
    args = parser.parse_args()

    log_file_path = setup_logging(
        log_file=args.log_file,
        log_level=resolve_log_level(args),
        silent=args.silent,
        disable_file_logging=args.disable_file_logging,
    )

    start_time = time()
    output_filename = generate_output_filename(args)

    progress = ProgressBarManager(enabled=not (args.silent or args.no_progress))
    memory_monitor = None
    if args.monitor_memory:
        memory_monitor = MemoryMonitor(log_interval=args.memory_log_interval)
        logger.info(f"Memory monitoring enabled (interval: {args.memory_log_interval}s)")

    def on_entry(items_seen: int) -> None:
        progress.update_task(SCAN_PHASE, items_seen)
        if memory_monitor:
            memory_monitor.sample(items_seen)

    try:
        config = build_config(args)
    except ValueError as e:
        # pydantic ValidationError is a ValueError
        logger.error(f"Invalid configuration: {e}")
        raise SystemExit(1) from e

    try:
        registry = load_registry_snapshot(args.registry)
        logger.info(
            f"Registry: {len(registry.creators):,} creators, {len(registry.items):,} known items"
        )

        log_phase_header("SCANNING ARCHIVE", progress.enabled and args.verbose == 0)
        logger.info(
            f"Reconciliation: metric={config.reconciliation.metric}, "
            f"threshold={config.reconciliation.fuzzy_threshold}"
        )

        analyzer = ArchiveImportAnalyzer(config=config, on_entry=on_entry)

        if memory_monitor:
            memory_monitor.force_log("before scan")

        progress.start()
        try:
            with progress.phase_context(SCAN_PHASE, f"Scanning {args.archive}"):
                analysis = asyncio.run(analyzer.analyze_archive(args.archive, registry))
        finally:
            progress.stop()

        if memory_monitor:
            memory_monitor.force_log("after scan")

        output_files = analyzer.export_results(
            analysis,
            output_filename,
            formats=args.output_formats,
            parameters={
                "fuzzy_threshold": config.reconciliation.fuzzy_threshold,
                "metric": config.reconciliation.metric,
                "verify_entries": config.scanning.verify_entries,
                "registry": args.registry or "",
            },
        )
        plan = analyzer.plan_import(analysis)

        log_run_summary(
            archive_path=args.archive,
            log_file=log_file_path,
            start_time=start_time,
            end_time=time(),
            statistics=analysis.statistics,
            output_files=output_files,
            plan=plan,
        )

        if memory_monitor:
            logger.info(memory_monitor.get_final_summary())

    except (ArchiveError, RegistryLoadError) as e:
        logger.error(f"Error during processing: {e}")
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
