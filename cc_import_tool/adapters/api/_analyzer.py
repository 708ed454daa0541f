# cc_import_tool/adapters/api/_analyzer.py

"""High-level API: scan an archive and reconcile it against a registry snapshot"""

# Standard library imports
import asyncio
from logging import getLogger
from pathlib import Path

# Local imports
from cc_import_tool.adapters.exporters.csv_exporter import CSVExporter
from cc_import_tool.adapters.exporters.json_exporter import save_analysis_json
from cc_import_tool.application.models.import_plan import ImportPlan
from cc_import_tool.application.models.registry_snapshot import RegistrySnapshot
from cc_import_tool.application.models.scan_result import ScanAnalysis
from cc_import_tool.application.models.scan_result import ScanStatistics
from cc_import_tool.application.processing.archive_walker import ArchiveWalker
from cc_import_tool.application.processing.duplicate_detector import find_duplicates
from cc_import_tool.application.processing.import_planner import build_import_plan
from cc_import_tool.application.processing.name_reconciler import NameReconciler
from cc_import_tool.application.processing.review import propose_decisions
from cc_import_tool.core.domain.decisions import ConfirmedMapping
from cc_import_tool.core.types.protocols import ArchiveScannerProtocol
from cc_import_tool.core.types.protocols import EntryCallback
from cc_import_tool.core.types.protocols import ImportSink
from cc_import_tool.core.types.protocols import ReconcilerProtocol
from cc_import_tool.infrastructure.config import ConfigLoader
from cc_import_tool.infrastructure.config import get_config
from cc_import_tool.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)


class ArchiveImportAnalyzer(ConfigurableMixin):
    """Runs the scan → reconcile → review pipeline for one archive at a time

    The analyzer holds no state between calls; each analysis is built
    fresh from the archive and the registry snapshot passed in.
    """

    def __init__(
        self,
        config_path: str | None = None,
        config: ConfigLoader | None = None,
        on_entry: EntryCallback | None = None,
        scanner: ArchiveScannerProtocol | None = None,
        reconciler: ReconcilerProtocol | None = None,
    ) -> None:
        """Initialize analyzer with configuration

        Args:
            config_path: Path to configuration JSON file
            config: Already-built configuration (takes precedence over config_path)
            on_entry: Per-entry callback forwarded to the archive walker
            scanner: Archive scanner to use instead of the built-in ArchiveWalker
            reconciler: Name reconciler to use instead of the built-in NameReconciler
        """
        if config is None and config_path:
            config = get_config(config_path)
        self.config = self._init_config(config)
        self.walker: ArchiveScannerProtocol = scanner or ArchiveWalker(
            self.config, on_entry=on_entry
        )
        self.reconciler: ReconcilerProtocol = reconciler or NameReconciler(self.config)

    async def analyze_archive(
        self, archive_path: Path | str, registry: RegistrySnapshot | None = None
    ) -> ScanAnalysis:
        """Scan an archive and reconcile its creators against the registry

        Args:
            archive_path: Path to the ZIP archive
            registry: Registry snapshot; empty when omitted

        Returns:
            ScanAnalysis ready for review

        Raises:
            ArchiveOpenError: The archive could not be opened
            ArchiveReadError: The archive failed mid-scan
        """
        registry = registry or RegistrySnapshot()
        scan = await self.walker.scan(archive_path)

        if scan.is_empty:
            logger.warning(f"No {self.config.scanning.content_extension} files found in {archive_path}")

        matches = self.reconciler.reconcile(scan.distinct_creator_names, registry.list_creators())
        duplicates = find_duplicates(scan.items, registry.list_known_items())
        statistics = ScanStatistics.from_results(scan.items, matches, duplicates)

        logger.info(
            f"Reconciled {statistics.distinct_creators} creators: {statistics.exact_matches} exact, "
            f"{statistics.fuzzy_matches} fuzzy, {statistics.new_creators} new"
        )
        return ScanAnalysis(
            archive_path=str(archive_path),
            items=scan.items,
            matches=matches,
            duplicates=duplicates,
            statistics=statistics,
        )

    def analyze_archive_sync(
        self, archive_path: Path | str, registry: RegistrySnapshot | None = None
    ) -> ScanAnalysis:
        """Blocking wrapper around analyze_archive for callers without an event loop"""
        return asyncio.run(self.analyze_archive(archive_path, registry))

    def propose_decisions(self, analysis: ScanAnalysis) -> ConfirmedMapping:
        """Default reviewer decisions for an analysis"""
        review = self.config.review
        return propose_decisions(
            analysis.items,
            analysis.matches,
            suggest_threshold=review.suggest_existing_threshold,
            catch_all_collections=review.catch_all_collections,
        )

    def plan_import(
        self, analysis: ScanAnalysis, mapping: ConfirmedMapping | None = None
    ) -> ImportPlan:
        """Build the import plan from a confirmed mapping (default proposal if omitted)"""
        if mapping is None:
            mapping = self.propose_decisions(analysis)
        return build_import_plan(analysis.items, mapping)

    def apply_import(
        self, analysis: ScanAnalysis, sink: ImportSink, mapping: ConfirmedMapping | None = None
    ) -> ImportPlan:
        """Plan the import and hand it to the persistence side

        Args:
            analysis: Reviewed analysis
            sink: Persistence-side consumer; inserts idempotently on natural keys
            mapping: Confirmed decisions (default proposal if omitted)

        Returns:
            The plan that was applied
        """
        plan = self.plan_import(analysis, mapping)
        summary = plan.summary()
        logger.info(
            f"Applying import plan: {summary['creators']} creators, "
            f"{summary['collections']} collections, {summary['items']} items"
        )
        sink.apply(plan)
        return plan

    def export_results(
        self,
        analysis: ScanAnalysis,
        output_path: str,
        formats: list[str] | None = None,
        parameters: dict[str, str | int | float | bool] | None = None,
    ) -> list[str]:
        """Write the analysis in the requested formats

        JSON is always written first; other formats are derived from it.

        Args:
            analysis: Analysis to export
            output_path: Base output path (extension is replaced per format)
            formats: Formats to produce (default from config)
            parameters: Run parameters recorded in JSON metadata

        Returns:
            Paths of the files written
        """
        output = self.config.output
        formats = formats or output.formats
        base = Path(output_path)
        if base.suffix in (".json", ".csv"):
            base = base.with_suffix("")
        base.parent.mkdir(parents=True, exist_ok=True)

        json_path = save_analysis_json(
            analysis,
            f"{base}.json",
            pretty=output.pretty_json,
            compress=output.compress_json,
            parameters=parameters,
        )
        written = [json_path] if "json" in formats else []

        if "csv" in formats:
            csv_path = f"{base}.csv"
            CSVExporter(json_path, csv_path).export()
            written.append(csv_path)

        if "json" not in formats:
            Path(json_path).unlink()

        for path in written:
            logger.info(f"Wrote {path}")
        return written
