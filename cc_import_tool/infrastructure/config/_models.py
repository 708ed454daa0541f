# cc_import_tool/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

# Names accepted by application.processing.similarity.get_metric
KNOWN_METRICS = ("levenshtein", "ratio", "token_sort_ratio")


class ScanningConfig(BaseModel):
    """Archive scanning configuration"""

    content_extension: str = Field(".package", description="Suffix of accepted content files")
    verify_entries: bool = Field(
        True, description="Stream accepted entries through the decompressor to detect corruption"
    )
    chunk_size: int = Field(64 * 1024, gt=0, description="Bytes read per verification chunk")

    @field_validator("content_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Extensions must be non-empty and start with a dot"""
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"content_extension must look like '.ext', got {v!r}")
        return v


class ReconciliationConfig(BaseModel):
    """Creator name reconciliation configuration"""

    fuzzy_threshold: float = Field(
        0.7, ge=0.0, le=1.0, description="Scores must be strictly above this to be suggested"
    )
    metric: str = Field("levenshtein", description="Similarity metric name")
    sort_matches: bool = Field(True, description="Sort verdicts by found name")

    @field_validator("metric")
    @classmethod
    def validate_metric(cls, v: str) -> str:
        """Ensure the metric is one we can resolve"""
        if v not in KNOWN_METRICS:
            raise ValueError(f"Unknown similarity metric {v!r}; expected one of {KNOWN_METRICS}")
        return v


class ReviewConfig(BaseModel):
    """Defaults for the proposal handed to the reviewer"""

    suggest_existing_threshold: float = Field(
        0.8, ge=0.0, le=1.0, description="Preselect the matched creator above this similarity"
    )
    catch_all_collections: list[str] = Field(
        default=["General", "Unsorted"],
        description="Collections renamed after the creator folder when merging into an existing creator",
    )


class OutputConfig(BaseModel):
    """Output configuration"""

    formats: list[str] = Field(default=["json"], description="Export formats (json, csv)")
    pretty_json: bool = Field(True, description="Indent JSON output")
    compress_json: bool = Field(False, description="Gzip JSON output")

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[str]) -> list[str]:
        """Only JSON and CSV exporters exist"""
        unknown = [fmt for fmt in v if fmt not in ("json", "csv")]
        if unknown:
            raise ValueError(f"Unsupported output formats: {unknown}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration"""

    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    scanning: ScanningConfig = Field(default_factory=ScanningConfig)
    reconciliation: ReconciliationConfig = Field(default_factory=ReconciliationConfig)
    review: ReviewConfig = Field(default_factory=ReviewConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        # Standard library imports
        import json

        if isinstance(config_path, str):
            config_path = Path(config_path)

        # If no path provided, try to find config.json in current directory
        if config_path is None:
            config_path = Path("config.json")
            if not config_path.exists():
                return cls()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                return cls.model_validate(data)
            except (OSError, ValueError) as e:
                # Standard library imports
                import logging

                logging.getLogger(__name__).warning(
                    f"Failed to load config from {config_path}: {e}. Using defaults."
                )
                return cls()

        return cls()
