# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import WARNING
from logging import getLogger
from pathlib import Path
from typing import Callable
from zipfile import ZIP_DEFLATED
from zipfile import ZipFile

# Third party imports
import pytest

# Local imports
from cc_import_tool.core.domain.creator_match import RegistryEntry
from cc_import_tool.infrastructure.config import _loader

ArchiveFactory = Callable[..., Path]


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - reset logging and cached config"""
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(WARNING)

    _loader._default_config = None

    yield

    _loader._default_config = None


@pytest.fixture
def make_archive(tmp_path: Path) -> ArchiveFactory:
    """Build a ZIP archive in tmp_path from entry names (or name -> payload pairs)

    Entry order in the archive follows the order given.
    """

    def _make(
        entries: list[str] | dict[str, bytes],
        name: str = "archive.zip",
        compression: int = ZIP_DEFLATED,
    ) -> Path:
        if isinstance(entries, list):
            entries = {entry: b"" if entry.endswith("/") else b"DBPF payload" for entry in entries}

        archive_path = tmp_path / name
        with ZipFile(archive_path, "w", compression=compression) as archive:
            for entry_name, payload in entries.items():
                archive.writestr(entry_name, payload)
        return archive_path

    return _make


@pytest.fixture
def registry() -> list[RegistryEntry]:
    """Registry used by the reconciliation examples"""
    return [RegistryEntry(id="1", name="JaneDoe")]
