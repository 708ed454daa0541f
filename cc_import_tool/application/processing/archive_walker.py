# cc_import_tool/application/processing/archive_walker.py

"""Streaming enumeration of content files inside a ZIP archive

Entries are pulled one at a time: an entry is fully handled (provenance
derived and, when enabled, its payload streamed through the decompressor
in fixed-size chunks) before the next one is requested. Blocking archive
I/O runs in a worker thread so the event loop is never held up.

Opening the archive reads its central directory, so entry metadata (names,
sizes, offsets) is held for every entry and grows with the entry count.
Payloads never are: at most one entry is being decompressed at a time, and
only ``chunk_size`` bytes of it are buffered.

The scan is all-or-nothing. Items accumulate in a list local to the call
and are only returned once every entry has been read; any failure raises
and the partial list is dropped.
"""

# Standard library imports
import asyncio
from logging import getLogger
from pathlib import Path
from typing import AsyncIterator
from zipfile import BadZipFile
from zipfile import ZipFile
from zipfile import ZipInfo
import zlib

# Local imports
from cc_import_tool.application.models.scan_result import ScanResult
from cc_import_tool.core.domain.discovered_item import DiscoveredItem
from cc_import_tool.core.domain.exceptions import ArchiveOpenError
from cc_import_tool.core.domain.exceptions import ArchiveReadError
from cc_import_tool.core.domain.provenance import derive_provenance
from cc_import_tool.core.domain.provenance import is_content_entry
from cc_import_tool.core.types.protocols import EntryCallback
from cc_import_tool.infrastructure.config import ConfigLoader
from cc_import_tool.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)

# Bit 0 of the general purpose flag marks an encrypted entry
_ENCRYPTED_FLAG = 0x1


class ArchiveWalker(ConfigurableMixin):
    """Scans a ZIP archive for content files and derives their provenance"""

    def __init__(
        self, config: ConfigLoader | None = None, on_entry: EntryCallback | None = None
    ) -> None:
        """Initialize walker

        Args:
            config: Optional configuration loader
            on_entry: Called with the running item count after each accepted entry
        """
        self.config = self._init_config(config)
        settings = self.config.scanning

        self.content_extension = settings.content_extension
        self.verify_entries = settings.verify_entries
        self.chunk_size = settings.chunk_size
        self.on_entry = on_entry

    async def scan(self, archive_path: Path | str) -> ScanResult:
        """Scan an archive and return every accepted item with the distinct creator names

        Args:
            archive_path: Filesystem path to a ZIP archive

        Returns:
            ScanResult with items in archive order

        Raises:
            ArchiveOpenError: The archive is missing, unreadable, or not a ZIP
            ArchiveReadError: An entry failed to decompress during the scan
        """
        path = str(archive_path)
        logger.info(f"Scanning archive: {path}")

        archive = await self._open(path)
        items: list[DiscoveredItem] = []
        creator_names: set[str] = set()
        try:
            async for entry in self._iter_content_entries(archive, path):
                item = derive_provenance(entry.filename, self.content_extension)
                items.append(item)
                creator_names.add(item.creator_name)
                if self.on_entry is not None:
                    self.on_entry(len(items))
        finally:
            await asyncio.to_thread(archive.close)

        logger.info(
            f"Found {len(items):,} content files from {len(creator_names):,} creators in {path}"
        )
        return ScanResult(items=items, distinct_creator_names=frozenset(creator_names))

    async def _open(self, path: str) -> ZipFile:
        try:
            return await asyncio.to_thread(ZipFile, path)
        except (BadZipFile, OSError, EOFError, ValueError) as e:
            logger.error(f"Cannot open archive {path}: {e}")
            raise ArchiveOpenError(path, f"Cannot open archive {path}: {e}") from e

    async def _iter_content_entries(self, archive: ZipFile, path: str) -> AsyncIterator[ZipInfo]:
        """Yield accepted entries one at a time, in archive order"""
        skipped = 0
        for info in archive.infolist():
            if not is_content_entry(info.filename, self.content_extension):
                skipped += 1
                continue

            if self.verify_entries:
                await asyncio.to_thread(self._verify_entry, archive, info, path)
            else:
                # Still give other tasks a turn between entries
                await asyncio.sleep(0)

            yield info

        logger.debug(f"Skipped {skipped:,} directory or non-content entries in {path}")

    def _verify_entry(self, archive: ZipFile, info: ZipInfo, path: str) -> None:
        """Stream an entry's payload through the decompressor, checking its CRC"""
        if info.flag_bits & _ENCRYPTED_FLAG:
            logger.warning(f"Entry {info.filename!r} is encrypted; payload not verified")
            return

        try:
            with archive.open(info) as stream:
                while stream.read(self.chunk_size):
                    pass
        except (BadZipFile, zlib.error, EOFError, OSError, NotImplementedError) as e:
            logger.error(f"Failed reading {info.filename!r} in {path}: {e}")
            raise ArchiveReadError(path, info.filename, str(e)) from e
