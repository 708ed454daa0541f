# cc_import_tool/core/domain/exceptions.py

"""Exceptions raised by the scanning and import pipeline"""


class ArchiveError(Exception):
    """Base exception for archive scanning failures"""

    def __init__(self, archive_path: str, message: str = ""):
        self.archive_path = archive_path
        super().__init__(message or f"Archive error: {archive_path}")


class ArchiveOpenError(ArchiveError):
    """Raised when an archive is missing, unreadable, or not a ZIP file"""

    pass


class ArchiveReadError(ArchiveError):
    """Raised when an entry fails to decompress partway through a scan"""

    def __init__(self, archive_path: str, entry_name: str, reason: str):
        self.entry_name = entry_name
        self.reason = reason
        super().__init__(archive_path, f"Failed reading {entry_name!r} in {archive_path}: {reason}")


class RegistryLoadError(Exception):
    """Raised when a registry snapshot file cannot be read or validated"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load registry snapshot {path}: {reason}")


class DecisionError(ValueError):
    """Raised when a confirmed creator/collection decision is inconsistent"""

    pass
