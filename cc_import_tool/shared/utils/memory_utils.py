# cc_import_tool/shared/utils/memory_utils.py

"""Memory monitoring used to confirm archive scans stay bounded"""

# Standard library imports
from logging import getLogger
from time import time

# Third party imports
from psutil import Error as PsutilError
from psutil import Process
from psutil import virtual_memory

logger = getLogger(__name__)

_MB = 1024**2


class MemoryMonitor:
    """Sample process memory while an archive is scanned

    Entries are processed one at a time, so resident memory should stay
    flat no matter how many entries an archive holds. The monitor records
    the peak and logs at a fixed interval so that can be checked.
    """

    def __init__(self, log_interval: int = 30) -> None:
        """Initialize memory monitor

        Args:
            log_interval: Seconds between periodic logs
        """
        self.process = Process()
        self.log_interval = log_interval
        self.last_log_time = 0.0
        self.peak_mb = 0.0
        self.start_time = time()

        initial = self.get_memory_usage()
        logger.info(f"Memory monitoring initialized: {initial['process_mb']:.1f}MB process memory")

    def sample(self, items_seen: int = 0) -> None:
        """Record current usage, logging only when the interval has passed

        Signature matches the walker's per-entry callback.
        """
        stats = self.get_memory_usage()
        now = time()
        if now - self.last_log_time >= self.log_interval:
            logger.info(
                f"Memory after {items_seen:,} items: {stats['process_mb']:.1f}MB process, "
                f"{stats['system_percent']:.1f}% system used, peak {self.peak_mb:.1f}MB"
            )
            self.last_log_time = now

    def force_log(self, context: str = "") -> None:
        """Log current usage immediately

        Args:
            context: Optional description for the log line
        """
        stats = self.get_memory_usage()
        context_str = f" ({context})" if context else ""
        logger.info(
            f"Memory{context_str}: {stats['process_mb']:.1f}MB process, "
            f"{stats['system_percent']:.1f}% system used, peak {self.peak_mb:.1f}MB"
        )

    def get_memory_usage(self) -> dict[str, float]:
        """Current memory statistics (process_mb, system_percent, available_mb, peak_mb)"""
        try:
            process_mb = self.process.memory_info().rss / _MB
            self.peak_mb = max(self.peak_mb, process_mb)
            system_mem = virtual_memory()
            return {
                "process_mb": process_mb,
                "system_percent": system_mem.percent,
                "available_mb": system_mem.available / _MB,
                "peak_mb": self.peak_mb,
            }
        except (PsutilError, OSError) as e:
            logger.warning(f"Error getting memory usage: {e}")
            return {
                "process_mb": 0.0,
                "system_percent": 0.0,
                "available_mb": 0.0,
                "peak_mb": self.peak_mb,
            }

    def get_final_summary(self) -> str:
        """One-line summary of peak and final usage"""
        final = self.get_memory_usage()
        elapsed = time() - self.start_time
        return (
            f"Memory Summary: Peak {final['peak_mb']:.1f}MB, "
            f"Final {final['process_mb']:.1f}MB, Runtime {elapsed:.1f}s"
        )
