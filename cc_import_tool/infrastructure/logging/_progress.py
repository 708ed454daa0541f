# cc_import_tool/infrastructure/logging/_progress.py

"""Progress display for CLI scans"""

# Standard library imports
from contextlib import contextmanager
from logging import getLogger
from typing import Iterator

# Third party imports
from rich.console import Console
from rich.progress import Progress
from rich.progress import SpinnerColumn
from rich.progress import TaskID
from rich.progress import TextColumn
from rich.progress import TimeElapsedColumn

logger = getLogger(__name__)


def log_phase_header(phase_name: str, enabled: bool = False) -> None:
    """Log a phase header, also printing it when the progress display is on

    Args:
        phase_name: The name of the phase (e.g., "SCANNING ARCHIVE")
        enabled: Whether the progress display is enabled
    """
    separator = "=" * 80
    header = f"=== {phase_name} ==="

    if enabled:
        print("")
        print(separator)
        print(header)
        print(separator)

    logger.info(separator)
    logger.info(header)
    logger.info(separator)


class ProgressBarManager:
    """Manages spinner/counter tasks for each phase of an import run

    Archive entry counts are not known up front, so tasks show a running
    count rather than a percentage.
    """

    def __init__(self, enabled: bool = True) -> None:
        """Initialize progress manager

        Args:
            enabled: Whether to render progress to the console
        """
        self.enabled = enabled
        self.progress: Progress | None = None
        self.console: Console | None = None
        self.tasks: dict[str, TaskID] = {}
        self.counts: dict[str, int] = {}

        if self.enabled:
            self.console = Console(stderr=True)
            self.progress = Progress(
                SpinnerColumn(),
                TextColumn("[bold blue]{task.description}"),
                TextColumn("{task.completed:,.0f} items"),
                TimeElapsedColumn(),
                console=self.console,
                transient=False,
            )

    def start(self) -> None:
        """Start the progress display"""
        if self.progress:
            self.progress.start()

    def stop(self) -> None:
        """Stop the progress display"""
        if self.progress:
            self.progress.stop()

    def create_phase_task(self, phase_name: str, description: str | None = None) -> None:
        """Create a counter task for a phase (logged instead when disabled)"""
        if not self.progress:
            if description:
                logger.info(description)
            return
        self.tasks[phase_name] = self.progress.add_task(description or phase_name, total=None)

    def update_task(self, phase_name: str, completed: int) -> None:
        """Set the running count for a phase"""
        if not self.progress or phase_name not in self.tasks:
            return
        self.counts[phase_name] = completed
        self.progress.update(self.tasks[phase_name], completed=completed)

    def complete_task(self, phase_name: str, message: str | None = None) -> None:
        """Finish a phase, optionally printing a completion message"""
        if not self.progress or phase_name not in self.tasks:
            if message:
                logger.info(message)
            return

        task_id = self.tasks.pop(phase_name)
        completed = self.counts.pop(phase_name, 0)
        self.progress.update(task_id, completed=completed, total=completed)
        if message and self.console:
            self.console.print(f"[green]✓[/green] {message}")

    @contextmanager
    def phase_context(self, phase_name: str, description: str | None = None) -> Iterator[None]:
        """Context manager wrapping one phase"""
        self.create_phase_task(phase_name, description)
        try:
            yield
        finally:
            self.complete_task(phase_name)
