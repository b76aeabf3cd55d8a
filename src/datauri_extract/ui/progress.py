"""Rich progress rendering for extraction runs.

The pipeline reports events through a plain callback; this module turns them
into a spinner on stderr so stdout stays reserved for the run summary.
"""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressReporter:
    """Context manager mapping pipeline events to rich progress tasks."""

    def __init__(self, console: Console | None = None, *, transient: bool = True) -> None:
        self.console = console or Console(stderr=True)
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("{task.completed}"),
            TimeElapsedColumn(),
            console=self.console,
            transient=transient,
        )
        self._tasks: dict[str, TaskID] = {}

    def __enter__(self) -> ProgressReporter:
        self.progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.progress.stop()

    def add_step(self, description: str, total: int | None = None) -> TaskID:
        return self.progress.add_task(description, total=total)

    def finish_task(self, task_id: TaskID) -> None:
        self.progress.update(task_id, visible=False)
        self.progress.remove_task(task_id)

    def emit(self, event: str, payload: dict[str, int | str]) -> None:
        if event == "scan:start":
            length = int(payload.get("length", 0))
            self._tasks["scan"] = self.add_step(f"Scanning {length} characters…", total=None)
            self._tasks["resources"] = self.add_step("Extracting data URIs", total=None)
        elif event == "resource:written":
            task = self._tasks.get("resources")
            if task is not None:
                self.progress.advance(task)
                self.progress.update(
                    task, description=f"Extracted {payload.get('file_name', '')}"
                )
        elif event == "scan:finalized":
            for key in ("scan", "resources"):
                task = self._tasks.pop(key, None)
                if task is not None:
                    self.finish_task(task)


__all__ = ["ProgressReporter"]
