"""Watch mode: re-validate CSS modules as they change.

A watchdog ``Observer`` watches the target directory recursively. Every
modification, creation or rename-into-place of a CSS module triggers exactly
one synchronous validation pass whose result is printed. Events are not
debounced or queued beyond what watchdog's own dispatch thread does.
"""

from __future__ import annotations

import time
from pathlib import Path

from rich.markup import escape
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from component_kit.utils import console, print_success

from .rules import ValidationIssue
from .validator import DEFAULT_SUFFIX, validate_file


class WatchError(Exception):
    """Raised when the watch target cannot be observed."""


class _CSSModuleEventHandler(FileSystemEventHandler):
    """Forwards CSS module change events to a :class:`StyleWatcher`.

    Editors that save atomically write a temporary file and rename it over the
    target, which watchdog reports as a create or move rather than a modify.
    """

    def __init__(self, watcher: "StyleWatcher") -> None:
        super().__init__()
        self.watcher = watcher

    def _dispatch_path(self, path: str | bytes) -> None:
        if isinstance(path, bytes):
            path = path.decode()
        if path.endswith(self.watcher.suffix):
            self.watcher.handle_change(Path(path))

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._dispatch_path(event.src_path)

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._dispatch_path(event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._dispatch_path(event.dest_path)


class StyleWatcher:
    """Watches a directory tree and validates CSS modules on change."""

    def __init__(
        self,
        directory: str | Path,
        suffix: str = DEFAULT_SUFFIX,
        poll_interval: float = 1.0,
    ) -> None:
        self.directory = Path(directory)
        self.suffix = suffix
        self.poll_interval = poll_interval
        self.handler = _CSSModuleEventHandler(self)
        self._observer: Observer | None = None

    # -- Event handling ----------------------------------------------------

    def handle_change(self, path: Path) -> list[ValidationIssue]:
        """Validate *path* once and print the outcome."""
        console.print(f"\nFile changed: {path}")
        issues = validate_file(path)

        if not issues:
            print_success("No issues found")
        else:
            console.print(f"[bold red]{len(issues)} issue(s) found:[/bold red]")
            for issue in issues:
                console.print(f"  Line {issue.line}: {escape(issue.message)}")
        console.print("Watching...\n")
        return issues

    # -- Lifecycle ---------------------------------------------------------

    def start(self) -> None:
        """Schedule the recursive watch and start the observer thread.

        Raises:
            WatchError: If the target directory does not exist.
        """
        if not self.directory.is_dir():
            raise WatchError(f"Watch target not found: {self.directory}")
        observer = Observer()
        observer.schedule(self.handler, str(self.directory), recursive=True)
        observer.start()
        self._observer = observer

    def stop(self) -> None:
        """Stop the observer and wait for its thread to finish."""
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join()
        self._observer = None

    def run(self) -> None:
        """Watch until interrupted with Ctrl+C, then release the watch handle."""
        self.start()
        console.print(f"Watching directory: {self.directory}")
        console.print("Press Ctrl+C to stop\n")
        try:
            while True:
                time.sleep(self.poll_interval)
        except KeyboardInterrupt:
            console.print("\nStopping file watcher")
        finally:
            self.stop()
