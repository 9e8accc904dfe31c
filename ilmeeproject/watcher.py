"""Polling watcher that reports new, modified and deleted entries of a project."""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path

from .notifications import INFO, NotificationCenter

log = logging.getLogger(__name__)

DEFAULT_INTERVAL = 1.0
_STARTED_COLOR = (0.4, 0.8, 0.4, 1.0)
_STOPPED_COLOR = (0.8, 0.4, 0.4, 1.0)


@dataclass
class FileChanges:
    """Paths that appeared, changed or vanished since the previous check."""

    new: list[str] = field(default_factory=list)
    modified: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.new or self.modified or self.deleted)

    @property
    def significant(self) -> bool:
        """Worth telling the user: anything added or removed, or many edits."""
        return bool(self.new or self.deleted or len(self.modified) > 2)

    def summary(self) -> str | None:
        """One-line description of significant changes, or None."""
        if not self.significant:
            return None
        parts = []
        if self.new:
            parts.append(f"{len(self.new)} new")
        if self.modified:
            parts.append(f"{len(self.modified)} modified")
        if self.deleted:
            parts.append(f"{len(self.deleted)} deleted")
        return ", ".join(parts) + " files detected"


class FileWatcher:
    """Compares modification times under a folder, on demand or in a thread."""

    def __init__(
        self,
        root: str | os.PathLike[str],
        interval: float = DEFAULT_INTERVAL,
        notifications: NotificationCenter | None = None,
    ) -> None:
        self.root = Path(root)
        self.interval = interval
        self.notifications = notifications
        self._timestamps: dict[str, int] = {}
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._changed = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def timestamps(self) -> dict[str, int]:
        with self._lock:
            return dict(self._timestamps)

    def _notify(self, title: str, message: str, color) -> None:
        if self.notifications is not None:
            self.notifications.show(title, message, color)

    def _scan(self) -> dict[str, int]:
        stamps: dict[str, int] = {}
        for dirpath, dirnames, filenames in os.walk(self.root):
            for name in (*dirnames, *filenames):
                path = os.path.join(dirpath, name)
                try:
                    stamps[path] = int(os.stat(path).st_mtime)
                except OSError as exc:
                    log.warning("Cannot stat %s: %s", path, exc)
        return stamps

    def snapshot(self) -> dict[str, int]:
        """Record the current state as the baseline and return it."""
        current = self._scan()
        with self._lock:
            self._timestamps = current
            return dict(current)

    def check(self) -> FileChanges:
        """Compare with the baseline, update it, and return what changed."""
        current = self._scan()
        changes = FileChanges()
        with self._lock:
            for path in sorted(current):
                stamp = current[path]
                known = self._timestamps.get(path)
                if known is None:
                    changes.new.append(path)
                    self._timestamps[path] = stamp
                elif stamp > known:
                    changes.modified.append(path)
                    self._timestamps[path] = stamp
            for path in sorted(set(self._timestamps) - set(current)):
                changes.deleted.append(path)
                del self._timestamps[path]

        for path in changes.new:
            log.info("New file detected: %s", path)
        for path in changes.modified:
            log.info("Modified file detected: %s", path)
        for path in changes.deleted:
            log.info("Deleted file detected: %s", path)
        message = changes.summary()
        if message is not None:
            self._notify("Files Changed", message, INFO)
        return changes

    def _loop(self) -> None:
        while not self._stop_event.wait(self.interval):
            if self.check():
                self._changed.set()

    def start(self) -> bool:
        """Start watching in a background thread; False if already running."""
        if self.running:
            self._notify("Info", "File watcher is already running", INFO)
            return False
        self._stop_event.clear()
        self._changed.clear()
        self.snapshot()
        self._thread = threading.Thread(target=self._loop, name="file-watcher", daemon=True)
        self._thread.start()
        self._notify("File Watcher", "Started monitoring project files", _STARTED_COLOR)
        log.info("File watcher started")
        return True

    def stop(self) -> bool:
        """Stop the background thread; False if it was not running."""
        if self._thread is None:
            return False
        self._stop_event.set()
        self._thread.join()
        self._thread = None
        self._notify("File Watcher", "Stopped monitoring project files", _STOPPED_COLOR)
        log.info("File watcher stopped")
        return True

    def consume_changes(self) -> bool:
        """True once after the background thread has seen changes."""
        if self._changed.is_set():
            self._changed.clear()
            return True
        return False

    def __enter__(self) -> FileWatcher:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()