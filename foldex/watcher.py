"""Watchdog binding: turns filesystem notifications into vault events."""

import logging
import time
from collections.abc import Callable
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from foldex.events import Created, Deleted, Renamed, VaultEvent
from foldex.vault import normalize_path

logger = logging.getLogger(__name__)


class VaultEventHandler(FileSystemEventHandler):
    """Forwards created, deleted and moved entries under the vault root.

    Modified events are ignored, as is anything inside a hidden entry such as
    `.obsidian` or `.foldex`.
    """

    def __init__(self, vault_path: Path, callback: Callable[[VaultEvent], object]) -> None:
        super().__init__()
        self.vault_path = vault_path.resolve()
        self.callback = callback

    def _relative(self, src_path: str | bytes) -> str | None:
        """Vault-relative path, or None when outside the vault or hidden."""
        if isinstance(src_path, bytes):
            src_path = src_path.decode()
        try:
            rel = Path(src_path).resolve().relative_to(self.vault_path)
        except ValueError:
            return None
        if not rel.parts or any(part.startswith(".") for part in rel.parts):
            return None
        return normalize_path(rel.as_posix())

    def _dispatch(self, event: VaultEvent) -> None:
        try:
            self.callback(event)
        except Exception:
            logger.exception(f"Failed to handle {event}")

    def on_created(self, event: FileSystemEvent) -> None:
        path = self._relative(event.src_path)
        if path is not None:
            self._dispatch(Created(path, is_directory=event.is_directory))

    def on_deleted(self, event: FileSystemEvent) -> None:
        path = self._relative(event.src_path)
        if path is not None:
            self._dispatch(Deleted(path, is_directory=event.is_directory))

    def on_moved(self, event: FileSystemEvent) -> None:
        old_path = self._relative(event.src_path)
        new_path = self._relative(event.dest_path)

        if old_path is not None and new_path is not None:
            self._dispatch(Renamed(new_path, old_path, is_directory=event.is_directory))
        elif new_path is not None:
            self._dispatch(Created(new_path, is_directory=event.is_directory))
        elif old_path is not None:
            self._dispatch(Deleted(old_path, is_directory=event.is_directory))


class VaultWatcher:
    """Runs a recursive watchdog observer over the vault."""

    def __init__(self, vault_path: Path, callback: Callable[[VaultEvent], object]) -> None:
        self.vault_path = vault_path
        self.handler = VaultEventHandler(vault_path, callback)

    def run(self) -> None:
        """Watch until interrupted."""
        observer = Observer()
        observer.schedule(self.handler, str(self.vault_path), recursive=True)
        observer.start()
        logger.info(f"Watching {self.vault_path}")
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            logger.info("Stopping watcher...")
        finally:
            observer.stop()
            observer.join()
