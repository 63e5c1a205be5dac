"""Vault change events and routing to the folders they affect."""

from dataclasses import dataclass

from foldex.vault import Directory, Document, VaultStore, folder_path_from_string, parent_path


@dataclass(frozen=True)
class Created:
    path: str
    is_directory: bool = False


@dataclass(frozen=True)
class Deleted:
    path: str
    is_directory: bool = False


@dataclass(frozen=True)
class Renamed:
    """An entry moved from `old_path` to `path`."""

    path: str
    old_path: str
    is_directory: bool = False


VaultEvent = Created | Deleted | Renamed


@dataclass(frozen=True)
class ReconcileTarget:
    """A folder to reconcile and the name of the document that triggered it."""

    folder: Directory
    changed_name: str = ""


def _directory_or_root(store: VaultStore, path: str) -> Directory:
    return store.get_directory(path) or store.root()


def _entry_target(store: VaultStore, path: str, is_directory: bool) -> ReconcileTarget | None:
    """Target for the folder containing a changed entry.

    Only markdown documents count; any directory change does.
    """
    folder = _directory_or_root(store, parent_path(path))
    if is_directory:
        return ReconcileTarget(folder)

    document = Document(path)
    if document.extension != "md":
        return None
    return ReconcileTarget(folder, document.name)


def route(store: VaultStore, event: VaultEvent) -> list[ReconcileTarget]:
    """Map an event to the folders needing reconciliation, in order.

    A rename yields the new location first and the old location second. The
    old folder is derived from the old path string and falls back to the
    vault root when it no longer resolves.
    """
    targets: list[ReconcileTarget] = []

    target = _entry_target(store, event.path, event.is_directory)
    if target is not None:
        targets.append(target)

    if isinstance(event, Renamed):
        old_folder = _directory_or_root(store, folder_path_from_string(event.old_path))
        targets.append(ReconcileTarget(old_folder))

    return targets
