"""Naming rules shared by the reconciler, link collector and event router."""

from foldex.storage import IndexSettings
from foldex.vault import Directory, Document

MARKDOWN_MARKER = ".md"


def effective_name(folder: Directory, settings: IndexSettings, vault_name: str) -> str:
    """Name used for a folder's index.

    The root uses the configured root index name when set. Any other folder
    uses its own name, and a nameless root falls back to the vault name.
    """
    if folder.is_root() and settings.root_index_name:
        return settings.root_index_name
    return folder.name or vault_name


def index_file_name(name: str) -> str:
    return f"{name}{MARKDOWN_MARKER}"


def is_index_document(document: Document, folder: Directory, name: str) -> bool:
    """Whether `document` is the index of `folder` under effective name `name`."""
    return document.name == index_file_name(name) and document.parent_path == folder.path


def is_markdown_name(name: str) -> bool:
    # Substring match: "a.md.txt" qualifies as well.
    return MARKDOWN_MARKER in name


def display_name(file_name: str) -> str:
    """Link label for a file: its name with the first '.md' removed."""
    return file_name.replace(MARKDOWN_MARKER, "", 1)


def is_excluded(path: str, excluded_paths: list[str]) -> bool:
    return any(exclude in path for exclude in excluded_paths)
