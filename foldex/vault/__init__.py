"""Filesystem-backed vault: nodes, paths and the store API."""

from .nodes import Directory, Document, Node
from .paths import folder_path_from_string, normalize_path, parent_path
from .store import VaultStore

__all__ = [
    "Directory",
    "Document",
    "Node",
    "VaultStore",
    "folder_path_from_string",
    "normalize_path",
    "parent_path",
]
