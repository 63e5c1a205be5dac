"""Vault-relative path helpers."""

import re

ROOT_PATH = "/"


def normalize_path(path: str) -> str:
    """Normalize a vault path the way Obsidian does.

    Backslashes become slashes, repeated slashes collapse, and leading or
    trailing slashes are stripped. The empty path is the vault root.
    """
    path = path.replace("\\", "/")
    path = re.sub(r"/+", "/", path)
    path = path.strip("/")
    return path or ROOT_PATH


def parent_path(path: str) -> str:
    """Path of the directory containing `path` (root for top-level entries)."""
    path = normalize_path(path)
    if path == ROOT_PATH or "/" not in path:
        return ROOT_PATH
    return path.rsplit("/", 1)[0]


def folder_path_from_string(path: str) -> str:
    """Strip everything from the last separator onward.

    Used for the pre-rename location of a moved entry; a path without any
    separator yields the empty string (the vault root).
    """
    index = path.rfind("/")
    if index < 0:
        return ""
    return path[:index]


def join(*parts: str) -> str:
    return normalize_path("/".join(parts))
