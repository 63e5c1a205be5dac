"""Vault nodes: documents and directories addressed by vault-relative path."""

from dataclasses import dataclass

from .paths import ROOT_PATH, parent_path


@dataclass(frozen=True)
class Document:
    """A file in the vault."""

    path: str

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    @property
    def basename(self) -> str:
        """File name without its extension."""
        stem, dot, _ = self.name.rpartition(".")
        return stem if dot else self.name

    @property
    def extension(self) -> str:
        _, dot, ext = self.name.rpartition(".")
        return ext if dot else ""

    @property
    def parent_path(self) -> str:
        return parent_path(self.path)


@dataclass(frozen=True)
class Directory:
    """A folder in the vault. The root has path '/' and an empty name."""

    path: str

    @property
    def name(self) -> str:
        if self.is_root():
            return ""
        return self.path.rsplit("/", 1)[-1]

    @property
    def parent_path(self) -> str | None:
        if self.is_root():
            return None
        return parent_path(self.path)

    def is_root(self) -> bool:
        return self.path == ROOT_PATH


Node = Document | Directory
