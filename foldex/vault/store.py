"""Filesystem-backed vault store."""

import logging
from collections import Counter
from collections.abc import Iterator
from pathlib import Path
from urllib.parse import quote

from .nodes import Directory, Document, Node
from .paths import ROOT_PATH, normalize_path

logger = logging.getLogger(__name__)


class VaultStore:
    """Read and write documents of an Obsidian-style vault on disk.

    Nodes are plain path values; every call goes back to the filesystem, so
    the store never hands out stale state.
    """

    def __init__(self, vault_path: Path, name: str = "", use_wikilinks: bool = True) -> None:
        self.vault_path = vault_path.resolve()
        self._name = name
        self.use_wikilinks = use_wikilinks

    @property
    def name(self) -> str:
        """Display name of the vault."""
        return self._name or self.vault_path.name

    def root(self) -> Directory:
        return Directory(ROOT_PATH)

    def _validate_path(self, path: str) -> Path:
        """Validate that path is within vault and return resolved path."""
        path = normalize_path(path)
        if path == ROOT_PATH:
            return self.vault_path

        full_path = (self.vault_path / path).resolve()

        # Security check: ensure path is within vault
        try:
            full_path.relative_to(self.vault_path)
        except ValueError as e:
            raise ValueError(f"Path escapes vault: {path}") from e

        return full_path

    def _relative(self, full_path: Path) -> str:
        return normalize_path(full_path.relative_to(self.vault_path).as_posix())

    def get_abstract(self, path: str) -> Node | None:
        """Resolve a path to a document or directory, or None."""
        path = normalize_path(path)
        full_path = self._validate_path(path)
        if any(part.startswith(".") for part in Path(path).parts):
            return None
        if full_path.is_dir():
            return Directory(path)
        if full_path.is_file():
            return Document(path)
        return None

    def get_document(self, path: str) -> Document | None:
        node = self.get_abstract(path)
        return node if isinstance(node, Document) else None

    def get_directory(self, path: str) -> Directory | None:
        node = self.get_abstract(path)
        return node if isinstance(node, Directory) else None

    def children(self, directory: Directory) -> list[Node]:
        """Direct children of a directory, skipping hidden entries."""
        folder_path = self._validate_path(directory.path)
        if not folder_path.is_dir():
            return []

        children: list[Node] = []
        for item in folder_path.iterdir():
            if item.name.startswith("."):
                continue
            rel_path = self._relative(item)
            if item.is_dir():
                children.append(Directory(rel_path))
            elif item.is_file():
                children.append(Document(rel_path))
        return children

    def directories(self) -> Iterator[Directory]:
        """All visible directories, root included."""
        yield self.root()
        for item in self.vault_path.rglob("*"):
            if not item.is_dir():
                continue
            rel = item.relative_to(self.vault_path)
            if any(part.startswith(".") for part in rel.parts):
                continue
            yield Directory(self._relative(item))

    def markdown_documents(self) -> Iterator[Document]:
        """All visible markdown documents in the vault."""
        for md_file in self.vault_path.rglob("*.md"):
            if not md_file.is_file():
                continue
            rel = md_file.relative_to(self.vault_path)
            if any(part.startswith(".") for part in rel.parts):
                continue
            yield Document(self._relative(md_file))

    def read(self, document: Document) -> str:
        return self._validate_path(document.path).read_text(encoding="utf-8")

    def create(self, path: str, content: str) -> Document:
        """Create a new document. Fails if one already exists at the path."""
        path = normalize_path(path)
        full_path = self._validate_path(path)
        if full_path.exists():
            raise FileExistsError(f"Document already exists: {path}")

        # Create parent directories if needed
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")
        logger.debug(f"Created {path}")
        return Document(path)

    def modify(self, document: Document, content: str) -> None:
        """Replace the content of an existing document."""
        full_path = self._validate_path(document.path)
        if not full_path.is_file():
            raise FileNotFoundError(f"Document not found: {document.path}")
        full_path.write_text(content, encoding="utf-8")
        logger.debug(f"Modified {document.path}")

    def delete(self, document: Document) -> None:
        full_path = self._validate_path(document.path)
        full_path.unlink()
        logger.debug(f"Deleted {document.path}")

    def resolve_link(self, linkpath: str) -> Document | None:
        """Resolve a link target to a document.

        Tries the exact path, then the path with `.md` appended, then any
        markdown document whose path ends with the link path. Among several
        matches the shallowest (then alphabetically first) wins.
        """
        target = normalize_path(linkpath)
        if target == ROOT_PATH:
            return None

        for candidate in (target, f"{target}.md"):
            document = self.get_document(candidate)
            if document is not None:
                return document

        suffixes = (f"/{target}", f"/{target}.md")
        matches = [d for d in self.markdown_documents() if d.path.endswith(suffixes)]
        if not matches:
            return None
        return min(matches, key=lambda d: (d.path.count("/"), d.path))

    def markdown_name_counts(self) -> Counter:
        """How many markdown documents share each file name, in one vault walk."""
        return Counter(d.name for d in self.markdown_documents())

    def link_text(self, document: Document, names: Counter | None = None) -> str:
        """Shortest unambiguous wikilink text for a document.

        `names` is a precomputed `markdown_name_counts()`; callers linking many
        documents pass it in so the vault is walked once.
        """
        path = document.path
        if document.extension == "md":
            path = path[: -len(".md")]

        if names is None:
            names = self.markdown_name_counts()
        if names[document.name] <= 1:
            return path.rsplit("/", 1)[-1]
        return path

    def generate_markdown_link(
        self, document: Document, alias: str = "", names: Counter | None = None
    ) -> str:
        """Build a link to a document with an optional display label."""
        if not self.use_wikilinks:
            label = alias or document.basename
            return f"[{label}]({quote(document.path)})"

        text = self.link_text(document, names)
        if not alias or alias == text:
            return f"[[{text}]]"
        return f"[[{text}|{alias}]]"
