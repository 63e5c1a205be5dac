"""Link collection for a folder's index."""

import logging
from collections import Counter

from foldex.storage import IndexSettings
from foldex.vault import Directory, Document, VaultStore, normalize_path

from .naming import display_name, index_file_name, is_excluded, is_index_document, is_markdown_name

logger = logging.getLogger(__name__)


def format_link(store: VaultStore, document: Document, names: Counter | None = None) -> str:
    """Render one bullet line linking to a document."""
    link = store.generate_markdown_link(document, display_name(document.name), names)
    return f"* {link}"


def collect_links(
    store: VaultStore,
    folder: Directory,
    name: str,
    settings: IndexSettings,
) -> list[str]:
    """Collect unsorted link lines for the direct children of a folder.

    Markdown documents are linked directly. Subfolders are represented by
    their own index document, and contribute nothing when they have none.
    """
    links: list[str] = []
    # One vault walk for the whole folder
    names = store.markdown_name_counts() if store.use_wikilinks else None

    for child in store.children(folder):
        if isinstance(child, Document):
            if is_index_document(child, folder, name):
                continue
            if not is_markdown_name(child.name):
                continue
            links.append(format_link(store, child, names))
            continue

        if settings.exclude_subfolder_links and is_excluded(child.path, settings.excluded_paths):
            logger.debug(f"Skipping excluded subfolder {child.path}")
            continue

        sub_index = store.get_document(
            normalize_path(f"{child.path}/{index_file_name(child.name)}")
        )
        if sub_index is None:
            continue
        links.append(format_link(store, sub_index, names))

    return links
