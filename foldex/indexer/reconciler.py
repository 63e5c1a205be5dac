"""Index reconciliation - decides how a folder's index document should change."""

import logging
from dataclasses import dataclass
from enum import Enum

from foldex.storage import IndexSettings
from foldex.vault import Directory, VaultStore, normalize_path

from .links import collect_links
from .naming import effective_name, index_file_name, is_excluded
from .template import load_template, render

logger = logging.getLogger(__name__)


class EffectKind(str, Enum):
    """What reconciliation does to a folder's index."""

    NOOP = "noop"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class SkipReason(str, Enum):
    """Why reconciliation left a folder untouched."""

    EXCLUDED = "excluded"
    INDEX_CHANGED = "index_changed"  # the changed document is the index itself
    NO_LINKS = "no_links"


@dataclass(frozen=True)
class Effect:
    """Outcome of reconciling one folder."""

    kind: EffectKind
    path: str = ""
    content: str = ""
    reason: SkipReason | None = None

    @classmethod
    def noop(cls, reason: SkipReason) -> "Effect":
        return cls(kind=EffectKind.NOOP, reason=reason)

    @property
    def changes_store(self) -> bool:
        return self.kind != EffectKind.NOOP


class Reconciler:
    """Computes and applies index effects against a vault store."""

    def __init__(self, store: VaultStore) -> None:
        self.store = store

    def plan(self, folder: Directory, settings: IndexSettings, changed_name: str = "") -> Effect:
        """Decide what should happen to the index of `folder`.

        Args:
            folder: Folder whose index is reconciled.
            settings: Settings snapshot used for this run only.
            changed_name: Name of the document whose change triggered the run,
                or '' when a folder changed.

        Raises:
            MissingTemplateError: a configured template cannot be resolved.
        """
        if is_excluded(folder.path, settings.excluded_paths):
            logger.debug(f"Skipping excluded folder {folder.path}")
            return Effect.noop(SkipReason.EXCLUDED)

        name = effective_name(folder, settings, self.store.name)
        index_name = index_file_name(name)

        if changed_name == index_name:
            return Effect.noop(SkipReason.INDEX_CHANGED)

        template = load_template(self.store, settings, folder.is_root())

        links = collect_links(self.store, folder, name, settings)
        links.sort()
        content = render(template, name, "\n".join(links))

        index_path = normalize_path(f"{folder.path}/{index_name}")
        existing = self.store.get_document(index_path)

        if existing is None:
            if links:
                return Effect(kind=EffectKind.CREATE, path=index_path, content=content)
            return Effect.noop(SkipReason.NO_LINKS)

        if not links:
            return Effect(kind=EffectKind.DELETE, path=existing.path)

        # No dirty check: an existing index is always rewritten.
        return Effect(kind=EffectKind.UPDATE, path=existing.path, content=content)

    def apply(self, effect: Effect) -> None:
        """Carry out an effect. Store errors propagate to the caller."""
        if effect.kind == EffectKind.CREATE:
            self.store.create(effect.path, effect.content)
        elif effect.kind == EffectKind.UPDATE:
            document = self.store.get_document(effect.path)
            if document is None:
                raise FileNotFoundError(f"Index disappeared before update: {effect.path}")
            self.store.modify(document, effect.content)
        elif effect.kind == EffectKind.DELETE:
            document = self.store.get_document(effect.path)
            if document is None:
                raise FileNotFoundError(f"Index disappeared before delete: {effect.path}")
            self.store.delete(document)
        else:
            return

        logger.info(f"{effect.kind.value.capitalize()}d index {effect.path}")

    def reconcile(self, folder: Directory, settings: IndexSettings, changed_name: str = "") -> Effect:
        """Plan and apply in one step."""
        effect = self.plan(folder, settings, changed_name)
        self.apply(effect)
        return effect
