"""Index generator - routes vault events to folder reconciliation."""

import logging

from foldex.events import VaultEvent, route
from foldex.indexer import Effect, MissingTemplateError, Reconciler, SkipReason
from foldex.notify import FINISHED_MESSAGE, MISSING_TEMPLATE_MESSAGE, Notifier
from foldex.storage import SettingsStorage
from foldex.vault import Directory, VaultStore

logger = logging.getLogger(__name__)


class IndexGenerator:
    """Keeps folder index documents in sync with vault changes."""

    def __init__(
        self,
        store: VaultStore,
        settings_storage: SettingsStorage,
        notifier: Notifier | None = None,
    ) -> None:
        self.store = store
        self.settings_storage = settings_storage
        self.notifier = notifier or Notifier()
        self.reconciler = Reconciler(store)

    def handle(self, event: VaultEvent) -> list[Effect]:
        """Reconcile every folder affected by an event, one after another."""
        logger.debug(f"Event: {event}")
        effects = []
        for target in route(self.store, event):
            effects.extend(self.reconcile(target.folder, target.changed_name))
        return effects

    def reconcile(self, folder: Directory, changed_name: str = "") -> list[Effect]:
        """Reconcile one folder and return the effects produced.

        When the changed document is the folder's own index, the parent
        folder is reconciled instead since its index links to this one.
        """
        settings = self.settings_storage.get()

        try:
            effect = self.reconciler.plan(folder, settings, changed_name)
        except MissingTemplateError as e:
            logger.warning(f"{e} (folder: {folder.path})")
            self.notifier.notice(MISSING_TEMPLATE_MESSAGE)
            return []

        self.reconciler.apply(effect)
        effects = [effect]

        if effect.changes_store:
            self.notifier.notice(FINISHED_MESSAGE)
        elif effect.reason == SkipReason.INDEX_CHANGED and folder.parent_path is not None:
            parent = self.store.get_directory(folder.parent_path) or self.store.root()
            effects.extend(self.reconcile(parent))

        return effects

    def rebuild(self) -> list[Effect]:
        """Reconcile every folder in the vault, deepest first."""
        folders = sorted(
            self.store.directories(),
            key=lambda d: (0 if d.is_root() else d.path.count("/") + 1, d.path),
            reverse=True,
        )
        logger.info(f"Rebuilding indices for {len(folders)} folders...")

        effects = []
        for folder in folders:
            effects.extend(self.reconcile(folder))
        return effects
