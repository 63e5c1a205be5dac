"""Shared wiring for the entry points."""

import logging

from foldex.config import Settings
from foldex.generator import IndexGenerator
from foldex.notify import Notifier
from foldex.storage import SettingsStorage
from foldex.vault import VaultStore


def setup_logging() -> None:
    """Configure logging."""
    logging.basicConfig(
        format="%(message)s",
        level=logging.INFO,
    )
    # Reduce noise from libraries
    logging.getLogger("watchdog").setLevel(logging.WARNING)


def create_generator(settings: Settings, notifier: Notifier | None = None) -> IndexGenerator:
    """Build an index generator for the configured vault."""
    store = VaultStore(
        settings.vault_path,
        name=settings.vault_name,
        use_wikilinks=settings.use_wikilinks,
    )
    return IndexGenerator(store, SettingsStorage(settings.vault_path), notifier)
