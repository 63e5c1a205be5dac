"""Shared test fixtures."""

from pathlib import Path

import pytest

from foldex.generator import IndexGenerator
from foldex.notify import Notifier
from foldex.storage import SettingsStorage
from foldex.vault import VaultStore


@pytest.fixture
def tmp_vault(tmp_path: Path) -> Path:
    """Create a temporary vault with an empty folder and one note in another."""
    vault = tmp_path / "vault"
    vault.mkdir()

    # Empty folder
    (vault / "Projects").mkdir()

    # Folder with a single note
    notes = vault / "Notes"
    notes.mkdir()
    (notes / "ideas.md").write_text("Some ideas.")

    # Obsidian config folder, never part of the vault contents
    (vault / ".obsidian").mkdir()
    (vault / ".obsidian" / "app.json").write_text("{}")

    return vault


@pytest.fixture
def store(tmp_vault: Path) -> VaultStore:
    return VaultStore(tmp_vault)


@pytest.fixture
def settings_storage(tmp_vault: Path) -> SettingsStorage:
    return SettingsStorage(tmp_vault)


@pytest.fixture
def notices() -> list[str]:
    """Collects notices shown to the user."""
    return []


@pytest.fixture
def generator(store: VaultStore, settings_storage: SettingsStorage, notices: list[str]) -> IndexGenerator:
    return IndexGenerator(store, settings_storage, Notifier(notices.append))
