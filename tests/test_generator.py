"""Tests for the index generator."""

from pathlib import Path

from foldex.events import Created, Deleted, Renamed
from foldex.generator import IndexGenerator
from foldex.indexer import EffectKind, SkipReason
from foldex.notify import FINISHED_MESSAGE, MISSING_TEMPLATE_MESSAGE, Notifier
from foldex.storage import SettingsStorage


class TestIndexGenerator:
    """Tests for IndexGenerator."""

    def test_note_created(self, generator: IndexGenerator, tmp_vault: Path, notices: list[str]):
        effects = generator.handle(Created("Notes/ideas.md"))

        assert [e.kind for e in effects] == [EffectKind.CREATE]
        assert (tmp_vault / "Notes" / "Notes.md").read_text() == "* [[ideas]]\n"
        assert notices == [FINISHED_MESSAGE]

    def test_index_created_updates_parent(self, generator: IndexGenerator, tmp_vault: Path):
        generator.handle(Created("Notes/ideas.md"))

        # The watcher reports the index written above
        effects = generator.handle(Created("Notes/Notes.md"))

        assert effects[0].reason == SkipReason.INDEX_CHANGED
        assert effects[1].kind == EffectKind.CREATE
        assert effects[1].path == "vault.md"
        assert (tmp_vault / "vault.md").read_text() == "* [[Notes]]\n"

    def test_root_index_change_stops_at_root(self, generator: IndexGenerator, tmp_vault: Path):
        (tmp_vault / "vault.md").write_text("")

        effects = generator.handle(Created("vault.md"))

        assert len(effects) == 1
        assert effects[0].reason == SkipReason.INDEX_CHANGED

    def test_last_note_deleted_removes_index(
        self, generator: IndexGenerator, tmp_vault: Path, notices: list[str]
    ):
        generator.handle(Created("Notes/ideas.md"))
        (tmp_vault / "Notes" / "ideas.md").unlink()

        effects = generator.handle(Deleted("Notes/ideas.md"))

        assert effects[0].kind == EffectKind.DELETE
        assert not (tmp_vault / "Notes" / "Notes.md").exists()
        assert notices == [FINISHED_MESSAGE, FINISHED_MESSAGE]

    def test_rename_updates_both_folders(self, generator: IndexGenerator, tmp_vault: Path):
        generator.handle(Created("Notes/ideas.md"))
        (tmp_vault / "Notes" / "ideas.md").rename(tmp_vault / "Projects" / "ideas.md")

        effects = generator.handle(Renamed("Projects/ideas.md", "Notes/ideas.md"))

        assert [(e.kind, e.path) for e in effects] == [
            (EffectKind.CREATE, "Projects/Projects.md"),
            (EffectKind.DELETE, "Notes/Notes.md"),
        ]

    def test_missing_template_notice(
        self,
        generator: IndexGenerator,
        settings_storage: SettingsStorage,
        tmp_vault: Path,
        notices: list[str],
    ):
        settings_storage.update(index_template="Templates/Missing")

        effects = generator.handle(Created("Notes/ideas.md"))

        assert effects == []
        assert notices == [MISSING_TEMPLATE_MESSAGE]
        assert not (tmp_vault / "Notes" / "Notes.md").exists()

    def test_settings_change_applies_to_next_event(
        self, generator: IndexGenerator, settings_storage: SettingsStorage, tmp_vault: Path
    ):
        (tmp_vault / "Index.md").write_text("# {{title}}\n{{content}}")
        settings_storage.update(index_template="Index")

        generator.handle(Created("Notes/ideas.md"))

        assert (tmp_vault / "Notes" / "Notes.md").read_text() == "# Notes\n* [[ideas]]"

    def test_settings_written_by_cli_apply_to_next_event(
        self, generator: IndexGenerator, tmp_vault: Path
    ):
        generator.handle(Created("Notes/ideas.md"))

        # Separate storage, as foldex-cli uses in its own process
        SettingsStorage(tmp_vault).update(exclude_directories="Notes")
        (tmp_vault / "Notes" / "more.md").write_text("")
        effects = generator.handle(Created("Notes/more.md"))

        assert effects[0].reason == SkipReason.EXCLUDED
        assert (tmp_vault / "Notes" / "Notes.md").read_text() == "* [[ideas]]\n"

    def test_template_fixed_from_cli_recovers(
        self, generator: IndexGenerator, tmp_vault: Path, notices: list[str]
    ):
        SettingsStorage(tmp_vault).update(index_template="Missing")
        assert generator.handle(Created("Notes/ideas.md")) == []

        (tmp_vault / "Index.md").write_text("# {{title}}\n{{content}}")
        SettingsStorage(tmp_vault).update(index_template="Index")
        generator.handle(Created("Notes/ideas.md"))

        assert notices == [MISSING_TEMPLATE_MESSAGE, FINISHED_MESSAGE]
        assert (tmp_vault / "Notes" / "Notes.md").read_text() == "# Notes\n* [[ideas]]"

    def test_excluded_folder_no_notice(
        self,
        generator: IndexGenerator,
        settings_storage: SettingsStorage,
        notices: list[str],
    ):
        settings_storage.update(exclude_directories="Notes")

        effects = generator.handle(Created("Notes/ideas.md"))

        assert effects[0].reason == SkipReason.EXCLUDED
        assert notices == []

    def test_rebuild(self, generator: IndexGenerator, tmp_vault: Path):
        (tmp_vault / "Notes" / "Sub").mkdir()
        (tmp_vault / "Notes" / "Sub" / "deep.md").write_text("")

        effects = generator.rebuild()

        changed = [e.path for e in effects if e.kind == EffectKind.CREATE]
        assert changed == ["Notes/Sub/Sub.md", "Notes/Notes.md", "vault.md"]
        assert (tmp_vault / "Notes" / "Notes.md").read_text() == "* [[Sub]]\n* [[ideas]]\n"
        assert (tmp_vault / "vault.md").read_text() == "* [[Notes]]\n"
        assert not (tmp_vault / "Projects" / "Projects.md").exists()

    def test_rebuild_is_idempotent(self, generator: IndexGenerator, tmp_vault: Path):
        generator.rebuild()
        first = (tmp_vault / "Notes" / "Notes.md").read_text()

        effects = generator.rebuild()

        assert (tmp_vault / "Notes" / "Notes.md").read_text() == first
        assert {e.kind for e in effects if e.changes_store} == {EffectKind.UPDATE}


class TestNotifier:
    """Tests for Notifier."""

    def test_callback_receives_message(self):
        received = []
        Notifier(received.append).notice("hello")
        assert received == ["hello"]

    def test_callback_errors_swallowed(self):
        def broken(message: str) -> None:
            raise RuntimeError("boom")

        Notifier(broken).notice("hello")

    def test_without_callback(self):
        Notifier().notice("hello")
