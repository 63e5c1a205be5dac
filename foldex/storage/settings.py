"""Index generator settings storage."""

import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexSettings:
    """User-configurable settings for index generation.

    Instances are immutable snapshots; every reconciliation works on the
    snapshot it was handed.
    """

    root_index_name: str = ""
    exclude_directories: str = ""  # comma-separated substrings
    index_template: str = ""
    root_template: str = ""
    # Skip index links of excluded subfolders while collecting links
    exclude_subfolder_links: bool = False

    @property
    def excluded_paths(self) -> list[str]:
        """Parse exclusion entries as a list of trimmed, non-empty strings."""
        return [p.strip() for p in self.exclude_directories.split(",") if p.strip()]

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "IndexSettings":
        """Build settings from stored JSON.

        Raises:
            ValueError: the data is not an object or a field has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Settings must be a JSON object, got {type(data).__name__}")

        values = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if not isinstance(value, f.type):
                raise ValueError(f"Invalid value for {f.name}: {value!r}")
            values[f.name] = value
        return cls(**values)

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}


class SettingsStorage:
    """Manages index settings stored in .foldex/settings.json.

    The file may be rewritten by another process (foldex-cli), so `get()`
    reloads it whenever its modification stamp changes.
    """

    def __init__(self, vault_path: Path) -> None:
        self.vault_path = vault_path
        self.foldex_dir = vault_path / ".foldex"
        self.settings_file = self.foldex_dir / "settings.json"
        self._settings: IndexSettings | None = None
        self._stamp: tuple[int, int] | None = None

    def get(self) -> IndexSettings:
        """Get current settings, reloading from disk when the file changed."""
        if self._settings is None or self._file_stamp() != self._stamp:
            self._settings = self._load()
            self._stamp = self._file_stamp()
        return self._settings

    def update(self, **kwargs) -> IndexSettings:
        """Update specific settings and save to disk."""
        valid = IndexSettings.field_names()

        # Update only known fields
        updates = {key: value for key, value in kwargs.items() if key in valid}
        settings = replace(self.get(), **updates)

        self._save(settings)
        self._settings = settings
        self._stamp = self._file_stamp()
        return settings

    def _file_stamp(self) -> tuple[int, int] | None:
        """Modification time and size of the settings file, None if missing."""
        try:
            stat = self.settings_file.stat()
        except OSError:
            return None
        return stat.st_mtime_ns, stat.st_size

    def _load(self) -> IndexSettings:
        """Load settings from disk, creating defaults if missing."""
        if not self.settings_file.exists():
            settings = IndexSettings()
            self._save(settings)
            return settings

        try:
            data = json.loads(self.settings_file.read_text(encoding="utf-8"))
            return IndexSettings.from_dict(data)
        except (ValueError, OSError) as e:
            logger.warning(f"Failed to load settings, using defaults: {e}")
            return IndexSettings()

    def _save(self, settings: IndexSettings) -> None:
        """Save settings to disk."""
        try:
            self.foldex_dir.mkdir(parents=True, exist_ok=True)
            self.settings_file.write_text(
                json.dumps(settings.to_dict(), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            logger.error(f"Failed to save settings: {e}")
