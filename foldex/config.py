"""Process configuration for the watcher and CLI, read with pydantic-settings.

Only host-level concerns live here (where the vault is, how links are
written). Index behaviour is configured per vault in `.foldex/settings.json`,
see `foldex.storage.settings`.
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Foldex process settings, from the environment or a local `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Vault root to watch and index
    vault_path: Path
    # Root index title when no root index name is set; empty means the folder name
    vault_name: str = ""

    # [[wikilinks]] when true, [label](path.md) links when false
    use_wikilinks: bool = True

    @field_validator("vault_path")
    @classmethod
    def validate_vault_path(cls, v: Path) -> Path:
        """The vault must be an existing directory; stored as an absolute path."""
        if not v.exists():
            raise ValueError(f"Vault path does not exist: {v}")
        if not v.is_dir():
            raise ValueError(f"Vault path is not a directory: {v}")
        return v.resolve()


def get_settings() -> Settings:
    """Read a fresh Settings from the environment."""
    return Settings()
