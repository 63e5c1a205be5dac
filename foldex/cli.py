"""CLI interface for Foldex - manage settings and regenerate indices from the terminal."""

import argparse
import logging
import sys
from dataclasses import fields

from foldex.app import create_generator, setup_logging
from foldex.config import get_settings
from foldex.notify import Colors
from foldex.storage import IndexSettings, SettingsStorage

TRUE_VALUES = {"true", "yes", "1", "on"}
FALSE_VALUES = {"false", "no", "0", "off"}

SETTING_DESCRIPTIONS = {
    "root_index_name": "Name to use for index at the root of vault",
    "root_template": "Template file to use for the root of vault index",
    "index_template": "Path to template for index file",
    "exclude_directories": "Comma separated list of directories to exclude",
    "exclude_subfolder_links": "Also drop links to indices of excluded subfolders",
}


def parse_assignment(assignment: str) -> tuple[str, str | bool]:
    """Parse a KEY=VALUE pair into a settings field and typed value.

    Raises:
        ValueError: unknown key, missing '=' or an invalid boolean.
    """
    key, sep, raw = assignment.partition("=")
    key = key.strip()
    if not sep:
        raise ValueError(f"Expected KEY=VALUE, got: {assignment}")

    types = {f.name: f.type for f in fields(IndexSettings)}
    if key not in types:
        raise ValueError(f"Unknown setting: {key}. Valid options: {', '.join(sorted(types))}")

    if types[key] in (bool, "bool"):
        value = raw.strip().lower()
        if value in TRUE_VALUES:
            return key, True
        if value in FALSE_VALUES:
            return key, False
        raise ValueError(f"Invalid boolean for {key}: {raw}")

    return key, raw


def print_settings(settings: IndexSettings) -> None:
    """Print settings with descriptions."""
    print(f"{Colors.BOLD}Foldex settings:{Colors.RESET}")
    for key, value in settings.to_dict().items():
        print(f"  {Colors.CYAN}{key}{Colors.RESET} = {value!r}")
        print(f"    {Colors.DIM}{SETTING_DESCRIPTIONS.get(key, '')}{Colors.RESET}")


def cli(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="foldex-cli",
        description="Manage folder index settings and regenerate indices.",
    )
    parser.add_argument(
        "--show-settings",
        action="store_true",
        help="Print the current index settings and exit",
    )
    parser.add_argument(
        "--set",
        dest="assignments",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Update a setting (repeatable)",
    )
    parser.add_argument(
        "--rebuild",
        action="store_true",
        help="Regenerate the index of every folder",
    )
    parser.add_argument(
        "--folder",
        type=str,
        help="Regenerate the index of a single folder (vault-relative path, '/' for root)",
    )

    args = parser.parse_args(argv)

    updates = {}
    for assignment in args.assignments:
        try:
            key, value = parse_assignment(assignment)
        except ValueError as e:
            parser.error(str(e))
        updates[key] = value

    setup_logging()
    logger = logging.getLogger(__name__)

    # Load settings
    try:
        settings = get_settings()
        logger.info(f"{Colors.DIM}Vault: {settings.vault_path}{Colors.RESET}")
    except Exception as e:
        logger.error(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}")
        logger.error(f"{Colors.RED}Make sure you have a .env file with VAULT_PATH.{Colors.RESET}")
        sys.exit(1)

    if updates:
        storage = SettingsStorage(settings.vault_path)
        storage.update(**updates)
        changes = ", ".join(f"{k}={v}" for k, v in updates.items())
        print(f"{Colors.GREEN}Settings updated: {changes}{Colors.RESET}")

    if args.show_settings:
        print_settings(SettingsStorage(settings.vault_path).get())

    if not (args.rebuild or args.folder):
        if not (updates or args.show_settings):
            parser.print_help()
        return

    generator = create_generator(settings)

    if args.folder:
        folder = generator.store.get_directory(args.folder)
        if folder is None:
            print(f"{Colors.RED}Folder not found: {args.folder}{Colors.RESET}")
            sys.exit(1)
        effects = generator.reconcile(folder)
    else:
        print(f"{Colors.DIM}Regenerating folder indices...{Colors.RESET}")
        effects = generator.rebuild()

    changed = [e for e in effects if e.changes_store]
    print(f"{Colors.GREEN}Done: {len(changed)} index changes.{Colors.RESET}")


if __name__ == "__main__":
    cli()
