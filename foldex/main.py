"""Main entry point for Foldex - watch a vault and keep folder indices current."""

import argparse
import logging
import sys

from foldex.app import create_generator, setup_logging
from foldex.config import get_settings
from foldex.notify import Colors
from foldex.watcher import VaultWatcher


def main() -> None:
    """Run the Foldex watcher."""
    parser = argparse.ArgumentParser(
        prog="foldex",
        description="Watch an Obsidian vault and maintain an index note in every folder.",
    )
    parser.add_argument(
        "--rebuild",
        action="store_true",
        help="Regenerate every folder index before watching",
    )
    args = parser.parse_args()

    setup_logging()
    logger = logging.getLogger(__name__)

    try:
        settings = get_settings()
        logger.info(f"{Colors.DIM}Vault: {settings.vault_path}{Colors.RESET}")
    except Exception as e:
        logger.error(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}")
        logger.error(f"{Colors.RED}Make sure you have a .env file with VAULT_PATH.{Colors.RESET}")
        sys.exit(1)

    generator = create_generator(settings)
    if args.rebuild:
        generator.rebuild()

    logger.info(f"{Colors.GREEN}{Colors.BOLD}Foldex started ✓{Colors.RESET}")
    VaultWatcher(settings.vault_path, generator.handle).run()


if __name__ == "__main__":
    main()
