"""User-facing notices."""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

FINISHED_MESSAGE = "Finished updating indices"
MISSING_TEMPLATE_MESSAGE = "Missing template file to generate index"


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    CYAN = "\033[36m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"


class Notifier:
    """Shows transient notices. Never raises."""

    def __init__(self, callback: Callable[[str], None] | None = None) -> None:
        self._callback = callback

    def notice(self, message: str) -> None:
        logger.info(f"{Colors.CYAN}{message}{Colors.RESET}")
        if self._callback is None:
            return
        try:
            self._callback(message)
        except Exception as e:
            logger.warning(f"Notice callback failed: {e}")
