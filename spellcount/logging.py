import logging
import os

LOG_ENV = "SPELLCOUNT_LOG"


def get_logger(name: str) -> logging.Logger:
    """Return a module-level logger; ``$SPELLCOUNT_LOG`` sets the root level."""
    level = os.getenv(LOG_ENV, "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(levelname)s:%(name)s:%(message)s",
    )
    return logging.getLogger(name)
