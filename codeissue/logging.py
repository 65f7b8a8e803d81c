"""Loggers of the codeissue package.

Modules log under the ``codeissue`` namespace via get_logger: truncated
messages and field changes at DEBUG. Applications embedding the package
can hand their LoggingConfig (logging.level / logging.format in config.yaml,
or LOGGING_LEVEL / LOGGING_FORMAT) to setup_logging.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codeissue.config import LoggingConfig

NAMESPACE = "codeissue"
FALLBACK_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, placed under the codeissue namespace if needed."""
    if name != NAMESPACE and not name.startswith(f"{NAMESPACE}."):
        name = f"{NAMESPACE}.{name}"
    return logging.getLogger(name)


def setup_logging(config: "LoggingConfig") -> None:
    """Configure the root logger; unknown level names fall back to INFO."""
    level = logging.getLevelName(config.level.strip().upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=config.format or FALLBACK_FORMAT, force=True)
    get_logger(NAMESPACE).debug("Logging configured at %s", logging.getLevelName(level))
