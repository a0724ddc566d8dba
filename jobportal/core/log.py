"""
Logging setup for the JobPortal service.

Every module gets its logger from get_logger(__name__). The first call
installs one stdout handler on the root logger, with the level taken from
Settings.log_level (LOG_LEVEL in the environment). Under uvicorn, whose own
handlers are already on its loggers, records from jobportal.* go through the
same root handler. Chatty client libraries (pymongo, openai, httpx) are held
at WARNING so request logs stay readable at INFO.
"""

import logging
import sys

from jobportal.core.config import get_settings

_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_QUIET_LOGGERS = ("pymongo", "openai", "httpx", "httpcore")
_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a named logger, configuring the root handler on first use."""
    global _configured
    if not _configured:
        _configure(get_settings().log_level)
        _configured = True
    return logging.getLogger(name)


def _configure(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    # pytest's caplog or an embedding app may already own the root handlers
    if root.handlers:
        return

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FMT))
    root.addHandler(console)
