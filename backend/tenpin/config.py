import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _canon_log_level(val):
    """
    Normalize a log level name to one ``logging`` understands:
      - defaults to 'WARNING' when unset/empty
      - case and surrounding whitespace are ignored
      - unknown names fall back to the default
    """
    val = (val or DEFAULT_LOG_LEVEL).strip().upper()
    if val not in _LEVELS:
        logger.warning(
            "TENPIN_LOG_LEVEL %r is not a valid level; defaulting to %s",
            val,
            DEFAULT_LOG_LEVEL,
        )
        return DEFAULT_LOG_LEVEL
    return val


LOG_LEVEL = _canon_log_level(os.getenv("TENPIN_LOG_LEVEL"))


def configure_logging(level: str | None = None) -> None:
    """Route ``tenpin`` log records to stderr at ``level`` (or ``LOG_LEVEL``)."""

    resolved = _canon_log_level(level) if level else LOG_LEVEL
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("tenpin").setLevel(resolved)
