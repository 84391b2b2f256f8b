"""
Logging infrastructure.

One stream handler on the root logger; modules use
``logging.getLogger(__name__)`` and inherit it.
"""
import logging


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_HANDLER_NAME = "cookie_orders.console"


def configure_logging(level: str = "INFO") -> None:
    """
    Install the console handler on the root logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        level: Level name (DEBUG, INFO, ...)
    """
    root = logging.getLogger()
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper())
