import logging

from app.config import settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    root = logging.getLogger("app")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    root.setLevel(settings.LOG_LEVEL.upper())
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger under the ``app`` hierarchy.

    Parameters:
        name (str): Usually ``__name__`` of the calling module.

    Returns:
        logging.Logger: The configured logger.
    """
    _configure_root()
    return logging.getLogger(name)
