"""One-time process initialization shared by all import calls."""
import threading
from typing import Optional

import structlog

from excel_toolkit.config import ImporterSettings, configure_logging, get_settings
from excel_toolkit.encodings import register_codepage_aliases

logger = structlog.get_logger(__name__)

_init_lock = threading.Lock()
_initialized = False


def initialize(settings: Optional[ImporterSettings] = None) -> bool:
    """Register codepage aliases and configure logging, at most once per process.

    Safe to call from every import call and from several threads at once;
    calls after the first are no-ops.

    Args:
        settings: Settings used for logging configuration (defaults to get_settings())

    Returns:
        True if this call performed the initialization, False if it was already done
    """
    global _initialized
    if _initialized:
        return False

    with _init_lock:
        if _initialized:
            return False

        settings = settings or get_settings()
        if settings.configure_logging:
            configure_logging(settings)
        register_codepage_aliases()
        _initialized = True

    logger.info("excel_toolkit_initialized", environment=settings.environment)
    return True


def is_initialized() -> bool:
    """Report whether initialize() has already run in this process."""
    return _initialized
