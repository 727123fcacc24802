"""
Application-wide logger
"""
import logging
import sys

from app.core.config import settings
from app.middleware.correlation import CorrelationIdFilter

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [%(correlation_id)s] %(message)s"


def setup_logging(level: str = settings.LOG_LEVEL) -> logging.Logger:
    root = logging.getLogger()
    if not any(isinstance(f, CorrelationIdFilter) for h in root.handlers for f in h.filters):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(CorrelationIdFilter())
        root.addHandler(handler)
    root.setLevel(level.upper())
    return logging.getLogger("case_organizer")


logger = setup_logging()
