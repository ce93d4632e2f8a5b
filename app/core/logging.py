from __future__ import annotations

import logging

from app.core.config import settings

HEALTH_PATH = "/health"


class EndpointFilter(logging.Filter):
    """Filters out log messages for a specific endpoint.

    Used to keep orchestrator health probes out of the uvicorn access log.
    """

    def __init__(self, path: str, name: str = "") -> None:
        super().__init__(name)
        self._path = path

    def filter(self, record: logging.LogRecord) -> bool:
        return record.getMessage().find(self._path) == -1


# Centralized app logging configuration (format + level).
def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    access_logger = logging.getLogger("uvicorn.access")
    existing = [f for f in access_logger.filters if isinstance(f, EndpointFilter)]
    if settings.filter_health_access_logs and not existing:
        access_logger.addFilter(EndpointFilter(HEALTH_PATH))
    elif not settings.filter_health_access_logs:
        for endpoint_filter in existing:
            access_logger.removeFilter(endpoint_filter)
