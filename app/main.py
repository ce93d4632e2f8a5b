from __future__ import annotations

import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import cast

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import ExceptionHandler

from app.api.router import router as api_router
from app.core.errors import (
    InvalidSettingsError,
    http_exception_handler,
    unhandled_exception_handler,
)

# Import settings - this may raise InvalidSettingsError
try:
    from app.core.config import settings
except InvalidSettingsError as e:
    print("ERROR: Invalid environment variable values:", file=sys.stderr)
    for field, message in e.invalid_fields:
        print(f"  - {field}: {message}", file=sys.stderr)
    print(
        "\nPlease update these in your environment or .env file",
        file=sys.stderr,
    )
    sys.exit(1)

from app.core.logging import configure_logging  # noqa: E402
from app.core.server import BindFailureError, HealthServer  # noqa: E402

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging()

    try:
        api_version = version("health-api")
    except PackageNotFoundError:
        api_version = "0.1.0"  # Fallback if package not installed
        logging.warning("health-api package not found, using fallback version 0.1.0")

    is_debug_mode = settings.environment == "local"
    app = FastAPI(
        title=settings.app_name,
        version=api_version,
        debug=is_debug_mode,
    )
    app.add_exception_handler(
        StarletteHTTPException, cast(ExceptionHandler, http_exception_handler)
    )
    app.add_exception_handler(Exception, cast(ExceptionHandler, unhandled_exception_handler))
    app.include_router(api_router)

    return app


app = create_app()


def main() -> None:
    """Bind the fixed listener and serve until the process is stopped."""
    server = HealthServer(app)
    try:
        server.serve()
    except BindFailureError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
