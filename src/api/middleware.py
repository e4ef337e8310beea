import logging
import time

from fastapi import FastAPI, Request

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "family_recipes_console"

logger = logging.getLogger("src.api.access")


def configure_logging(level: str = "INFO") -> None:
    """Install the console handler on the root logger once."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Prevent duplicate handlers
    if any(handler.get_name() == HANDLER_NAME for handler in root.handlers):
        return

    console = logging.StreamHandler()
    console.set_name(HANDLER_NAME)
    console.setLevel(level.upper())
    console.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(console)


def add_request_logging(app: FastAPI) -> None:
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            ms = int((time.perf_counter() - start) * 1000)
            logger.exception(
                "Unhandled error %s %s (%dms)", request.method, request.url.path, ms
            )
            raise
        ms = int((time.perf_counter() - start) * 1000)
        logger.info(
            "%s %s -> %s (%dms)",
            request.method,
            request.url.path,
            response.status_code,
            ms,
        )
        return response
