"""
Logging configuration for the dashboard service
"""
import logging
import sys
import time

from fastapi import Request

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger("dashboard_api.http")


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a stdout handler to the package logger.
    Safe to call more than once; the handler is only added the first time.
    """
    app_logger = logging.getLogger("dashboard_api")
    app_logger.setLevel(level.upper())

    if not app_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        app_logger.addHandler(console_handler)

    # Prevent duplicate logs through uvicorn's root handlers
    app_logger.propagate = False
    return app_logger


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response
