import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class DashboardError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFoundError(DashboardError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class InvalidIdError(DashboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid id format"


class InvalidInputError(DashboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request parameters"


# --- Exception handlers ---

async def dashboard_error_handler(request: Request, exc: DashboardError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request parameters", "errors": jsonable_encoder(exc.errors())},
    )


async def store_error_handler(request: Request, exc: PyMongoError):
    # Driver messages can carry hosts and credentials; keep them in the log only
    logger.exception(f"Store failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DashboardError, dashboard_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
