"""Error types surfaced to API callers and the handlers that render them"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class RegistrarError(Exception):
    """Base error carrying the HTTP status and JSON body to answer with"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, payload: Dict[str, Any]) -> None:
        super().__init__(payload)
        self.payload = payload


class MethodNotAllowedError(RegistrarError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self) -> None:
        super().__init__({"error": "method not allowed"})


class MalformedRequestError(RegistrarError):
    status_code = 422

    def __init__(self, message: str = "request body must be a JSON object with string fields") -> None:
        super().__init__({"error": message})


class ValidationFailedError(RegistrarError):
    status_code = 422

    def __init__(self, messages: List[str]) -> None:
        super().__init__({"errors": messages})
        self.messages = messages


async def registrar_error_handler(request: Request, exc: RegistrarError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.payload)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal server error"},
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RegistrarError, registrar_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
