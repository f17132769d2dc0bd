from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class APIException(Exception):
    """
    Errors that map onto exactly one HTTP status. The message is what the
    client sees, so it must never carry driver or SQL details.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request."

    def __init__(self, message: str | None = None, context: dict[Any, Any] | None = None):
        self.message = message or self.default_detail
        self.context = context or dict()
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.message})"


class InvalidTodoId(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid ID"


class TodoNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Todo not found"


class DatastoreError(APIException):
    """
    Wraps a SQLAlchemy failure. The cause is logged server side by
    whoever raises this, the client only gets ``message``.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal failure."


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder({"error": exc.message}),
    )


async def inbound_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Malformed or missing JSON bodies are a plain client error here, not 422.
    """
    details = []
    for error in exc.errors():
        details.append(
            {
                "loc": error["loc"],
                "message": error["msg"],
                "type": error["type"],
            }
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"error": "Invalid request body", "detail": details}),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, inbound_validation_exception_handler)
