# hello_lambda/application/handlers/hello_handler.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from pydantic import BaseModel

from hello_lambda.application.services.hello_service import (
    MAX_NAME_LENGTH,
    InvalidCharactersError,
    NameTooLongError,
    say_hello,
)
from hello_lambda.application.services.logger_service import Level, LogContext, LoggerService

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass
class HelloRequest:
    query_params: Mapping[str, str] = field(default_factory=dict)
    http_method: str = "GET"
    path: str = "/hello"
    context: LogContext = field(default_factory=LogContext)


@dataclass
class HelloResponse:
    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)


class ErrorBody(BaseModel):
    error: str
    status: str


def error_response(status_code: int, message: str) -> HelloResponse:
    body = ErrorBody(error=message, status=str(status_code))
    return HelloResponse(status_code=status_code, body=body.model_dump_json(), headers=dict(JSON_HEADERS))


def map_error_to_response(exc: Exception) -> HelloResponse:
    """Translate a failure from the greeting into a client-facing response."""
    if isinstance(exc, NameTooLongError):
        return error_response(400, f"{exc}. Maximum {MAX_NAME_LENGTH} characters allowed.")
    if isinstance(exc, InvalidCharactersError):
        return error_response(
            400, f"{exc}. Only letters, numbers, spaces, hyphens, and apostrophes are allowed."
        )
    return error_response(500, "Internal server error")


@dataclass
class HelloHandler:
    """Serves ``GET /hello``: pulls the name out of the query and greets it."""
    logger: LoggerService

    def handle(self, request: HelloRequest) -> HelloResponse:
        ctx = request.context
        self.logger.log(
            Level.DEBUG,
            "Request received",
            context=ctx,
            query_params=dict(request.query_params),
            http_method=request.http_method,
            path=request.path,
        )

        name = request.query_params.get("name", "")
        try:
            message = say_hello(name)
        except (NameTooLongError, InvalidCharactersError) as e:
            self.logger.log(Level.WARN, "Validation failed", context=ctx, name=name, error=str(e))
            return map_error_to_response(e)
        except Exception as e:
            self.logger.log(Level.ERROR, "Unexpected error while greeting", context=ctx, exc=e, name=name)
            return map_error_to_response(e)

        return HelloResponse(status_code=200, body=message)
