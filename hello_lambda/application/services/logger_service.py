# hello_lambda/application/services/logger_service.py
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Protocol

from loguru import logger


class Level(str, Enum):
    """Severity of a log event, from most to least verbose."""
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value

    @property
    def loguru_name(self) -> str:
        # loguru spells warn as WARNING
        return "WARNING" if self is Level.WARN else self.name


@dataclass(frozen=True)
class LogContext:
    """Correlation metadata for a single request.

    Every field is optional; only the ones that are set end up on the record.
    """
    request_id: str | None = None
    trace_id: str | None = None
    correlation_id: str | None = None
    user_id: str | int | None = None

    def as_fields(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


class LoggerService(Protocol):
    def log(
        self,
        level: Level,
        message: str,
        context: LogContext | None = None,
        exc: BaseException | None = None,
        **fields: Any,
    ) -> None:
        ...


@dataclass
class LoguruLogger:
    """Structured logger backed by loguru.

    Context and caller fields are bound into the record's ``extra`` so a
    serialized sink emits them as JSON keys. The record location points at
    whoever called :meth:`log`, not at this adapter.
    """

    def log(
        self,
        level: Level,
        message: str,
        context: LogContext | None = None,
        exc: BaseException | None = None,
        **fields: Any,
    ) -> None:
        extra = context.as_fields() if context is not None else {}
        extra.update(fields)
        logger.opt(depth=1, exception=exc).bind(**extra).log(level.loguru_name, message)
