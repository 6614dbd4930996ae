"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from cadence.config.settings import SchedulerSettings


class JsonLoggerFactory:
    """Configure structlog to render through the stdlib root handler."""

    @staticmethod
    def configure(level: int = logging.INFO, *, json: bool = True) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        render_chain: list[Any] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
        if json:
            render_chain += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        else:
            render_chain.append(structlog.dev.ConsoleRenderer())
        formatter = structlog.stdlib.ProcessorFormatter(processors=render_chain)
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)

    @classmethod
    def from_settings(cls, settings: SchedulerSettings) -> None:
        """Apply ``log_level`` / ``log_json`` from *settings*."""
        cls.configure(settings.log_level_number, json=settings.log_json)


__all__ = ["JsonLoggerFactory"]
