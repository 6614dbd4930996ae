"""Observability – structured logging ports and helpers."""
from cadence.observability.logging.protocol import Logger
from cadence.observability.logging.factory import JsonLoggerFactory
from cadence.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
