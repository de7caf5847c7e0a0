"""Portico Logging — logging port and structlog adapter."""

from portico.logging.port import LoggingPort
from portico.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
