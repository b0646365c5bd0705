"""Observability – structured logging helpers."""
from hrm_access.observability.logging.factory import JsonLoggerFactory
from hrm_access.observability.logging.processors import PrincipalProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "PrincipalProcessor",
    "get_logger",
]
