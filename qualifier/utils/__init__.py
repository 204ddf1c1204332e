"""
Utilities package for the qualifier flow runner.

Exports shared logging helpers. Keep this package free of domain logic.
"""

from qualifier.utils.logging import JsonFormatter, configure_logging, get_logger

__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_logger",
]
