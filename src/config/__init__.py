"""
Runtime configuration (logging).
"""

from src.config.logging import PACKAGE_LOGGER_NAME, configure_logging

__all__ = [
    "PACKAGE_LOGGER_NAME",
    "configure_logging",
]
