"""
App Module
==========

FastAPI application initialization, configuration and logging.
"""

from .config import VERSION, APP_NAME
from .exceptions import get_http_exception, global_exception_handler
from .logger import configure_logging, get_logger

__all__ = [
    "VERSION",
    "APP_NAME",
    "get_http_exception",
    "global_exception_handler",
    "configure_logging",
    "get_logger",
]
