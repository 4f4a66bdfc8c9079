"""
Core infrastructure layer
"""
from .constants import *
from .exceptions import *
from .logging import setup_logging, get_logger, get_stdout_console, get_stderr_console
from .interfaces import ObjectStore, ObjectStoreFactory
from .telemetry import Telemetry, get_telemetry
from .utils import (
    short_hostname,
    encode_uri_component,
    join_url,
    parse_size,
    format_size,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "get_stdout_console",
    "get_stderr_console",
    "ObjectStore",
    "ObjectStoreFactory",
    "Telemetry",
    "get_telemetry",
    "short_hostname",
    "encode_uri_component",
    "join_url",
    "parse_size",
    "format_size",
]
