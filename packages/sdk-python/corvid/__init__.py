"""
Corvid SDK for Python

Configuration and capture policy for error reporting.

Usage:
    import corvid

    # Reads SENTRY_DSN and KEMAL_ENV from the environment
    config = corvid.Configuration()
    config.environments = ["production", "staging"]

    # Hand accepted events to your transport
    corvid.init(config, send=my_transport.send)

    try:
        risky_operation()
    except Exception as e:
        corvid.capture_exception(e)
"""

from corvid.client import (
    CorvidClient,
    init,
    capture_exception,
    capture_message,
    get_client,
)
from corvid.config import REQUIRED_OPTIONS, Configuration
from corvid.dsn import ParsedDSN, build_server, parse_dsn
from corvid.hostname import resolve_hostname
from corvid.release import ReleaseDetector, detect_release
from corvid.types import (
    DEFAULT_PROCESSORS,
    IGNORE_DEFAULT,
    Encoding,
    Event,
    Processor,
)

__version__ = "0.1.0"
__all__ = [
    # Core
    "init",
    "capture_exception",
    "capture_message",
    "get_client",
    "CorvidClient",
    # Configuration
    "Configuration",
    "REQUIRED_OPTIONS",
    "ParsedDSN",
    "parse_dsn",
    "build_server",
    "ReleaseDetector",
    "detect_release",
    "resolve_hostname",
    # Types
    "DEFAULT_PROCESSORS",
    "IGNORE_DEFAULT",
    "Encoding",
    "Event",
    "Processor",
]
