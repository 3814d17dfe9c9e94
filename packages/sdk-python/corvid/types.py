"""Type definitions for Corvid SDK."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Union


class Encoding(str, Enum):
    """Encoding types for event bodies."""

    JSON = "json"
    GZIP = "gzip"


class Processor(str, Enum):
    """Identifiers of the processors run on event data before sending."""

    REMOVE_CIRCULAR_REFERENCES = "remove_circular_references"
    UTF8_CONVERSION = "utf8_conversion"
    SANITIZE_DATA = "sanitize_data"
    COOKIES = "cookies"
    POST_DATA = "post_data"
    HTTP_HEADERS = "http_headers"
    COMPACT = "compact"


# Circular references have to be removed before any other processor runs.
DEFAULT_PROCESSORS: tuple[Processor, ...] = (
    Processor.REMOVE_CIRCULAR_REFERENCES,
    Processor.COOKIES,
    Processor.COMPACT,
)

# Exception classes that should never be sent.
IGNORE_DEFAULT: tuple[str, ...] = ("Kemal::Exceptions::RouteNotFound",)


@dataclass
class Event:
    """Minimal event envelope handed to the dispatch hooks."""

    message: str
    level: str = "error"
    exception_type: str | None = None
    release: str | None = None
    server_name: str | None = None
    environment: str | None = None
    tags: dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {
            "message": self.message,
            "level": self.level,
            "timestamp": self.timestamp,
            "tags": self.tags,
        }
        if self.exception_type:
            result["exception"] = self.exception_type
        if self.release:
            result["release"] = self.release
        if self.server_name:
            result["server_name"] = self.server_name
        if self.environment:
            result["environment"] = self.environment
        return result


# What `should_capture` receives: an event, an exception or a plain message.
CaptureSubject = Union[Event, BaseException, str]

ShouldCapture = Callable[[CaptureSubject], bool]
EventHook = Callable[[Event], None]
CommandRunner = Callable[[list[str]], Union[str, None]]
FileReader = Callable[[str], str]
