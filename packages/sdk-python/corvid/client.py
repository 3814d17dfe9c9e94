"""Main Corvid client for Python SDK."""

from __future__ import annotations

import logging
from typing import Any

from corvid.config import Configuration
from corvid.types import CaptureSubject, Event, EventHook

# Global client instance
_client: CorvidClient | None = None


class CorvidClient:
    """
    Client that applies the configured capture policy.

    Building the payload further and delivering it is left to `send`,
    which receives every accepted event.
    """

    def __init__(
        self,
        configuration: Configuration | None = None,
        send: EventHook | None = None,
    ) -> None:
        self.configuration = configuration if configuration is not None else Configuration()
        self.send = send

    @property
    def logger(self) -> logging.Logger:
        return self.configuration.logger

    def report_status(self) -> None:
        """Log whether the client is able to send events."""
        config = self.configuration
        if config.silence_ready:
            return

        if config.capture_allowed():
            self.logger.info("corvid ready to catch errors")
        else:
            self.logger.warning(
                "corvid not configured to send errors: %s", config.error_messages()
            )

    def capture_exception(self, error: BaseException, **tags: Any) -> Event | None:
        """Capture an exception."""
        if self.is_excluded(error):
            self.logger.debug("User excluded error: %r", error)
            return None

        if not self._capture_allowed(error):
            return None

        event = self._build_event(
            str(error) or type(error).__name__,
            exception_type=_qualified_name(type(error)),
            tags=tags,
        )
        self.send_event(event)
        return event

    def capture_message(self, message: str, level: str = "info", **tags: Any) -> Event | None:
        """Capture a message."""
        if not self._capture_allowed(message):
            return None

        event = self._build_event(message, level=level, tags=tags)
        self.send_event(event)
        return event

    def send_event(self, event: Event) -> None:
        """Dispatch an event through the async hook or the transport."""
        config = self.configuration
        if config.async_ is not None:
            config.async_(event)
            return

        if self.send is None:
            self.logger.debug("No transport configured, dropping event: %s", event.message)
            return

        try:
            self.send(event)
        except Exception as e:
            self.logger.error("Unable to record event with remote server: %s", e)
            if config.transport_failure_callback is not None:
                config.transport_failure_callback(event)

    def is_excluded(self, error: BaseException) -> bool:
        """Check if the exception class is listed in `excluded_exceptions`."""
        excluded = self.configuration.excluded_exceptions
        cls = type(error)
        return cls.__qualname__ in excluded or _qualified_name(cls) in excluded

    def _capture_allowed(self, subject: CaptureSubject) -> bool:
        config = self.configuration
        if config.capture_allowed(subject):
            return True
        self.logger.debug("Event not captured: %s", config.error_messages())
        return False

    def _build_event(
        self,
        message: str,
        level: str = "error",
        exception_type: str | None = None,
        tags: dict[str, Any] | None = None,
    ) -> Event:
        config = self.configuration
        return Event(
            message=message,
            level=level,
            exception_type=exception_type,
            release=config.release,
            server_name=config.server_name,
            environment=config.current_environment,
            tags={**config.tags, **(tags or {})},
        )


def _qualified_name(cls: type) -> str:
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def init(
    configuration: Configuration | None = None,
    send: EventHook | None = None,
) -> CorvidClient:
    """Initialize the Corvid SDK."""
    global _client

    _client = CorvidClient(configuration, send=send)
    _client.report_status()
    return _client


def get_client() -> CorvidClient | None:
    """Get the current client."""
    return _client


def capture_exception(error: BaseException, **tags: Any) -> Event | None:
    """Capture an exception."""
    if not _client:
        return None
    return _client.capture_exception(error, **tags)


def capture_message(message: str, level: str = "info", **tags: Any) -> Event | None:
    """Capture a message."""
    if not _client:
        return None
    return _client.capture_message(message, level=level, **tags)
