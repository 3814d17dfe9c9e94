"""Hostname resolution for Corvid SDK."""

from __future__ import annotations

import platform
import socket


def resolve_hostname() -> str | None:
    """Resolve the hostname to an FQDN, falling back to the short name."""
    try:
        name = socket.getfqdn()
    except OSError:
        name = ""

    if not name:
        try:
            name = socket.gethostname()
        except OSError:
            name = ""

    return name or platform.node() or None
