"""Process-wide registry of named TLS configurations."""

from __future__ import annotations

import copy
import threading
from typing import Any

_lock = threading.Lock()
_registry: dict[str, Any] = {}


def register_tls_config(key: str, config: Any) -> None:
    """Register ``config`` under ``key``, replacing any earlier entry."""
    with _lock:
        _registry[key] = config


def deregister_tls_config(key: str) -> None:
    """Remove the configuration registered under ``key``, if any."""
    with _lock:
        _registry.pop(key, None)


def get_tls_config(key: str) -> Any | None:
    """Return a copy of the configuration under ``key``, or None if absent.

    Objects that cannot be copied (such as ``ssl.SSLContext``) are returned as is.
    """
    with _lock:
        config = _registry.get(key)
    if config is None:
        return None
    try:
        return copy.copy(config)
    except TypeError:
        return config