"""Typed client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_TIMEOUT_S: float = 5.0


@dataclass(frozen=True)
class SRMClientConfig:
    """Immutable connection settings for one SRM router.

    Attributes:
        base_url: Router URL including scheme and management port,
            e.g. ``https://192.168.1.1:8001``.
        timeout_s: Per-request timeout in seconds (default 5).
        verify_tls: Whether to verify the router's TLS certificate.  SRM ships
            with a self-signed certificate, so this defaults to ``False``.
        headers: Extra headers sent with every request.
        transport_options: Extra keyword arguments forwarded to
            :meth:`requests.Session.post` (``proxies``, ``cert``, ...).
    """

    base_url: str
    timeout_s: float = DEFAULT_TIMEOUT_S
    verify_tls: bool = False
    headers: dict[str, str] = field(default_factory=dict)
    transport_options: dict[str, Any] = field(default_factory=dict)
