"""Low-level HTTP client wrapper for the SRM Web API."""

from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Mapping
from http.cookiejar import DefaultCookiePolicy
from typing import Any
from urllib.parse import urlsplit

import requests

from synology_srm.client.errors import (
    SRMConfigError,
    SRMRequestError,
    SRMResponseError,
    SRMTimeoutError,
)
from synology_srm.model.config import SRMClientConfig

logger = logging.getLogger(__name__)

try:
    _VERSION: str = importlib.metadata.version("synology-srm")
except importlib.metadata.PackageNotFoundError:
    _VERSION = "0.0.0"

_USER_AGENT: str = f"synology-srm/{_VERSION}"

_SCHEMES: frozenset[str] = frozenset({"http", "https"})


def _normalise_base_url(url: str | None) -> str:
    """Ensure the URL has a supported scheme, a host and no trailing slash.

    Raises:
        SRMConfigError: If *url* is empty, has an unsupported scheme or no host.
    """
    if not url:
        raise SRMConfigError("Router base URL must be provided")
    url = url.strip()
    if "://" not in url:
        url = "http://" + url
    try:
        parts = urlsplit(url)
        parts.port  # noqa: B018  # raises on a non-numeric port
    except ValueError as exc:
        raise SRMConfigError(f"Invalid router URL {url!r}: {exc}") from exc
    if parts.scheme.lower() not in _SCHEMES:
        raise SRMConfigError(f"Unsupported URL scheme {parts.scheme!r} in {url!r}")
    if not parts.hostname:
        raise SRMConfigError(f"Router URL {url!r} has no host")
    return url.rstrip("/")


class SRMHTTP:
    """Low-level HTTP wrapper around :class:`requests.Session`.

    Sends form-encoded POSTs with a default ``User-Agent`` header, the
    configured extra headers, timeout and TLS verification, and maps
    transport/HTTP errors to :mod:`.errors` types.  Redirects are not followed.

    Args:
        config: Connection settings for the router.
    """

    def __init__(self, config: SRMClientConfig) -> None:
        self.base_url: str = _normalise_base_url(config.base_url)
        self.timeout_s: float = config.timeout_s
        self.verify_tls: bool = config.verify_tls
        self.transport_options: dict[str, Any] = dict(config.transport_options)
        self._session: requests.Session = requests.Session()
        self._session.headers.update({"User-Agent": _USER_AGENT})
        self._session.headers.update(config.headers)
        # The session cookie is sent from the held sid only, never from the jar.
        self._session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))

        if not self.verify_tls and self.base_url.lower().startswith("https://"):
            logger.warning(
                "TLS certificate verification is disabled for %s", self.base_url
            )

    @property
    def scheme(self) -> str:
        """URL scheme the router is reached with (``http`` or ``https``)."""
        return urlsplit(self.base_url).scheme.lower()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def post_form(
        self,
        path: str,
        data: list[tuple[str, str]] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> requests.Response:
        """Send an HTTP POST with form-encoded *data* to *path*.

        Args:
            path: URL path relative to :attr:`base_url`.
            data: Ordered form fields.
            headers: Per-request headers merged over the session defaults.

        Returns:
            The :class:`requests.Response`.

        Raises:
            SRMTimeoutError: If the request exceeds :attr:`timeout_s`.
            SRMRequestError: On any other transport-level failure.
            SRMResponseError: On an HTTP status outside 200-299.
        """
        url = self.base_url + path
        kwargs: dict[str, Any] = dict(self.transport_options)
        kwargs.update(
            data=data or [],
            headers=dict(headers) if headers else None,
            timeout=self.timeout_s,
            verify=self.verify_tls,
            allow_redirects=False,
        )
        try:
            resp = self._session.post(url, **kwargs)
        except requests.exceptions.Timeout as exc:
            raise SRMTimeoutError(url, exc) from exc
        except requests.exceptions.RequestException as exc:
            raise SRMRequestError(url, exc) from exc
        self._raise_for_status(resp)
        return resp

    def close(self) -> None:
        """Close the underlying :class:`requests.Session`."""
        self._session.close()

    def __enter__(self) -> SRMHTTP:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _raise_for_status(resp: requests.Response) -> None:
        if not 200 <= resp.status_code <= 299:
            raise SRMResponseError(resp.status_code, resp.reason, resp.url)
