"""Authenticated HTTP session for Synology SRM routers."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from synology_srm.client.errors import SRMApiError, SRMAuthError, SRMParseError
from synology_srm.client.http import SRMHTTP
from synology_srm.model.config import SRMClientConfig
from synology_srm.utils.form import encode_form, json_param
from synology_srm.vendor.srm.endpoints import API_AUTH, AUTH
from synology_srm.vendor.srm.mappings import ERROR_LABELS, NO_CODE_ERROR_LABEL

logger = logging.getLogger(__name__)

# Cookie name the router reads the session identifier from.
_SID_COOKIE: str = "id"


def error_message(
    envelope: Mapping[str, Any],
    labels: Mapping[int, str] = ERROR_LABELS,
) -> str:
    """Resolve the message for a ``success: false`` envelope.

    Args:
        envelope: Parsed response body.
        labels: Error-code table to look the code up in.

    Returns:
        The table label for ``error.code``; ``"Unknown error (<code>) <error>"``
        for a code missing from the table; ``"Unknown error (no code)"`` when
        the envelope carries no ``error.code`` at all.
    """
    error = envelope.get("error")
    if not isinstance(error, dict) or "code" not in error:
        return NO_CODE_ERROR_LABEL
    code = error["code"]
    label = labels.get(code) if isinstance(code, int) else None
    return label or f"Unknown error ({code}) {json_param(error)}"


def payload_field(payload: object, key: str, api: str) -> Any:
    """Return ``payload[key]`` from an unwrapped ``data`` object.

    Raises:
        SRMParseError: If *payload* is not an object or lacks *key*.
    """
    if not isinstance(payload, dict) or key not in payload:
        raise SRMParseError(f"Missing {key!r} in response from {api}")
    return payload[key]


class SRMSession:
    """Manages the session identifier and the SRM JSON envelope.

    Wraps :class:`.SRMHTTP` and adds:
    - ``Cookie: id=<sid>`` injection while a session identifier is held.
    - Ordered form encoding of request parameters.
    - Unwrapping of ``{"success": ..., "data": ..., "error": ...}`` envelopes
      into the ``data`` value or an :class:`.SRMApiError`.

    Args:
        config: Connection settings for the router.
        sid: Session identifier from a previous :meth:`authenticate` call.
        error_labels: Error-code table (defaults to the vendor table).
    """

    def __init__(
        self,
        config: SRMClientConfig,
        sid: str | None = None,
        error_labels: Mapping[int, str] | None = None,
    ) -> None:
        self._http: SRMHTTP = SRMHTTP(config)
        self._sid: str | None = sid
        self._error_labels: Mapping[int, str] = (
            ERROR_LABELS if error_labels is None else error_labels
        )

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def authenticate(self, account: str | None, password: str | None) -> str:
        """Log in and keep the returned session identifier.

        Args:
            account: Router account name (e.g. ``admin``).
            password: Account password.

        Returns:
            The new session identifier.

        Raises:
            SRMAuthError: If a credential is missing (no request is sent) or the
                router accepts the login without returning a ``sid``.
            SRMApiError: If the router rejects the credentials.
        """
        if not account or not password:
            raise SRMAuthError("Credentials must be provided")
        data = {
            "account": account,
            "passwd": password,
            "method": "Login",
            "version": 2,
            "api": API_AUTH,
        }
        result = self.request(AUTH, data)
        if not isinstance(result, dict) or "sid" not in result:
            raise SRMAuthError("No sid returned")
        self._sid = str(result["sid"])
        logger.info("Authenticated to %s as %s", self._http.base_url, account)
        return self._sid

    def logout(self) -> None:
        """Destroy the session on the router and forget the identifier.

        The identifier is cleared even when the request fails; the failure
        itself is still raised.
        """
        data = {
            "method": "Logout",
            "version": 2,
            "api": API_AUTH,
        }
        try:
            self.request(AUTH, data)
        finally:
            self._sid = None
            logger.info("Logged out from %s", self._http.base_url)

    # ------------------------------------------------------------------
    # Public request method
    # ------------------------------------------------------------------

    def request(self, path: str, data: Mapping[str, object] | None = None) -> Any:
        """POST *data* to *path* and return the unwrapped ``data`` payload.

        Args:
            path: CGI path relative to the router base URL.
            data: Form fields with scalar values; lists and objects must be
                serialized with :func:`~synology_srm.utils.form.json_param`.

        Returns:
            The envelope's ``data`` value (object, array or scalar), or ``None``
            when the router answers ``success: true`` without ``data``.

        Raises:
            SRMTimeoutError: If the router does not answer in time.
            SRMRequestError: On a transport failure.
            SRMResponseError: On an HTTP status outside 200-299.
            SRMParseError: If the body is not JSON or lacks ``success``.
            SRMApiError: If the router answers ``success: false``.
        """
        headers: dict[str, str] = {}
        if self._sid is not None:
            headers["Cookie"] = f"{_SID_COOKIE}={self._sid}"
        form = encode_form(data)
        if data:
            logger.debug(
                "POST %s api=%s method=%s", path, data.get("api"), data.get("method")
            )
        resp = self._http.post_form(path, data=form, headers=headers)
        return self._unwrap(self._parse_json(resp.text, path), path)

    def close(self) -> None:
        """Close the underlying HTTP session without logging out."""
        self._http.close()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def sid(self) -> str | None:
        """Current session identifier, or ``None`` when not authenticated."""
        return self._sid

    @property
    def base_url(self) -> str:
        """Normalised router base URL."""
        return self._http.base_url

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _unwrap(self, result: object, endpoint: str) -> Any:
        """Interpret the SRM envelope in *result*."""
        if not isinstance(result, dict) or "success" not in result:
            raise SRMParseError("Invalid response")
        if result["success"] is False:
            error = result.get("error")
            code = error.get("code") if isinstance(error, dict) else None
            raise SRMApiError(
                code=code,
                message=error_message(result, self._error_labels),
                endpoint=endpoint,
                payload=error if isinstance(error, dict) else None,
            )
        return result.get("data")

    @staticmethod
    def _parse_json(text: str, endpoint: str) -> object:
        """Parse *text* as JSON, raising :exc:`.SRMParseError` on failure."""
        try:
            return json.loads(text)
        except ValueError as exc:
            raise SRMParseError(
                f"Non-JSON response from {endpoint!r}: {text[:200]!r}"
            ) from exc
