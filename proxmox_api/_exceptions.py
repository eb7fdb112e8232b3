"""Typed error hierarchy mapping HTTP status codes from the Proxmox API."""

from __future__ import annotations

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


class ProxmoxError(Exception):
    """Base exception for all Proxmox API errors.

    Carries the raw response (``requests.Response`` or anything exposing
    ``status_code`` and ``text``) so callers can inspect status, body and
    headers.
    """

    def __init__(self, message: str | None = None, *, response: Any = None):
        if message is None:
            message = _build_message(response) if response is not None else "Unknown error"
        super().__init__(message)
        self.message = message
        self.response = response
        self.status_code: int | None = getattr(response, "status_code", None)

    @classmethod
    def from_response(cls, response: Any, default_message: str | None = None) -> ProxmoxError:
        """Build the error subclass matching ``response.status_code``."""
        error_class = error_class_for_status(response.status_code)
        return error_class(_build_message(response, default_message), response=response)


class AuthenticationError(ProxmoxError):
    """Ticket login failed while constructing the client."""


class TransportError(ProxmoxError):
    """No HTTP response was received (connection, TLS or timeout failure)."""


class ClientError(ProxmoxError):
    """4xx — the request was rejected."""


class ServerError(ProxmoxError):
    """5xx — the server failed to handle the request."""


class BadRequest(ClientError):
    """400"""


class Unauthorized(ClientError):
    """401 — missing, invalid or expired credentials."""


class Forbidden(ClientError):
    """403"""


class NotFound(ClientError):
    """404"""


class UnprocessableEntity(ClientError):
    """422 — parameter verification failed."""


class InternalServerError(ServerError):
    """500"""


class ServiceUnavailable(ServerError):
    """503"""


# Map HTTP status codes to exception classes.
STATUS_MAP: dict[int, type[ProxmoxError]] = {
    400: BadRequest,
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    422: UnprocessableEntity,
    500: InternalServerError,
    503: ServiceUnavailable,
}


def error_class_for_status(status_code: int) -> type[ProxmoxError]:
    if status_code in STATUS_MAP:
        return STATUS_MAP[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return ProxmoxError


def _build_message(response: Any, default_message: str | None = None) -> str:
    """Combine status, server message and per-field errors into one line."""
    status = response.status_code
    parts = [f"HTTP {status}"]

    body = getattr(response, "text", None)
    if body:
        try:
            parsed = json.loads(body)
        except ValueError:
            logger.debug("Failed to parse error body: %s", body[:200])
            parsed = None
        if isinstance(parsed, dict):
            # Proxmox terminates messages with a newline
            message = str(parsed.get("message") or "").strip()
            if message:
                parts.append(message)
            errors = parsed.get("errors")
            if isinstance(errors, dict) and errors:
                details = ", ".join(f"{field}: {str(detail).strip()}" for field, detail in errors.items())
                parts.append(f"({details})")

    if len(parts) > 1:
        return " - ".join(parts)
    if default_message:
        return f"{default_message} (HTTP {status})"
    return parts[0]
