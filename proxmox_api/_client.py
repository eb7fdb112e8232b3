"""Proxmox VE API client: connection setup, authentication and request submission."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from ._constants import (
    API_PREFIX,
    AUTH_PARAMS,
    CONNECTION_OPTIONS,
    DANGEROUS_SUFFIX,
    DEFAULT_PORT,
    TOKEN_AUTH_SCHEME,
)
from ._exceptions import AuthenticationError, ProxmoxError
from ._http import HTTPClient
from ._path import ApiPath
from ._types import AuthTicket

logger = logging.getLogger(__name__)


class ProxmoxAPI:
    """Client for the Proxmox VE API v2.

    Usage:
        api = ProxmoxAPI("pve.example.com", username="root@pam", password="secret")
        api.nodes["pve1"].lxc[101].status.current.get()
        api["nodes/pve1/qemu"].post({"vmid": 200, "memory": 2048})

    Authenticates once, eagerly. With ``token`` and ``secret`` the API token is
    sent as an Authorization header and no login request is made; otherwise a
    ticket is requested from ``access/ticket``. Tickets are never refreshed:
    once one expires requests fail with ``Unauthorized`` and a new client is
    needed.
    """

    # __getitem__ would otherwise make the client an endless iterable
    __iter__ = None

    def __init__(
        self,
        host: str,
        *,
        username: str | None = None,
        password: str | None = None,
        realm: str | None = None,
        otp: str | None = None,
        token: str | None = None,
        secret: str | None = None,
        port: int = DEFAULT_PORT,
        verify_ssl: bool | None = None,
        ca_file: str | None = None,
        ca_path: str | None = None,
        headers: dict[str, str] | None = None,
        session: requests.Session | None = None,
    ):
        if (token is None) != (secret is None):
            raise ValueError("API token authentication needs both token and secret.")

        headers = dict(headers or {})
        if token is not None:
            headers["Authorization"] = f"{TOKEN_AUTH_SCHEME}={token}={secret}"

        self._http = HTTPClient(
            _build_base_url(host, port),
            headers=headers,
            verify_ssl=verify_ssl,
            ca_file=ca_file,
            ca_path=ca_path,
            session=session,
        )

        if token is not None:
            self._auth_ticket = AuthTicket()
        else:
            credentials = {"username": username, "realm": realm, "password": password, "otp": otp}
            self._auth_ticket = self._create_auth_ticket(
                {k: credentials[k] for k in AUTH_PARAMS if credentials[k] is not None}
            )

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @classmethod
    def connection_options(cls) -> list[str]:
        """Option names applied to the underlying HTTP session."""
        return list(CONNECTION_OPTIONS)

    def __getitem__(self, index: Any) -> ApiPath:
        return ApiPath(self)[index]

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(ApiPath(self), name)

    def __repr__(self) -> str:
        return f"<ProxmoxAPI {self.base_url}>"

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> ProxmoxAPI:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---------- Authentication ----------
    def _create_auth_ticket(self, credentials: dict[str, str]) -> AuthTicket:
        resp = self._http.request("POST", "access/ticket", data=credentials)
        if resp.status_code >= 400:
            cause = ProxmoxError.from_response(resp, "Proxmox authentication failure")
            logger.warning("Authentication failed for %s: %s", credentials.get("username"), cause.message)
            raise AuthenticationError(cause.message, response=resp) from cause
        try:
            data = _unwrap(resp.json())
        except ValueError:
            data = None
        if not isinstance(data, dict) or not data.get("ticket"):
            logger.warning("No ticket in login reply (HTTP %d)", resp.status_code)
            raise AuthenticationError(
                f"Proxmox authentication failure: no ticket in response (HTTP {resp.status_code})",
                response=resp,
            )
        return AuthTicket.from_dict(data)

    # ---------- Requests ----------
    def _submit(self, method: str, path: str, data: dict | None = None) -> Any:
        """Send ``method`` to ``path`` and return the ``data`` member of the reply.

        Methods ending in ``_dangerous`` return None on an HTTP error status
        instead of raising. Transport failures raise either way.
        """
        method, skip_raise = _normalize_method(method)
        request_options = self._prepare_request(method, data if data is not None else {})
        resp = self._http.request(method, path, **request_options)

        if resp.status_code >= 400:
            if not skip_raise:
                raise ProxmoxError.from_response(resp)
            logger.debug("Ignoring HTTP %d from %s %s", resp.status_code, method.upper(), path)
            return None
        return _unwrap(resp.json())

    def _prepare_request(self, method: str, data: dict) -> dict[str, Any]:
        headers = self._auth_ticket.headers()
        params: dict[str, Any] | None = None
        body: str | None = None
        if method in ("post", "put"):
            body = json.dumps(data)
            headers["Content-Type"] = "application/json"
        elif method == "get":
            params = data
        return {"headers": headers, "params": params, "data": body}


def _build_base_url(host: str, port: int) -> str:
    if ":" in host and not host.startswith("["):
        host = f"[{host}]"
    return f"https://{host}:{port}{API_PREFIX}"


def _normalize_method(method: str) -> tuple[str, bool]:
    if method.endswith(DANGEROUS_SUFFIX):
        return method[: -len(DANGEROUS_SUFFIX)], True
    return method, False


def _unwrap(payload: Any) -> Any:
    """Return the ``data`` member of a response envelope."""
    if isinstance(payload, dict):
        return payload.get("data")
    return None
