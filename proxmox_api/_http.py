"""Thin HTTP client wrapping requests.Session with TLS options and transport error mapping."""

from __future__ import annotations

import logging
from typing import Any

import requests

from ._exceptions import TransportError

logger = logging.getLogger(__name__)


def _resolve_verify(verify_ssl: bool | None, ca_file: str | None, ca_path: str | None) -> bool | str | None:
    """Translate TLS options into a ``requests`` verify value; None keeps the default."""
    if verify_ssl is False:
        return False
    # requests takes either a bundle file or a c_rehash'd directory
    return ca_file or ca_path or verify_ssl


class HTTPClient:
    """One request per call against a fixed base URL. No retries."""

    def __init__(
        self,
        base_url: str,
        *,
        headers: dict[str, str] | None = None,
        verify_ssl: bool | None = None,
        ca_file: str | None = None,
        ca_path: str | None = None,
        session: requests.Session | None = None,
    ):
        self._session = session if session is not None else requests.Session()
        if headers:
            self._session.headers.update(headers)
        self._verify = _resolve_verify(verify_ssl, ca_file, ca_path)
        if self._verify is not None:
            self._session.verify = self._verify
        self._base_url = base_url

    @property
    def base_url(self) -> str:
        return self._base_url

    def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        data: Any = None,
    ) -> requests.Response:
        """Send a request and return the response whatever its status.

        ``data`` is passed through to requests: a string is sent verbatim, a
        mapping is form-encoded.
        """
        method = method.upper()
        url = f"{self._base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            # Per-request verify so REQUESTS_CA_BUNDLE / CURL_CA_BUNDLE cannot override it
            kwargs: dict[str, Any] = {} if self._verify is None else {"verify": self._verify}
            resp = self._session.request(
                method, url, headers=headers, params=params, data=data, **kwargs
            )
        except requests.RequestException as e:
            logger.warning("Request failed: %s %s: %s", method, url, e)
            raise TransportError(str(e)) from e
        logger.debug("%s %s -> %d", method, url, resp.status_code)
        return resp

    def close(self) -> None:
        self._session.close()
