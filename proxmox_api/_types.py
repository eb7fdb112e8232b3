"""Dataclass models for authentication state."""

from __future__ import annotations

from dataclasses import dataclass, field

from ._constants import AUTH_COOKIE, CSRF_HEADER


@dataclass(frozen=True)
class AuthTicket:
    """Session obtained from POST access/ticket. Empty in token mode."""

    cookies: dict[str, str] = field(default_factory=dict)
    csrf_token: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> AuthTicket:
        return cls(
            cookies={AUTH_COOKIE: data["ticket"]},
            csrf_token=data.get("CSRFPreventionToken"),
        )

    def headers(self) -> dict[str, str]:
        """Request headers carrying this session, if any."""
        headers: dict[str, str] = {}
        if self.cookies:
            headers["Cookie"] = "; ".join(f"{k}={v}" for k, v in self.cookies.items())
        if self.csrf_token:
            headers[CSRF_HEADER] = self.csrf_token
        return headers
