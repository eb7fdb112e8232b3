"""
proxmox_api - Python client for the Proxmox VE API v2

Build any endpoint path with attribute access and indexing, then call a verb:

    api = ProxmoxAPI("pve.example.com", token="root@pam!ci", secret="...")
    api.nodes["pve1"].qemu.get()
"""

__version__ = "0.1.0"

from ._client import ProxmoxAPI
from ._exceptions import (
    STATUS_MAP,
    AuthenticationError,
    BadRequest,
    ClientError,
    Forbidden,
    InternalServerError,
    NotFound,
    ProxmoxError,
    ServerError,
    ServiceUnavailable,
    TransportError,
    Unauthorized,
    UnprocessableEntity,
)
from ._path import ApiPath
from ._types import AuthTicket

__all__ = [
    "STATUS_MAP",
    "ApiPath",
    "AuthTicket",
    "AuthenticationError",
    "BadRequest",
    "ClientError",
    "Forbidden",
    "InternalServerError",
    "NotFound",
    "ProxmoxAPI",
    "ProxmoxError",
    "ServerError",
    "ServiceUnavailable",
    "TransportError",
    "Unauthorized",
    "UnprocessableEntity",
]
