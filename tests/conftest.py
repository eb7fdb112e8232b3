"""
Root pytest configuration and fixtures for the proxmox_api test suite.
"""

from pathlib import Path
import sys
from types import SimpleNamespace

import pytest
import responses

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from proxmox_api import ProxmoxAPI  # noqa: E402

HOST = "pve.test"
BASE = f"https://{HOST}:8006/api2/json/"


@pytest.fixture
def base():
    """Base URL of the test cluster."""
    return BASE


@pytest.fixture
def token_api():
    """Client authenticated with an API token; constructing it makes no request."""
    return ProxmoxAPI(HOST, token="root@pam!ci", secret="abc-123")


@pytest.fixture
def ticket_api():
    """Client authenticated with a login ticket against a mocked access/ticket."""
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.POST,
            f"{BASE}access/ticket",
            json={"data": {"ticket": "PVE:root@pam:TICKET", "CSRFPreventionToken": "csrf-1"}},
            status=200,
        )
        api = ProxmoxAPI(HOST, username="root@pam", password="secret")
    return api


@pytest.fixture
def make_response():
    """Factory for minimal response doubles exposing status_code and text."""

    def _make(status_code, text=None, headers=None):
        return SimpleNamespace(status_code=status_code, text=text, headers=headers or {})

    return _make
