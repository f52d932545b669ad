"""Pytest shared fixtures for kcloak tests."""
import os
import pathlib
import sys

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from kcloak import KCloak

BASE_URL = "http://keycloak.test"
REALM = "demo"
TOKEN = "admin-token"


def admin_url(*segments: str) -> str:
    """Absolute admin API URL below the test realm."""
    return "/".join([BASE_URL, "admin", "realms", REALM, *segments])


def token_url(realm: str = REALM) -> str:
    return f"{BASE_URL}/realms/{realm}/protocol/openid-connect/token"


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, request):
    """Keep unit tests independent from the developer's Keycloak settings.

    Integration tests are explicitly marked with @pytest.mark.integration and
    read the real environment.
    """
    if request.node.get_closest_marker("integration"):
        return
    for var in (
        "KEYCLOAK_URL",
        "KEYCLOAK_REALM",
        "KEYCLOAK_CLIENT_ID",
        "KEYCLOAK_CLIENT_SECRET",
        "KEYCLOAK_ADMIN",
        "KEYCLOAK_ADMIN_PASSWORD",
        "KCLOAK_REQUEST_TIMEOUT",
        "KCLOAK_VERIFY_TLS",
        "KCLOAK_LEGACY_WILDFLY",
    ):
        monkeypatch.delenv(var, raising=False)


# ─────────────────────────────────────────────────────────────────────────────
# Clients
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture()
def kc():
    """KCloak client pointed at the mocked test server."""
    with KCloak(BASE_URL) as client:
        yield client


@pytest.fixture(scope="session")
def live_keycloak_url():
    url = os.environ.get("KEYCLOAK_URL")
    if not url:
        pytest.skip("KEYCLOAK_URL not set; live Keycloak tests skipped")
    return url
