"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..client import ADMIN_CLI, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
        except OSError as exc:
            logger.warning("Failed to read /run/secrets/%s: %s", secret_name, exc)
        else:
            if secret_value:
                logger.debug("Loaded %s from /run/secrets", secret_name)
                return secret_value

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.debug("Loaded %s from environment", env_var)
            return secret_value

    return None


def _get_bool(var_name: str, default: bool) -> bool:
    raw = os.environ.get(var_name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Environment variable {var_name} must be a boolean, got '{raw}'")


def _get_timeout(var_name: str, default: float) -> float:
    raw = os.environ.get(var_name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"Environment variable {var_name} must be a number of seconds, got '{raw}'") from None
    if value <= 0:
        raise ValueError(f"Environment variable {var_name} must be positive, got '{raw}'")
    return value


@dataclass
class ClientSettings:
    """Connection settings for a KCloak client."""

    keycloak_url: str
    realm: str = "master"
    client_id: str = ADMIN_CLI
    client_secret: Optional[str] = None
    admin_username: Optional[str] = None
    admin_password: Optional[str] = None
    request_timeout: float = REQUEST_TIMEOUT
    verify_tls: bool = True
    legacy_wildfly_support: bool = False

    def __repr__(self) -> str:
        # Secrets stay out of logs and tracebacks
        return (
            f"ClientSettings(keycloak_url={self.keycloak_url!r}, realm={self.realm!r}, "
            f"client_id={self.client_id!r}, admin_username={self.admin_username!r}, "
            f"request_timeout={self.request_timeout!r}, verify_tls={self.verify_tls!r}, "
            f"legacy_wildfly_support={self.legacy_wildfly_support!r})"
        )


def load_settings() -> ClientSettings:
    """Load client settings from environment and /run/secrets.

    Raises:
        ValueError: If KEYCLOAK_URL is missing or a value cannot be parsed
    """
    keycloak_url = os.environ.get("KEYCLOAK_URL", "").strip()
    if not keycloak_url:
        raise ValueError("Environment variable KEYCLOAK_URL is required.")

    settings = ClientSettings(
        keycloak_url=keycloak_url.rstrip("/"),
        realm=os.environ.get("KEYCLOAK_REALM", "master").strip() or "master",
        client_id=os.environ.get("KEYCLOAK_CLIENT_ID", ADMIN_CLI).strip() or ADMIN_CLI,
        client_secret=_load_secret_from_file("keycloak_client_secret", "KEYCLOAK_CLIENT_SECRET"),
        admin_username=os.environ.get("KEYCLOAK_ADMIN") or None,
        admin_password=_load_secret_from_file("keycloak_admin_password", "KEYCLOAK_ADMIN_PASSWORD"),
        request_timeout=_get_timeout("KCLOAK_REQUEST_TIMEOUT", REQUEST_TIMEOUT),
        verify_tls=_get_bool("KCLOAK_VERIFY_TLS", True),
        legacy_wildfly_support=_get_bool("KCLOAK_LEGACY_WILDFLY", False),
    )
    logger.info(
        "Settings loaded: url=%s; realm=%s; client_id=%s",
        settings.keycloak_url,
        settings.realm,
        settings.client_id,
    )
    return settings
