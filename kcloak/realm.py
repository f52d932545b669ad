"""Keycloak realm management operations: realms, caches, keys, components
and identity providers."""
from __future__ import annotations
import logging
from typing import List, Optional

from .client import KCloak, admin_path, get_id, require, url_path
from .models import (
    Component,
    GetComponentsParams,
    IdentityProviderRepresentation,
    KeyStoreConfig,
    RealmRepresentation,
)

logger = logging.getLogger(__name__)


class RealmService:
    """Service for managing Keycloak realms."""

    def __init__(self, client: KCloak):
        """Initialize realm service.

        Args:
            client: Keycloak client
        """
        self.client = client

    def get_realm(self, token: str, realm: str) -> RealmRepresentation:
        """Return the top-level representation of a realm.

        Raises:
            NotFoundError: If the realm does not exist
        """
        resp = self.client.get(admin_path(realm), token)
        return RealmRepresentation.from_dict(resp.json())

    def get_realms(self, token: str) -> List[RealmRepresentation]:
        resp = self.client.get(url_path("admin", "realms"), token)
        return RealmRepresentation.from_list(resp.json())

    def create_realm(self, token: str, realm: RealmRepresentation) -> str:
        """Create a realm.

        Args:
            token: Admin access token
            realm: Realm representation; ``realm`` (the name) is required

        Returns:
            Name of the created realm
        """
        logger.debug("Creating realm: %s", realm.redacted())
        resp = self.client.post(url_path("admin", "realms"), token, json=realm.to_dict())
        return get_id(resp) or (realm.realm or "")

    def update_realm(self, token: str, realm: RealmRepresentation) -> None:
        """Update the realm named by ``realm.realm``; absent fields are left unchanged."""
        logger.debug("Updating realm: %s", realm.redacted())
        self.client.put(admin_path(require(realm.realm, "realm.realm")), token, json=realm.to_dict())

    def delete_realm(self, token: str, realm: str) -> None:
        self.client.delete(admin_path(realm), token)
        logger.info("Realm '%s' deleted", realm)

    def clear_realm_cache(self, token: str, realm: str) -> None:
        self.client.post(admin_path(realm, "clear-realm-cache"), token)

    def clear_user_cache(self, token: str, realm: str) -> None:
        self.client.post(admin_path(realm, "clear-user-cache"), token)

    def clear_keys_cache(self, token: str, realm: str) -> None:
        self.client.post(admin_path(realm, "clear-keys-cache"), token)

    def get_keys(self, token: str, realm: str) -> KeyStoreConfig:
        """Return the realm's active keys and key metadata."""
        resp = self.client.get(admin_path(realm, "keys"), token)
        return KeyStoreConfig.from_dict(resp.json())

    # ─────────────────────────────────────────────────────────────────────
    # Components (user federation, key providers, ...)
    # ─────────────────────────────────────────────────────────────────────
    def get_components(
        self, token: str, realm: str, params: Optional[GetComponentsParams] = None
    ) -> List[Component]:
        resp = self.client.get(admin_path(realm, "components"), token, params=params)
        return Component.from_list(resp.json())

    def create_component(self, token: str, realm: str, component: Component) -> str:
        """Create a component and return its ID."""
        logger.debug("Creating component in realm %s: %s", realm, component.redacted())
        resp = self.client.post(admin_path(realm, "components"), token, json=component.to_dict())
        return get_id(resp)

    def update_component(self, token: str, realm: str, component: Component) -> None:
        component_id = require(component.id, "component.id")
        self.client.put(admin_path(realm, "components", component_id), token, json=component.to_dict())

    def delete_component(self, token: str, realm: str, component_id: str) -> None:
        self.client.delete(admin_path(realm, "components", component_id), token)

    # ─────────────────────────────────────────────────────────────────────
    # Identity providers
    # ─────────────────────────────────────────────────────────────────────
    def get_identity_providers(self, token: str, realm: str) -> List[IdentityProviderRepresentation]:
        resp = self.client.get(admin_path(realm, "identity-provider", "instances"), token)
        return IdentityProviderRepresentation.from_list(resp.json())

    def create_identity_provider(
        self, token: str, realm: str, provider: IdentityProviderRepresentation
    ) -> str:
        """Create an identity provider and return its alias."""
        resp = self.client.post(
            admin_path(realm, "identity-provider", "instances"), token, json=provider.to_dict()
        )
        return get_id(resp) or (provider.alias or "")

    def delete_identity_provider(self, token: str, realm: str, alias: str) -> None:
        self.client.delete(admin_path(realm, "identity-provider", "instances", alias), token)
