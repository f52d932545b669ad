"""Keycloak authorization services.

Admin operations live below the client's resource server
(``/admin/realms/{realm}/clients/{id}/authz/resource-server``). The UMA
protection API (``/realms/{realm}/authz/protection``) is called with a
protection API token (PAT) obtained by the resource server itself.
"""
from __future__ import annotations
import logging
from typing import List, Optional

from .client import KCloak, admin_path, realm_path, require
from .models import (
    CreatePermissionTicketParams,
    GetPermissionParams,
    GetPolicyParams,
    GetResourceParams,
    GetResourcePoliciesParams,
    GetScopeParams,
    GetUserPermissionParams,
    PermissionGrantParams,
    PermissionGrantResponseRepresentation,
    PermissionRepresentation,
    PermissionTicketResponseRepresentation,
    PolicyRepresentation,
    ResourcePolicyRepresentation,
    ResourceRepresentation,
    ResourceServerRepresentation,
    ScopeRepresentation,
)

logger = logging.getLogger(__name__)


def _resource_server_path(realm: str, id_of_client: str, *segments: str) -> str:
    return admin_path(realm, "clients", id_of_client, "authz", "resource-server", *segments)


def _protection_path(realm: str, *segments: str) -> str:
    return realm_path(realm, "authz", "protection", *segments)


class AuthorizationService:
    """Service for managing resources, scopes, policies and permissions."""

    def __init__(self, client: KCloak):
        """Initialize authorization service.

        Args:
            client: Keycloak client
        """
        self.client = client

    def get_authorization_settings(self, token: str, realm: str, id_of_client: str) -> ResourceServerRepresentation:
        """Return the resource server settings of a client with authorization enabled."""
        resp = self.client.get(_resource_server_path(realm, id_of_client), token)
        return ResourceServerRepresentation.from_dict(resp.json())

    # ─────────────────────────────────────────────────────────────────────
    # Resources
    # ─────────────────────────────────────────────────────────────────────
    def create_resource(
        self, token: str, realm: str, id_of_client: str, resource: ResourceRepresentation
    ) -> ResourceRepresentation:
        """Create a resource.

        Returns:
            The stored resource, including its generated ID
        """
        logger.debug("Creating resource on client %s: %s", id_of_client, resource.redacted())
        resp = self.client.post(_resource_server_path(realm, id_of_client, "resource"), token, json=resource.to_dict())
        return ResourceRepresentation.from_dict(resp.json())

    def get_resources(
        self, token: str, realm: str, id_of_client: str, params: Optional[GetResourceParams] = None
    ) -> List[ResourceRepresentation]:
        resp = self.client.get(_resource_server_path(realm, id_of_client, "resource"), token, params=params)
        return ResourceRepresentation.from_list(resp.json())

    def get_resource(self, token: str, realm: str, id_of_client: str, resource_id: str) -> ResourceRepresentation:
        resp = self.client.get(_resource_server_path(realm, id_of_client, "resource", resource_id), token)
        return ResourceRepresentation.from_dict(resp.json())

    def update_resource(self, token: str, realm: str, id_of_client: str, resource: ResourceRepresentation) -> None:
        resource_id = require(resource.id, "resource.id")
        self.client.put(
            _resource_server_path(realm, id_of_client, "resource", resource_id), token, json=resource.to_dict()
        )

    def delete_resource(self, token: str, realm: str, id_of_client: str, resource_id: str) -> None:
        self.client.delete(_resource_server_path(realm, id_of_client, "resource", resource_id), token)

    # ─────────────────────────────────────────────────────────────────────
    # Scopes
    # ─────────────────────────────────────────────────────────────────────
    def create_scope(
        self, token: str, realm: str, id_of_client: str, scope: ScopeRepresentation
    ) -> ScopeRepresentation:
        logger.debug("Creating authorization scope on client %s: %s", id_of_client, scope.redacted())
        resp = self.client.post(_resource_server_path(realm, id_of_client, "scope"), token, json=scope.to_dict())
        return ScopeRepresentation.from_dict(resp.json())

    def get_scopes(
        self, token: str, realm: str, id_of_client: str, params: Optional[GetScopeParams] = None
    ) -> List[ScopeRepresentation]:
        resp = self.client.get(_resource_server_path(realm, id_of_client, "scope"), token, params=params)
        return ScopeRepresentation.from_list(resp.json())

    def get_scope(self, token: str, realm: str, id_of_client: str, scope_id: str) -> ScopeRepresentation:
        resp = self.client.get(_resource_server_path(realm, id_of_client, "scope", scope_id), token)
        return ScopeRepresentation.from_dict(resp.json())

    def delete_scope(self, token: str, realm: str, id_of_client: str, scope_id: str) -> None:
        self.client.delete(_resource_server_path(realm, id_of_client, "scope", scope_id), token)

    # ─────────────────────────────────────────────────────────────────────
    # Policies
    # ─────────────────────────────────────────────────────────────────────
    def create_policy(
        self, token: str, realm: str, id_of_client: str, policy: PolicyRepresentation
    ) -> PolicyRepresentation:
        """Create a policy.

        Args:
            token: Admin access token
            realm: Realm name
            id_of_client: Internal ID of the resource server client
            policy: Policy; ``type`` selects the provider ("role", "user", ...)

        Returns:
            The stored policy
        """
        policy_type = require(policy.type, "policy.type")
        logger.debug("Creating %s policy on client %s: %s", policy_type, id_of_client, policy.redacted())
        resp = self.client.post(
            _resource_server_path(realm, id_of_client, "policy", policy_type), token, json=policy.to_dict()
        )
        return PolicyRepresentation.from_dict(resp.json())

    def get_policies(
        self, token: str, realm: str, id_of_client: str, params: Optional[GetPolicyParams] = None
    ) -> List[PolicyRepresentation]:
        resp = self.client.get(_resource_server_path(realm, id_of_client, "policy"), token, params=params)
        return PolicyRepresentation.from_list(resp.json())

    def get_policy(self, token: str, realm: str, id_of_client: str, policy_id: str) -> PolicyRepresentation:
        resp = self.client.get(_resource_server_path(realm, id_of_client, "policy", policy_id), token)
        return PolicyRepresentation.from_dict(resp.json())

    def update_policy(self, token: str, realm: str, id_of_client: str, policy: PolicyRepresentation) -> None:
        policy_type = require(policy.type, "policy.type")
        policy_id = require(policy.id, "policy.id")
        self.client.put(
            _resource_server_path(realm, id_of_client, "policy", policy_type, policy_id),
            token,
            json=policy.to_dict(),
        )

    def delete_policy(self, token: str, realm: str, id_of_client: str, policy_id: str) -> None:
        self.client.delete(_resource_server_path(realm, id_of_client, "policy", policy_id), token)

    # ─────────────────────────────────────────────────────────────────────
    # Permissions
    # ─────────────────────────────────────────────────────────────────────
    def create_permission(
        self, token: str, realm: str, id_of_client: str, permission: PermissionRepresentation
    ) -> PermissionRepresentation:
        """Create a "resource" or "scope" permission, chosen by ``permission.type``."""
        permission_type = require(permission.type, "permission.type")
        logger.debug(
            "Creating %s permission on client %s: %s", permission_type, id_of_client, permission.redacted()
        )
        resp = self.client.post(
            _resource_server_path(realm, id_of_client, "permission", permission_type),
            token,
            json=permission.to_dict(),
        )
        return PermissionRepresentation.from_dict(resp.json())

    def get_permissions(
        self, token: str, realm: str, id_of_client: str, params: Optional[GetPermissionParams] = None
    ) -> List[PermissionRepresentation]:
        resp = self.client.get(_resource_server_path(realm, id_of_client, "permission"), token, params=params)
        return PermissionRepresentation.from_list(resp.json())

    def get_permission(
        self, token: str, realm: str, id_of_client: str, permission_id: str
    ) -> PermissionRepresentation:
        resp = self.client.get(_resource_server_path(realm, id_of_client, "permission", permission_id), token)
        return PermissionRepresentation.from_dict(resp.json())

    def update_permission(
        self, token: str, realm: str, id_of_client: str, permission: PermissionRepresentation
    ) -> None:
        permission_type = require(permission.type, "permission.type")
        permission_id = require(permission.id, "permission.id")
        self.client.put(
            _resource_server_path(realm, id_of_client, "permission", permission_type, permission_id),
            token,
            json=permission.to_dict(),
        )

    def delete_permission(self, token: str, realm: str, id_of_client: str, permission_id: str) -> None:
        self.client.delete(_resource_server_path(realm, id_of_client, "permission", permission_id), token)

    # ─────────────────────────────────────────────────────────────────────
    # UMA protection API
    # ─────────────────────────────────────────────────────────────────────
    def create_permission_ticket(
        self, token: str, realm: str, permissions: List[CreatePermissionTicketParams]
    ) -> PermissionTicketResponseRepresentation:
        """Request a permission ticket for the given resources and scopes.

        Args:
            token: Protection API token of the resource server
            realm: Realm name
            permissions: Requested resource/scope pairs

        Returns:
            The ticket to hand to the client for a requesting party token
        """
        payload = [permission.to_dict() for permission in permissions]
        resp = self.client.post(_protection_path(realm, "permission"), token, json=payload)
        return PermissionTicketResponseRepresentation.from_dict(resp.json())

    def grant_user_permission(
        self, token: str, realm: str, permission: PermissionGrantParams
    ) -> PermissionGrantResponseRepresentation:
        require(permission.resource_id, "permission.resource_id")
        require(permission.requester, "permission.requester")
        resp = self.client.post(_protection_path(realm, "permission", "ticket"), token, json=permission.to_dict())
        return PermissionGrantResponseRepresentation.from_dict(resp.json())

    def get_user_permissions(
        self, token: str, realm: str, params: Optional[GetUserPermissionParams] = None
    ) -> List[PermissionGrantResponseRepresentation]:
        resp = self.client.get(_protection_path(realm, "permission", "ticket"), token, params=params)
        return PermissionGrantResponseRepresentation.from_list(resp.json())

    def get_resource_policies(
        self, token: str, realm: str, params: Optional[GetResourcePoliciesParams] = None
    ) -> List[ResourcePolicyRepresentation]:
        resp = self.client.get(_protection_path(realm, "uma-policy"), token, params=params)
        return ResourcePolicyRepresentation.from_list(resp.json())
