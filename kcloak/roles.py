"""Keycloak role management operations: realm roles, client roles, role
mappings and composites.

Client-level operations take the client's internal ID (``Client.id``), not
its ``clientId``.
"""
from __future__ import annotations
import logging
from typing import List, Optional

from .client import KCloak, admin_path, require
from .models import GetRoleParams, GetUsersByRoleParams, MappingsRepresentation, Role, User

logger = logging.getLogger(__name__)


def _role_list(roles: List[Role]) -> list:
    return [role.to_dict() for role in roles]


class RoleService:
    """Service for managing Keycloak roles."""

    def __init__(self, client: KCloak):
        """Initialize role service.

        Args:
            client: Keycloak client
        """
        self.client = client

    # ─────────────────────────────────────────────────────────────────────
    # Realm roles
    # ─────────────────────────────────────────────────────────────────────
    def create_realm_role(self, token: str, realm: str, role: Role) -> str:
        """Create a realm role.

        Args:
            token: Admin access token
            realm: Realm name
            role: Role representation; ``name`` is required

        Returns:
            Name of the created role
        """
        name = require(role.name, "role.name")
        logger.debug("Creating realm role in realm %s: %s", realm, role.redacted())
        self.client.post(admin_path(realm, "roles"), token, json=role.to_dict())
        logger.info("Realm role '%s' created in realm '%s'", name, realm)
        return name

    def get_realm_roles(self, token: str, realm: str, params: Optional[GetRoleParams] = None) -> List[Role]:
        resp = self.client.get(admin_path(realm, "roles"), token, params=params)
        return Role.from_list(resp.json())

    def get_realm_role(self, token: str, realm: str, role_name: str) -> Role:
        """Get a realm role by name.

        Raises:
            NotFoundError: If the role does not exist
        """
        resp = self.client.get(admin_path(realm, "roles", role_name), token)
        return Role.from_dict(resp.json())

    def update_realm_role(self, token: str, realm: str, role_name: str, role: Role) -> None:
        """Update (or rename) the realm role currently named ``role_name``."""
        self.client.put(admin_path(realm, "roles", role_name), token, json=role.to_dict())

    def delete_realm_role(self, token: str, realm: str, role_name: str) -> None:
        self.client.delete(admin_path(realm, "roles", role_name), token)

    # ─────────────────────────────────────────────────────────────────────
    # Client roles
    # ─────────────────────────────────────────────────────────────────────
    def create_client_role(self, token: str, realm: str, id_of_client: str, role: Role) -> str:
        name = require(role.name, "role.name")
        logger.debug("Creating role of client %s in realm %s: %s", id_of_client, realm, role.redacted())
        self.client.post(admin_path(realm, "clients", id_of_client, "roles"), token, json=role.to_dict())
        return name

    def get_client_roles(
        self, token: str, realm: str, id_of_client: str, params: Optional[GetRoleParams] = None
    ) -> List[Role]:
        resp = self.client.get(admin_path(realm, "clients", id_of_client, "roles"), token, params=params)
        return Role.from_list(resp.json())

    def get_client_role(self, token: str, realm: str, id_of_client: str, role_name: str) -> Role:
        resp = self.client.get(admin_path(realm, "clients", id_of_client, "roles", role_name), token)
        return Role.from_dict(resp.json())

    def delete_client_role(self, token: str, realm: str, id_of_client: str, role_name: str) -> None:
        self.client.delete(admin_path(realm, "clients", id_of_client, "roles", role_name), token)

    # ─────────────────────────────────────────────────────────────────────
    # Role mappings
    # ─────────────────────────────────────────────────────────────────────
    def add_realm_role_to_user(self, token: str, realm: str, user_id: str, roles: List[Role]) -> None:
        """Map realm roles to a user.

        Each role needs at least ``id`` and ``name``, as returned by
        :meth:`get_realm_role`.
        """
        self.client.post(
            admin_path(realm, "users", user_id, "role-mappings", "realm"), token, json=_role_list(roles)
        )
        logger.info(
            "Realm roles %s granted to user %s in realm '%s'", [r.name for r in roles], user_id, realm
        )

    def delete_realm_role_from_user(self, token: str, realm: str, user_id: str, roles: List[Role]) -> None:
        self.client.delete(
            admin_path(realm, "users", user_id, "role-mappings", "realm"), token, json=_role_list(roles)
        )

    def get_realm_roles_by_user_id(self, token: str, realm: str, user_id: str) -> List[Role]:
        resp = self.client.get(admin_path(realm, "users", user_id, "role-mappings", "realm"), token)
        return Role.from_list(resp.json())

    def add_client_roles_to_user(
        self, token: str, realm: str, id_of_client: str, user_id: str, roles: List[Role]
    ) -> None:
        self.client.post(
            admin_path(realm, "users", user_id, "role-mappings", "clients", id_of_client),
            token,
            json=_role_list(roles),
        )

    def delete_client_roles_from_user(
        self, token: str, realm: str, id_of_client: str, user_id: str, roles: List[Role]
    ) -> None:
        self.client.delete(
            admin_path(realm, "users", user_id, "role-mappings", "clients", id_of_client),
            token,
            json=_role_list(roles),
        )

    def get_client_roles_by_user_id(self, token: str, realm: str, id_of_client: str, user_id: str) -> List[Role]:
        resp = self.client.get(
            admin_path(realm, "users", user_id, "role-mappings", "clients", id_of_client), token
        )
        return Role.from_list(resp.json())

    def add_realm_role_to_group(self, token: str, realm: str, group_id: str, roles: List[Role]) -> None:
        self.client.post(
            admin_path(realm, "groups", group_id, "role-mappings", "realm"), token, json=_role_list(roles)
        )

    def get_role_mapping_by_user_id(self, token: str, realm: str, user_id: str) -> MappingsRepresentation:
        """Return every realm and client role mapped directly to the user."""
        resp = self.client.get(admin_path(realm, "users", user_id, "role-mappings"), token)
        return MappingsRepresentation.from_dict(resp.json())

    # ─────────────────────────────────────────────────────────────────────
    # Composites
    # ─────────────────────────────────────────────────────────────────────
    def add_realm_role_composite(self, token: str, realm: str, role_name: str, roles: List[Role]) -> None:
        """Make ``role_name`` a composite containing ``roles``."""
        self.client.post(admin_path(realm, "roles", role_name, "composites"), token, json=_role_list(roles))

    def get_composite_realm_roles(self, token: str, realm: str, role_name: str) -> List[Role]:
        resp = self.client.get(admin_path(realm, "roles", role_name, "composites"), token)
        return Role.from_list(resp.json())

    def get_users_by_role(
        self, token: str, realm: str, role_name: str, params: Optional[GetUsersByRoleParams] = None
    ) -> List[User]:
        """List the users that hold a realm role directly."""
        resp = self.client.get(admin_path(realm, "roles", role_name, "users"), token, params=params)
        return User.from_list(resp.json())
