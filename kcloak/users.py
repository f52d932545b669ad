"""Keycloak user management operations."""
from __future__ import annotations
import logging
from typing import List, Optional

from .client import KCloak, admin_path, get_id, require
from .models import (
    CredentialRepresentation,
    ExecuteActionsEmail,
    FederatedIdentityRepresentation,
    GetGroupsParams,
    GetUsersParams,
    SetPasswordRequest,
    User,
    UserGroup,
)

logger = logging.getLogger(__name__)


class UserService:
    """Service for managing Keycloak users."""

    def __init__(self, client: KCloak):
        """Initialize user service.

        Args:
            client: Keycloak client
        """
        self.client = client

    def create_user(self, token: str, realm: str, user: User) -> str:
        """Create a user.

        Args:
            token: Admin access token
            realm: Realm name
            user: User representation; ``username`` is required

        Returns:
            ID of the new user

        Raises:
            ConflictError: If the username or email already exists
        """
        logger.debug("Creating user in realm %s: %s", realm, user.redacted())
        resp = self.client.post(admin_path(realm, "users"), token, json=user.to_dict())
        user_id = get_id(resp)
        logger.info("User '%s' created in realm '%s' (id=%s)", user.username, realm, user_id)
        return user_id

    def get_users(self, token: str, realm: str, params: Optional[GetUsersParams] = None) -> List[User]:
        """Search users.

        Args:
            token: Admin access token
            realm: Realm name
            params: Filters and paging; None returns the server's first page

        Returns:
            Matching user representations
        """
        resp = self.client.get(admin_path(realm, "users"), token, params=params)
        return User.from_list(resp.json())

    def get_user_by_id(self, token: str, realm: str, user_id: str) -> User:
        resp = self.client.get(admin_path(realm, "users", user_id), token)
        return User.from_dict(resp.json())

    def get_users_count(self, token: str, realm: str, params: Optional[GetUsersParams] = None) -> int:
        resp = self.client.get(admin_path(realm, "users", "count"), token, params=params)
        return int(resp.json())

    def update_user(self, token: str, realm: str, user: User) -> None:
        """Update the user identified by ``user.id``."""
        user_id = require(user.id, "user.id")
        logger.debug("Updating user %s in realm %s: %s", user_id, realm, user.redacted())
        self.client.put(admin_path(realm, "users", user_id), token, json=user.to_dict())

    def delete_user(self, token: str, realm: str, user_id: str) -> None:
        self.client.delete(admin_path(realm, "users", user_id), token)
        logger.info("User %s deleted from realm '%s'", user_id, realm)

    def set_password(self, token: str, user_id: str, realm: str, password: str, temporary: bool) -> None:
        """Reset a user's password.

        Args:
            token: Admin access token
            user_id: User ID
            realm: Realm name
            password: New password
            temporary: Force the user to change it at next login
        """
        payload = SetPasswordRequest(type="password", temporary=temporary, password=password)
        self.client.put(admin_path(realm, "users", user_id, "reset-password"), token, json=payload.to_dict())

    def execute_actions_email(self, token: str, realm: str, params: ExecuteActionsEmail) -> None:
        """Send an email asking the user to perform required actions
        (UPDATE_PASSWORD, VERIFY_EMAIL, CONFIGURE_TOTP, ...)."""
        user_id = require(params.user_id, "params.user_id")
        self.client.put(
            admin_path(realm, "users", user_id, "execute-actions-email"),
            token,
            params=params,
            json=params.actions or [],
        )

    # ─────────────────────────────────────────────────────────────────────
    # Group membership
    # ─────────────────────────────────────────────────────────────────────
    def get_user_groups(
        self, token: str, realm: str, user_id: str, params: Optional[GetGroupsParams] = None
    ) -> List[UserGroup]:
        resp = self.client.get(admin_path(realm, "users", user_id, "groups"), token, params=params)
        return UserGroup.from_list(resp.json())

    def add_user_to_group(self, token: str, realm: str, user_id: str, group_id: str) -> None:
        """Add a user to a group; adding an existing member is a no-op on the server."""
        self.client.put(admin_path(realm, "users", user_id, "groups", group_id), token)

    def delete_user_from_group(self, token: str, realm: str, user_id: str, group_id: str) -> None:
        self.client.delete(admin_path(realm, "users", user_id, "groups", group_id), token)

    # ─────────────────────────────────────────────────────────────────────
    # Identities and credentials
    # ─────────────────────────────────────────────────────────────────────
    def get_user_federated_identities(
        self, token: str, realm: str, user_id: str
    ) -> List[FederatedIdentityRepresentation]:
        resp = self.client.get(admin_path(realm, "users", user_id, "federated-identity"), token)
        return FederatedIdentityRepresentation.from_list(resp.json())

    def get_credentials(self, token: str, realm: str, user_id: str) -> List[CredentialRepresentation]:
        resp = self.client.get(admin_path(realm, "users", user_id, "credentials"), token)
        return CredentialRepresentation.from_list(resp.json())

    def delete_credentials(self, token: str, realm: str, user_id: str, credential_id: str) -> None:
        self.client.delete(admin_path(realm, "users", user_id, "credentials", credential_id), token)
