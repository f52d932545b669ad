"""Keycloak session management operations."""
from __future__ import annotations
import logging
from typing import List, Optional

from .client import KCloak, admin_path
from .models import GetClientUserSessionsParams, UserSessionRepresentation

logger = logging.getLogger(__name__)


class SessionService:
    """Service for managing Keycloak user sessions."""

    def __init__(self, client: KCloak):
        """Initialize session service.

        Args:
            client: Keycloak client
        """
        self.client = client

    def get_user_sessions(self, token: str, realm: str, user_id: str) -> List[UserSessionRepresentation]:
        """Get all active sessions for a user.

        Args:
            token: Admin access token
            realm: Realm name
            user_id: User ID

        Returns:
            List of active session representations
        """
        resp = self.client.get(admin_path(realm, "users", user_id, "sessions"), token)
        return UserSessionRepresentation.from_list(resp.json() or [])

    def get_user_offline_sessions(
        self, token: str, realm: str, user_id: str, id_of_client: str
    ) -> List[UserSessionRepresentation]:
        """Get the user's offline sessions for one client (by internal client ID)."""
        resp = self.client.get(
            admin_path(realm, "users", user_id, "offline-sessions", id_of_client), token
        )
        return UserSessionRepresentation.from_list(resp.json() or [])

    def get_client_user_sessions(
        self,
        token: str,
        realm: str,
        id_of_client: str,
        params: Optional[GetClientUserSessionsParams] = None,
    ) -> List[UserSessionRepresentation]:
        resp = self.client.get(
            admin_path(realm, "clients", id_of_client, "user-sessions"), token, params=params
        )
        return UserSessionRepresentation.from_list(resp.json() or [])

    def logout_all_sessions(self, token: str, realm: str, user_id: str) -> None:
        """Remove every session of a user."""
        self.client.post(admin_path(realm, "users", user_id, "logout"), token)

    def logout_user_session(self, token: str, realm: str, session_id: str) -> None:
        """Remove a single session."""
        self.client.delete(admin_path(realm, "sessions", session_id), token)

    def revoke_user_sessions(self, token: str, realm: str, user_id: str) -> int:
        """Revoke all active sessions for a user.

        Args:
            token: Admin access token
            realm: Realm name
            user_id: User ID

        Returns:
            Number of sessions revoked
        """
        active_sessions = self.get_user_sessions(token, realm, user_id)
        if not active_sessions:
            return 0
        self.logout_all_sessions(token, realm, user_id)
        logger.info("Revoked %d active session(s) of user %s", len(active_sessions), user_id)
        return len(active_sessions)
