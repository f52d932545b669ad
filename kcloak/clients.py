"""Keycloak client, client scope and protocol mapper operations."""
from __future__ import annotations
import logging
from typing import List, Optional

from .client import KCloak, admin_path, get_id, require
from .models import (
    Client,
    ClientScope,
    CredentialSecret,
    GetClientsParams,
    ProtocolMapperRepresentation,
    User,
)

logger = logging.getLogger(__name__)


class ClientService:
    """Service for managing Keycloak clients.

    ``id_of_client`` is always the internal UUID (``Client.id``). Use
    :meth:`get_clients` with ``GetClientsParams(client_id=...)`` to resolve
    it from the public ``clientId``.
    """

    def __init__(self, client: KCloak):
        """Initialize client service.

        Args:
            client: Keycloak client
        """
        self.client = client

    def create_client(self, token: str, realm: str, new_client: Client) -> str:
        """Create a client.

        Args:
            token: Admin access token
            realm: Realm name
            new_client: Client representation; ``client_id`` is required

        Returns:
            Internal ID of the new client

        Raises:
            ConflictError: If the clientId is already taken
        """
        logger.debug("Creating client in realm %s: %s", realm, new_client.redacted())
        resp = self.client.post(admin_path(realm, "clients"), token, json=new_client.to_dict())
        id_of_client = get_id(resp)
        logger.info("Client '%s' created in realm '%s' (id=%s)", new_client.client_id, realm, id_of_client)
        return id_of_client

    def get_clients(self, token: str, realm: str, params: Optional[GetClientsParams] = None) -> List[Client]:
        resp = self.client.get(admin_path(realm, "clients"), token, params=params)
        return Client.from_list(resp.json())

    def get_client(self, token: str, realm: str, id_of_client: str) -> Client:
        resp = self.client.get(admin_path(realm, "clients", id_of_client), token)
        return Client.from_dict(resp.json())

    def update_client(self, token: str, realm: str, updated_client: Client) -> None:
        id_of_client = require(updated_client.id, "client.id")
        logger.debug("Updating client %s in realm %s: %s", id_of_client, realm, updated_client.redacted())
        self.client.put(admin_path(realm, "clients", id_of_client), token, json=updated_client.to_dict())

    def delete_client(self, token: str, realm: str, id_of_client: str) -> None:
        self.client.delete(admin_path(realm, "clients", id_of_client), token)
        logger.info("Client %s deleted from realm '%s'", id_of_client, realm)

    def get_client_secret(self, token: str, realm: str, id_of_client: str) -> CredentialSecret:
        """Return the current secret of a confidential client."""
        resp = self.client.get(admin_path(realm, "clients", id_of_client, "client-secret"), token)
        return CredentialSecret.from_dict(resp.json())

    def regenerate_client_secret(self, token: str, realm: str, id_of_client: str) -> CredentialSecret:
        """Generate a new secret; the previous one stops working immediately."""
        resp = self.client.post(admin_path(realm, "clients", id_of_client, "client-secret"), token)
        logger.info("Secret regenerated for client %s in realm '%s'", id_of_client, realm)
        return CredentialSecret.from_dict(resp.json())

    def get_client_service_account(self, token: str, realm: str, id_of_client: str) -> User:
        """Return the service-account user of a client with service accounts enabled."""
        resp = self.client.get(admin_path(realm, "clients", id_of_client, "service-account-user"), token)
        return User.from_dict(resp.json())

    # ─────────────────────────────────────────────────────────────────────
    # Protocol mappers
    # ─────────────────────────────────────────────────────────────────────
    def create_client_protocol_mapper(
        self, token: str, realm: str, id_of_client: str, mapper: ProtocolMapperRepresentation
    ) -> str:
        logger.debug("Creating protocol mapper on client %s: %s", id_of_client, mapper.redacted())
        resp = self.client.post(
            admin_path(realm, "clients", id_of_client, "protocol-mappers", "models"),
            token,
            json=mapper.to_dict(),
        )
        return get_id(resp)

    def delete_client_protocol_mapper(self, token: str, realm: str, id_of_client: str, mapper_id: str) -> None:
        self.client.delete(
            admin_path(realm, "clients", id_of_client, "protocol-mappers", "models", mapper_id), token
        )

    # ─────────────────────────────────────────────────────────────────────
    # Client scopes
    # ─────────────────────────────────────────────────────────────────────
    def create_client_scope(self, token: str, realm: str, scope: ClientScope) -> str:
        logger.debug("Creating client scope in realm %s: %s", realm, scope.redacted())
        resp = self.client.post(admin_path(realm, "client-scopes"), token, json=scope.to_dict())
        return get_id(resp)

    def get_client_scopes(self, token: str, realm: str) -> List[ClientScope]:
        resp = self.client.get(admin_path(realm, "client-scopes"), token)
        return ClientScope.from_list(resp.json())

    def delete_client_scope(self, token: str, realm: str, scope_id: str) -> None:
        self.client.delete(admin_path(realm, "client-scopes", scope_id), token)
