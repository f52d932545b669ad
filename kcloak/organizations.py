"""Keycloak organization operations (Keycloak 25 and later, with the
organization feature enabled on the realm)."""
from __future__ import annotations
import logging
from typing import List, Optional

from .client import KCloak, admin_path, get_id, require
from .models import GetOrganizationsParams, OrganizationRepresentation

logger = logging.getLogger(__name__)


class OrganizationService:
    """Service for managing Keycloak organizations."""

    def __init__(self, client: KCloak):
        """Initialize organization service.

        Args:
            client: Keycloak client
        """
        self.client = client

    def create_organization(self, token: str, realm: str, organization: OrganizationRepresentation) -> str:
        """Create an organization and return its ID.

        At least one domain is required by the server.
        """
        logger.debug("Creating organization in realm %s: %s", realm, organization.redacted())
        resp = self.client.post(admin_path(realm, "organizations"), token, json=organization.to_dict())
        return get_id(resp)

    def get_organizations(
        self, token: str, realm: str, params: Optional[GetOrganizationsParams] = None
    ) -> List[OrganizationRepresentation]:
        resp = self.client.get(admin_path(realm, "organizations"), token, params=params)
        return OrganizationRepresentation.from_list(resp.json())

    def get_organization_by_id(self, token: str, realm: str, organization_id: str) -> OrganizationRepresentation:
        resp = self.client.get(admin_path(realm, "organizations", organization_id), token)
        return OrganizationRepresentation.from_dict(resp.json())

    def update_organization(self, token: str, realm: str, organization: OrganizationRepresentation) -> None:
        organization_id = require(organization.id, "organization.id")
        self.client.put(admin_path(realm, "organizations", organization_id), token, json=organization.to_dict())

    def delete_organization(self, token: str, realm: str, organization_id: str) -> None:
        self.client.delete(admin_path(realm, "organizations", organization_id), token)
        logger.info("Organization %s deleted from realm '%s'", organization_id, realm)
