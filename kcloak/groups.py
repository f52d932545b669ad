"""Keycloak group management operations."""
from __future__ import annotations
import logging
from typing import List, Optional

from .client import KCloak, admin_path, get_id, require
from .models import GetGroupsParams, Group, GroupsCount, User

logger = logging.getLogger(__name__)


class GroupService:
    """Service for managing Keycloak groups."""

    def __init__(self, client: KCloak):
        """Initialize group service.

        Args:
            client: Keycloak client
        """
        self.client = client

    def create_group(self, token: str, realm: str, group: Group) -> str:
        """Create a top-level group and return its ID.

        Raises:
            ConflictError: If a sibling group with the same name exists
        """
        logger.debug("Creating group in realm %s: %s", realm, group.redacted())
        resp = self.client.post(admin_path(realm, "groups"), token, json=group.to_dict())
        group_id = get_id(resp)
        logger.info("Group '%s' created in realm '%s' (id=%s)", group.name, realm, group_id)
        return group_id

    def create_child_group(self, token: str, realm: str, group_id: str, group: Group) -> str:
        """Create a subgroup below ``group_id`` and return its ID."""
        logger.debug("Creating child group of %s in realm %s: %s", group_id, realm, group.redacted())
        resp = self.client.post(
            admin_path(realm, "groups", group_id, "children"), token, json=group.to_dict()
        )
        return get_id(resp)

    def get_groups(self, token: str, realm: str, params: Optional[GetGroupsParams] = None) -> List[Group]:
        resp = self.client.get(admin_path(realm, "groups"), token, params=params)
        return Group.from_list(resp.json())

    def get_group(self, token: str, realm: str, group_id: str) -> Group:
        resp = self.client.get(admin_path(realm, "groups", group_id), token)
        return Group.from_dict(resp.json())

    def get_group_by_path(self, token: str, realm: str, group_path: str) -> Group:
        """Retrieve a group by its path (e.g., '/parent/child').

        Raises:
            NotFoundError: If no group has that path
        """
        segments = [segment for segment in group_path.split("/") if segment]
        resp = self.client.get(admin_path(realm, "group-by-path", *segments), token)
        return Group.from_dict(resp.json())

    def get_groups_count(self, token: str, realm: str, params: Optional[GetGroupsParams] = None) -> int:
        """Return the number of groups, honoring ``search`` when given."""
        resp = self.client.get(admin_path(realm, "groups", "count"), token, params=params)
        count = GroupsCount.from_dict(resp.json()).count
        return count or 0

    def update_group(self, token: str, realm: str, group: Group) -> None:
        group_id = require(group.id, "group.id")
        logger.debug("Updating group %s in realm %s: %s", group_id, realm, group.redacted())
        self.client.put(admin_path(realm, "groups", group_id), token, json=group.to_dict())

    def delete_group(self, token: str, realm: str, group_id: str) -> None:
        self.client.delete(admin_path(realm, "groups", group_id), token)
        logger.info("Group %s deleted from realm '%s'", group_id, realm)

    def get_group_members(
        self, token: str, realm: str, group_id: str, params: Optional[GetGroupsParams] = None
    ) -> List[User]:
        """List the users that are direct members of a group."""
        resp = self.client.get(admin_path(realm, "groups", group_id, "members"), token, params=params)
        return User.from_list(resp.json())
