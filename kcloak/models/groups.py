"""Group representations and query parameters."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..query import param
from .base import Model, attr


@dataclass
class Group(Model):
    """GroupRepresentation."""

    id: Optional[str] = attr()
    name: Optional[str] = attr()
    path: Optional[str] = attr()
    parent_id: Optional[str] = attr()
    sub_group_count: Optional[int] = attr()
    sub_groups: Optional[List[Group]] = attr()
    attributes: Optional[Dict[str, List[str]]] = attr()
    access: Optional[Dict[str, bool]] = attr()
    client_roles: Optional[Dict[str, List[str]]] = attr()
    realm_roles: Optional[List[str]] = attr()


@dataclass
class GroupsCount(Model):
    count: Optional[int] = attr()


@dataclass
class GetGroupsParams(Model):
    brief_representation: Optional[bool] = param("briefRepresentation")
    exact: Optional[bool] = param("exact")
    first: Optional[int] = param("first")
    full: Optional[bool] = param("full")
    max: Optional[int] = param("max")
    q: Optional[str] = param("q")
    search: Optional[str] = param("search")
    populate_hierarchy: Optional[bool] = param("populateHierarchy")
