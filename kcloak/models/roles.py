"""Role representations, role mappings and query parameters."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..query import param
from .base import Model, attr


@dataclass
class CompositesRepresentation(Model):
    client: Optional[Dict[str, List[str]]] = attr()
    realm: Optional[List[str]] = attr()


@dataclass
class Role(Model):
    """RoleRepresentation."""

    id: Optional[str] = attr()
    name: Optional[str] = attr()
    scope_param_required: Optional[bool] = attr()
    composite: Optional[bool] = attr()
    composites: Optional[CompositesRepresentation] = attr()
    client_role: Optional[bool] = attr()
    container_id: Optional[str] = attr()
    description: Optional[str] = attr()
    attributes: Optional[Dict[str, List[str]]] = attr()


@dataclass
class ClientMappingsRepresentation(Model):
    id: Optional[str] = attr()
    client: Optional[str] = attr()
    mappings: Optional[List[Role]] = attr()


@dataclass
class MappingsRepresentation(Model):
    """All realm and client roles mapped to a user or group."""

    client_mappings: Optional[Dict[str, ClientMappingsRepresentation]] = attr()
    realm_mappings: Optional[List[Role]] = attr()


@dataclass
class RolesRepresentation(Model):
    client: Optional[Dict[str, List[Role]]] = attr()
    realm: Optional[List[Role]] = attr()


@dataclass
class RoleDefinition(Model):
    id: Optional[str] = attr()
    private: Optional[bool] = attr()
    required: Optional[bool] = attr()


@dataclass
class GetRoleParams(Model):
    first: Optional[int] = param("first")
    max: Optional[int] = param("max")
    search: Optional[str] = param("search")
    brief_representation: Optional[bool] = param("briefRepresentation")
