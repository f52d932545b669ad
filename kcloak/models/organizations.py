"""Organization representations (Keycloak 25+)."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..query import param
from .base import Model, attr


@dataclass
class OrganizationDomainRepresentation(Model):
    name: Optional[str] = attr()
    verified: Optional[bool] = attr()


@dataclass
class OrganizationRepresentation(Model):
    id: Optional[str] = attr()
    name: Optional[str] = attr()
    alias: Optional[str] = attr()
    enabled: Optional[bool] = attr()
    redirect_url: Optional[str] = attr()
    description: Optional[str] = attr()
    domains: Optional[List[OrganizationDomainRepresentation]] = attr()
    attributes: Optional[Dict[str, List[str]]] = attr()


@dataclass
class GetOrganizationsParams(Model):
    brief_representation: Optional[bool] = param("briefRepresentation")
    exact: Optional[bool] = param("exact")
    first: Optional[int] = param("first")
    max: Optional[int] = param("max")
    q: Optional[str] = param("q")
    search: Optional[str] = param("search")
