"""Authorization services: resource servers, resources, scopes, policies,
permissions and UMA permission tickets."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..query import param
from .base import Model, attr
from .roles import RoleDefinition


@dataclass
class ResourceOwnerRepresentation(Model):
    id: Optional[str] = attr()
    name: Optional[str] = attr()


@dataclass
class ScopeRepresentation(Model):
    id: Optional[str] = attr()
    name: Optional[str] = attr()
    display_name: Optional[str] = attr()
    icon_uri: Optional[str] = attr()
    policies: Optional[List[PolicyRepresentation]] = attr()
    resources: Optional[List[ResourceRepresentation]] = attr()


@dataclass
class ResourceRepresentation(Model):
    id: Optional[str] = attr("_id")
    name: Optional[str] = attr()
    display_name: Optional[str] = attr()
    type: Optional[str] = attr()
    owner: Optional[ResourceOwnerRepresentation] = attr()
    owner_managed_access: Optional[bool] = attr()
    attributes: Optional[Dict[str, List[str]]] = attr()
    uris: Optional[List[str]] = attr()
    resource_scopes: Optional[List[ScopeRepresentation]] = attr("scopes")
    icon_uri: Optional[str] = attr()


@dataclass
class GroupDefinition(Model):
    id: Optional[str] = attr()
    path: Optional[str] = attr()
    extend_children: Optional[bool] = attr()


@dataclass
class PolicyRepresentation(Model):
    """AbstractPolicyRepresentation with the type specific fields flattened in.

    Keycloak reads only the fields that belong to ``type`` ("role", "js",
    "client", "time", "user", "aggregate", "group").
    """

    id: Optional[str] = attr()
    name: Optional[str] = attr()
    description: Optional[str] = attr()
    type: Optional[str] = attr()
    policies: Optional[List[str]] = attr()
    resources: Optional[List[str]] = attr()
    scopes: Optional[List[str]] = attr()
    logic: Optional[str] = attr()
    decision_strategy: Optional[str] = attr()
    owner: Optional[str] = attr()
    resource_type: Optional[str] = attr()
    config: Optional[Dict[str, str]] = attr()
    # role
    roles: Optional[List[RoleDefinition]] = attr()
    fetch_roles: Optional[bool] = attr()
    # js
    code: Optional[str] = attr()
    # client
    clients: Optional[List[str]] = attr()
    # time
    not_before: Optional[str] = attr("notBefore")
    not_on_or_after: Optional[str] = attr("notOnOrAfter")
    day_month: Optional[str] = attr()
    day_month_end: Optional[str] = attr()
    month: Optional[str] = attr()
    month_end: Optional[str] = attr()
    year: Optional[str] = attr()
    year_end: Optional[str] = attr()
    hour: Optional[str] = attr()
    hour_end: Optional[str] = attr()
    minute: Optional[str] = attr()
    minute_end: Optional[str] = attr()
    # user
    users: Optional[List[str]] = attr()
    # group
    groups: Optional[List[GroupDefinition]] = attr()
    groups_claim: Optional[str] = attr()


@dataclass
class PermissionRepresentation(Model):
    id: Optional[str] = attr()
    name: Optional[str] = attr()
    description: Optional[str] = attr()
    type: Optional[str] = attr()
    logic: Optional[str] = attr()
    decision_strategy: Optional[str] = attr()
    policies: Optional[List[str]] = attr()
    resources: Optional[List[str]] = attr()
    resource_type: Optional[str] = attr()
    scopes: Optional[List[str]] = attr()


@dataclass
class PermissionResource(Model):
    id: Optional[str] = attr("_id")
    name: Optional[str] = attr()


@dataclass
class PermissionScope(Model):
    id: Optional[str] = attr()
    name: Optional[str] = attr()


@dataclass
class ResourceServerRepresentation(Model):
    """Authorization settings of a client."""

    allow_remote_resource_management: Optional[bool] = attr()
    client_id: Optional[str] = attr()
    id: Optional[str] = attr()
    name: Optional[str] = attr()
    policies: Optional[List[PolicyRepresentation]] = attr()
    policy_enforcement_mode: Optional[str] = attr()
    resources: Optional[List[ResourceRepresentation]] = attr()
    scopes: Optional[List[ScopeRepresentation]] = attr()
    decision_strategy: Optional[str] = attr()


@dataclass
class AccessRepresentation(Model):
    impersonate: Optional[bool] = attr()
    manage: Optional[bool] = attr()
    manage_group_membership: Optional[bool] = attr()
    map_roles: Optional[bool] = attr()
    view: Optional[bool] = attr()


@dataclass
class PermissionTicketDescriptionRepresentation(Model):
    id: Optional[str] = attr()
    created_time_stamp: Optional[int] = attr("createdTimestamp")
    email: Optional[str] = attr()
    enabled: Optional[bool] = attr()
    first_name: Optional[str] = attr()
    last_name: Optional[str] = attr()
    username: Optional[str] = attr()
    required_actions: Optional[List[str]] = attr()
    access: Optional[AccessRepresentation] = attr()


@dataclass
class CreatePermissionTicketParams(Model):
    """One entry of a UMA permission ticket request."""

    resource_id: Optional[str] = attr("resource_id")
    resource_scopes: Optional[List[str]] = attr("resource_scopes")
    claims: Optional[Dict[str, List[str]]] = attr()


@dataclass
class PermissionTicketResponseRepresentation(Model):
    ticket: Optional[str] = attr()


@dataclass
class PermissionTicketPermissionRepresentation(Model):
    claims: Optional[Dict[str, Any]] = attr()
    rsid: Optional[str] = attr()
    scopes: Optional[List[str]] = attr()


@dataclass
class PermissionTicketRepresentation(Model):
    """Decoded payload of a permission ticket."""

    az_permissions: Optional[List[PermissionTicketPermissionRepresentation]] = attr("permissions")
    aud: Optional[List[str]] = attr()
    exp: Optional[int] = attr()
    iat: Optional[int] = attr()
    iss: Optional[str] = attr()
    jti: Optional[str] = attr()


@dataclass
class PermissionGrantParams(Model):
    """Grant or deny a requester access to a resource scope."""

    id: Optional[str] = attr()
    resource_id: Optional[str] = attr("resource")
    requester: Optional[str] = attr()
    granted: Optional[bool] = attr()
    scope_name: Optional[str] = attr("scopeName")


@dataclass
class PermissionGrantResponseRepresentation(Model):
    id: Optional[str] = attr()
    owner: Optional[str] = attr()
    resource_id: Optional[str] = attr("resource")
    scope: Optional[str] = attr()
    granted: Optional[bool] = attr()
    requester: Optional[str] = attr()


@dataclass
class ResourcePolicyRepresentation(Model):
    """User-managed policy attached to a resource through the protection API."""

    name: Optional[str] = attr()
    description: Optional[str] = attr()
    scopes: Optional[List[str]] = attr()
    roles: Optional[List[str]] = attr()
    groups: Optional[List[str]] = attr()
    clients: Optional[List[str]] = attr()
    id: Optional[str] = attr()
    logic: Optional[str] = attr()
    decision_strategy: Optional[str] = attr()
    owner: Optional[str] = attr()
    type: Optional[str] = attr()
    users: Optional[List[str]] = attr()


@dataclass
class GetResourceParams(Model):
    deep: Optional[bool] = param("deep")
    first: Optional[int] = param("first")
    max: Optional[int] = param("max")
    name: Optional[str] = param("name")
    owner: Optional[str] = param("owner")
    type: Optional[str] = param("type")
    scope: Optional[str] = param("scope")
    matching_uri: Optional[bool] = param("matchingUri")
    uri: Optional[str] = param("uri")


@dataclass
class GetScopeParams(Model):
    deep: Optional[bool] = param("deep")
    first: Optional[int] = param("first")
    max: Optional[int] = param("max")
    name: Optional[str] = param("name")


@dataclass
class GetPolicyParams(Model):
    first: Optional[int] = param("first")
    max: Optional[int] = param("max")
    name: Optional[str] = param("name")
    permission: Optional[bool] = param("permission")
    type: Optional[str] = param("type")


@dataclass
class GetPermissionParams(Model):
    first: Optional[int] = param("first")
    max: Optional[int] = param("max")
    name: Optional[str] = param("name")
    resource: Optional[str] = param("resource")
    scope: Optional[str] = param("scope")
    type: Optional[str] = param("type")


@dataclass
class GetUserPermissionParams(Model):
    scope_id: Optional[str] = param("scopeId")
    resource_id: Optional[str] = param("resourceId")
    owner: Optional[str] = param("owner")
    requester: Optional[str] = param("requester")
    granted: Optional[bool] = param("granted")
    returned_names: Optional[bool] = param("returnNames")
    first: Optional[int] = param("first")
    max: Optional[int] = param("max")


@dataclass
class GetResourcePoliciesParams(Model):
    resource_id: Optional[str] = param("resource")
    policy_id: Optional[str] = param("policyId")
    name: Optional[str] = param("name")
    scope: Optional[str] = param("scope")
    first: Optional[int] = param("first")
    max: Optional[int] = param("max")
