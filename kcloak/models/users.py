"""User representations and query parameters."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..query import param
from .base import Model, attr


@dataclass
class CredentialRepresentation(Model):
    id: Optional[str] = attr()
    type: Optional[str] = attr()
    user_label: Optional[str] = attr()
    created_date: Optional[int] = attr()
    secret_data: Optional[str] = attr()
    credential_data: Optional[str] = attr()
    priority: Optional[int] = attr()
    value: Optional[str] = attr()
    temporary: Optional[bool] = attr()


@dataclass
class User(Model):
    """UserRepresentation."""

    id: Optional[str] = attr()
    created_timestamp: Optional[int] = attr()
    username: Optional[str] = attr()
    enabled: Optional[bool] = attr()
    totp: Optional[bool] = attr()
    email_verified: Optional[bool] = attr()
    first_name: Optional[str] = attr()
    last_name: Optional[str] = attr()
    email: Optional[str] = attr()
    federation_link: Optional[str] = attr()
    attributes: Optional[Dict[str, List[str]]] = attr()
    disableable_credential_types: Optional[List[str]] = attr()
    required_actions: Optional[List[str]] = attr()
    access: Optional[Dict[str, bool]] = attr()
    client_roles: Optional[Dict[str, List[str]]] = attr()
    realm_roles: Optional[List[str]] = attr()
    groups: Optional[List[str]] = attr()
    service_account_client_id: Optional[str] = attr()
    credentials: Optional[List[CredentialRepresentation]] = attr()


@dataclass
class SetPasswordRequest(Model):
    type: Optional[str] = attr()
    temporary: Optional[bool] = attr()
    password: Optional[str] = attr("value")


@dataclass
class ExecuteActionsEmail(Model):
    """Arguments of the execute-actions-email call.

    ``user_id`` goes into the path and ``actions`` is the request body; the
    remaining fields are query parameters.
    """

    user_id: Optional[str] = attr()
    client_id: Optional[str] = param("client_id")
    lifespan: Optional[int] = param("lifespan")
    redirect_uri: Optional[str] = param("redirect_uri")
    actions: Optional[List[str]] = attr()


@dataclass
class UserGroup(Model):
    id: Optional[str] = attr()
    name: Optional[str] = attr()
    path: Optional[str] = attr()


@dataclass
class FederatedIdentityRepresentation(Model):
    identity_provider: Optional[str] = attr()
    user_id: Optional[str] = attr()
    user_name: Optional[str] = attr()


@dataclass
class UserSessionRepresentation(Model):
    id: Optional[str] = attr()
    username: Optional[str] = attr()
    user_id: Optional[str] = attr()
    ip_address: Optional[str] = attr()
    start: Optional[int] = attr()
    last_access: Optional[int] = attr()
    remember_me: Optional[bool] = attr()
    clients: Optional[Dict[str, str]] = attr()


@dataclass
class Access(Model):
    manage_group_membership: Optional[bool] = attr()
    view: Optional[bool] = attr()
    map_roles: Optional[bool] = attr()
    impersonate: Optional[bool] = attr()
    manage: Optional[bool] = attr()


@dataclass
class GetUsersParams(Model):
    brief_representation: Optional[bool] = param("briefRepresentation")
    email: Optional[str] = param("email")
    email_verified: Optional[bool] = param("emailVerified")
    enabled: Optional[bool] = param("enabled")
    exact: Optional[bool] = param("exact")
    first: Optional[int] = param("first")
    first_name: Optional[str] = param("firstName")
    idp_alias: Optional[str] = param("idpAlias")
    idp_user_id: Optional[str] = param("idpUserId")
    last_name: Optional[str] = param("lastName")
    max: Optional[int] = param("max")
    q: Optional[str] = param("q")
    search: Optional[str] = param("search")
    username: Optional[str] = param("username")


@dataclass
class GetUsersByRoleParams(Model):
    first: Optional[int] = param("first")
    max: Optional[int] = param("max")
    brief_representation: Optional[bool] = param("briefRepresentation")
