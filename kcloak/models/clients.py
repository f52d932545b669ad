"""Client, client scope and protocol mapper representations."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..query import param
from ..types import EnforcedString
from .authz import ResourceServerRepresentation
from .base import Model, attr


@dataclass
class ProtocolMapperRepresentation(Model):
    id: Optional[str] = attr()
    name: Optional[str] = attr()
    protocol: Optional[str] = attr()
    protocol_mapper: Optional[str] = attr()
    consent_required: Optional[bool] = attr()
    config: Optional[Dict[str, str]] = attr()


@dataclass
class ProtocolMappersConfig(Model):
    """Config block of a client scope mapper.

    Keycloak stores every value as text but older exports write booleans
    and numbers unquoted, hence EnforcedString.
    """

    userinfo_token_claim: Optional[EnforcedString] = attr("userinfo.token.claim")
    user_attribute: Optional[EnforcedString] = attr("user.attribute")
    id_token_claim: Optional[EnforcedString] = attr("id.token.claim")
    access_token_claim: Optional[EnforcedString] = attr("access.token.claim")
    claim_name: Optional[EnforcedString] = attr("claim.name")
    claim_value: Optional[EnforcedString] = attr("claim.value")
    json_type_label: Optional[EnforcedString] = attr("jsonType.label")
    friendly_name: Optional[EnforcedString] = attr("friendly.name")
    attribute_name: Optional[EnforcedString] = attr("attribute.name")
    multivalued: Optional[EnforcedString] = attr("multivalued")
    full_path: Optional[EnforcedString] = attr("full.path")
    included_client_audience: Optional[EnforcedString] = attr("included.client.audience")
    included_custom_audience: Optional[EnforcedString] = attr("included.custom.audience")
    usermodel_client_role_mapping_client_id: Optional[EnforcedString] = attr(
        "usermodel.clientRoleMapping.clientId"
    )
    usermodel_realm_role_mapping_role_prefix: Optional[EnforcedString] = attr(
        "usermodel.realmRoleMapping.rolePrefix"
    )


@dataclass
class ProtocolMappers(Model):
    id: Optional[str] = attr()
    name: Optional[str] = attr()
    protocol: Optional[str] = attr()
    protocol_mapper: Optional[str] = attr()
    consent_required: Optional[bool] = attr()
    protocol_mappers_config: Optional[ProtocolMappersConfig] = attr("config")


@dataclass
class ClientScopeAttributes(Model):
    consent_screen_text: Optional[str] = attr("consent.screen.text")
    display_on_consent_screen: Optional[str] = attr("display.on.consent.screen")
    include_in_token_scope: Optional[str] = attr("include.in.token.scope")


@dataclass
class ClientScope(Model):
    id: Optional[str] = attr()
    name: Optional[str] = attr()
    description: Optional[str] = attr()
    protocol: Optional[str] = attr()
    client_scope_attributes: Optional[ClientScopeAttributes] = attr("attributes")
    protocol_mappers: Optional[List[ProtocolMappers]] = attr()


@dataclass
class Client(Model):
    """ClientRepresentation."""

    id: Optional[str] = attr()
    client_id: Optional[str] = attr()
    name: Optional[str] = attr()
    description: Optional[str] = attr()
    root_url: Optional[str] = attr()
    admin_url: Optional[str] = attr()
    base_url: Optional[str] = attr()
    surrogate_auth_required: Optional[bool] = attr()
    enabled: Optional[bool] = attr()
    always_display_in_console: Optional[bool] = attr()
    client_authenticator_type: Optional[str] = attr()
    secret: Optional[str] = attr()
    registration_access_token: Optional[str] = attr()
    default_roles: Optional[List[str]] = attr()
    redirect_uris: Optional[List[str]] = attr()
    web_origins: Optional[List[str]] = attr()
    not_before: Optional[int] = attr()
    bearer_only: Optional[bool] = attr()
    consent_required: Optional[bool] = attr()
    standard_flow_enabled: Optional[bool] = attr()
    implicit_flow_enabled: Optional[bool] = attr()
    direct_access_grants_enabled: Optional[bool] = attr()
    service_accounts_enabled: Optional[bool] = attr()
    authorization_services_enabled: Optional[bool] = attr()
    public_client: Optional[bool] = attr()
    frontchannel_logout: Optional[bool] = attr()
    protocol: Optional[str] = attr()
    attributes: Optional[Dict[str, str]] = attr()
    authentication_flow_binding_overrides: Optional[Dict[str, str]] = attr()
    full_scope_allowed: Optional[bool] = attr()
    node_re_registration_timeout: Optional[int] = attr()
    registered_nodes: Optional[Dict[str, int]] = attr()
    protocol_mappers: Optional[List[ProtocolMapperRepresentation]] = attr()
    client_template: Optional[str] = attr()
    default_client_scopes: Optional[List[str]] = attr()
    optional_client_scopes: Optional[List[str]] = attr()
    authorization_settings: Optional[ResourceServerRepresentation] = attr()
    access: Optional[Dict[str, bool]] = attr()
    origin: Optional[str] = attr()


@dataclass
class CredentialSecret(Model):
    type: Optional[str] = attr()
    value: Optional[str] = attr()


@dataclass
class GetClientsParams(Model):
    client_id: Optional[str] = param("clientId")
    first: Optional[int] = param("first")
    max: Optional[int] = param("max")
    search: Optional[bool] = param("search")
    viewable_only: Optional[bool] = param("viewableOnly")


@dataclass
class GetClientUserSessionsParams(Model):
    first: Optional[int] = param("first")
    max: Optional[int] = param("max")
