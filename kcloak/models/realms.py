"""Realm, component, key and server info representations."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..query import param
from .base import Model, attr
from .clients import Client, ClientScope
from .groups import Group
from .roles import RolesRepresentation
from .users import User


@dataclass
class MultiValuedHashMap(Model):
    empty: Optional[bool] = attr()
    load_factor: Optional[float] = attr()
    threshold: Optional[int] = attr()


@dataclass
class Attributes(Model):
    ldap_entry_dn: Optional[List[str]] = attr("LDAP_ENTRY_DN")
    ldap_id: Optional[List[str]] = attr("LDAP_ID")


@dataclass
class KeyStoreConfig(Model):
    active_keys: Optional[ActiveKeys] = attr()
    key: Optional[List[Key]] = attr("keys")


@dataclass
class ActiveKeys(Model):
    hs256: Optional[str] = attr("HS256")
    rs256: Optional[str] = attr("RS256")
    aes: Optional[str] = attr("AES")


@dataclass
class Key(Model):
    kid: Optional[str] = attr()
    type: Optional[str] = attr()
    provider_id: Optional[str] = attr()
    provider_priority: Optional[int] = attr()
    public_key: Optional[str] = attr()
    certificate: Optional[str] = attr()
    algorithm: Optional[str] = attr()
    status: Optional[str] = attr()
    use: Optional[str] = attr()


@dataclass
class Component(Model):
    """ComponentRepresentation (user federation, key providers, ...)."""

    id: Optional[str] = attr()
    name: Optional[str] = attr()
    provider_id: Optional[str] = attr()
    provider_type: Optional[str] = attr()
    parent_id: Optional[str] = attr()
    sub_type: Optional[str] = attr()
    component_config: Optional[Dict[str, List[str]]] = attr("config")


@dataclass
class IdentityProviderRepresentation(Model):
    add_read_token_role_on_create: Optional[bool] = attr()
    alias: Optional[str] = attr()
    config: Optional[Dict[str, str]] = attr()
    display_name: Optional[str] = attr()
    enabled: Optional[bool] = attr()
    first_broker_login_flow_alias: Optional[str] = attr()
    internal_id: Optional[str] = attr()
    link_only: Optional[bool] = attr()
    post_broker_login_flow_alias: Optional[str] = attr()
    provider_id: Optional[str] = attr()
    store_token: Optional[bool] = attr()
    trust_email: Optional[bool] = attr()


@dataclass
class RealmRepresentation(Model):
    """RealmRepresentation.

    Only the commonly managed settings are typed; anything else the server
    returns is dropped on decode.
    """

    id: Optional[str] = attr()
    realm: Optional[str] = attr()
    display_name: Optional[str] = attr()
    display_name_html: Optional[str] = attr()
    enabled: Optional[bool] = attr()
    ssl_required: Optional[str] = attr()
    registration_allowed: Optional[bool] = attr()
    registration_email_as_username: Optional[bool] = attr()
    remember_me: Optional[bool] = attr()
    verify_email: Optional[bool] = attr()
    login_with_email_allowed: Optional[bool] = attr()
    duplicate_emails_allowed: Optional[bool] = attr()
    reset_password_allowed: Optional[bool] = attr()
    edit_username_allowed: Optional[bool] = attr()
    brute_force_protected: Optional[bool] = attr()
    permanent_lockout: Optional[bool] = attr()
    max_failure_wait_seconds: Optional[int] = attr()
    failure_factor: Optional[int] = attr()
    not_before: Optional[int] = attr()
    default_signature_algorithm: Optional[str] = attr()
    revoke_refresh_token: Optional[bool] = attr()
    refresh_token_max_reuse: Optional[int] = attr()
    access_token_lifespan: Optional[int] = attr()
    access_token_lifespan_for_implicit_flow: Optional[int] = attr()
    sso_session_idle_timeout: Optional[int] = attr()
    sso_session_max_lifespan: Optional[int] = attr()
    offline_session_idle_timeout: Optional[int] = attr()
    offline_session_max_lifespan_enabled: Optional[bool] = attr()
    access_code_lifespan: Optional[int] = attr()
    access_code_lifespan_user_action: Optional[int] = attr()
    access_code_lifespan_login: Optional[int] = attr()
    action_token_generated_by_admin_lifespan: Optional[int] = attr()
    action_token_generated_by_user_lifespan: Optional[int] = attr()
    password_policy: Optional[str] = attr()
    otp_policy_type: Optional[str] = attr()
    otp_policy_algorithm: Optional[str] = attr()
    otp_policy_digits: Optional[int] = attr()
    otp_policy_period: Optional[int] = attr()
    default_roles: Optional[List[str]] = attr()
    required_credentials: Optional[List[str]] = attr()
    default_default_client_scopes: Optional[List[str]] = attr()
    default_optional_client_scopes: Optional[List[str]] = attr()
    supported_locales: Optional[List[str]] = attr()
    default_locale: Optional[str] = attr()
    internationalization_enabled: Optional[bool] = attr()
    login_theme: Optional[str] = attr()
    account_theme: Optional[str] = attr()
    admin_theme: Optional[str] = attr()
    email_theme: Optional[str] = attr()
    events_enabled: Optional[bool] = attr()
    events_expiration: Optional[int] = attr()
    events_listeners: Optional[List[str]] = attr()
    enabled_event_types: Optional[List[str]] = attr()
    admin_events_enabled: Optional[bool] = attr()
    admin_events_details_enabled: Optional[bool] = attr()
    smtp_server: Optional[Dict[str, str]] = attr()
    attributes: Optional[Dict[str, str]] = attr()
    organizations_enabled: Optional[bool] = attr()
    users: Optional[List[User]] = attr()
    groups: Optional[List[Group]] = attr()
    roles: Optional[RolesRepresentation] = attr()
    clients: Optional[List[Client]] = attr()
    client_scopes: Optional[List[ClientScope]] = attr()
    identity_providers: Optional[List[IdentityProviderRepresentation]] = attr()
    components: Optional[Dict[str, List[Component]]] = attr()


@dataclass
class SystemInfoRepresentation(Model):
    file_encoding: Optional[str] = attr()
    java_home: Optional[str] = attr()
    java_runtime: Optional[str] = attr()
    java_vendor: Optional[str] = attr()
    java_version: Optional[str] = attr()
    java_vm: Optional[str] = attr()
    java_vm_version: Optional[str] = attr()
    os_architecture: Optional[str] = attr()
    os_name: Optional[str] = attr()
    os_version: Optional[str] = attr()
    server_time: Optional[str] = attr()
    uptime: Optional[str] = attr()
    uptime_millis: Optional[int] = attr()
    user_dir: Optional[str] = attr()
    user_locale: Optional[str] = attr()
    user_name: Optional[str] = attr()
    user_timezone: Optional[str] = attr()
    version: Optional[str] = attr()


@dataclass
class MemoryInfoRepresentation(Model):
    free: Optional[int] = attr()
    free_formated: Optional[str] = attr()
    free_percentage: Optional[int] = attr()
    total: Optional[int] = attr()
    total_formated: Optional[str] = attr()
    used: Optional[int] = attr()
    used_formated: Optional[str] = attr()


@dataclass
class ServerInfoRepresentation(Model):
    system_info: Optional[SystemInfoRepresentation] = attr()
    memory_info: Optional[MemoryInfoRepresentation] = attr()
    provider_types: Optional[Dict[str, Any]] = attr("providers")
    themes: Optional[Dict[str, Any]] = attr()
    protocol_mapper_types: Optional[Dict[str, Any]] = attr()
    enums: Optional[Dict[str, List[str]]] = attr()


@dataclass
class GetComponentsParams(Model):
    name: Optional[str] = param("name")
    provider_type: Optional[str] = param("type")
    parent_id: Optional[str] = param("parent")
