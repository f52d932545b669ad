"""Typed Keycloak representations.

All classes are dataclasses deriving from Model: fields default to None
(absent), ``to_dict()`` / ``from_dict()`` convert to and from the wire form
and ``str()`` gives a sorted, indented rendering for logs.
"""
from .base import Model, attr, camel_case
from .tokens import (
    JWT,
    TokenOptions,
    ResourcePermission,
    IntroSpectTokenResult,
    RequestingPartyTokenOptions,
    RequestingPartyPermission,
    RequestingPartyPermissionDecision,
    UserInfoAddress,
    UserInfo,
    IssuerResponse,
    CertResponseKey,
    CertResponse,
)
from .users import (
    CredentialRepresentation,
    User,
    SetPasswordRequest,
    ExecuteActionsEmail,
    UserGroup,
    FederatedIdentityRepresentation,
    UserSessionRepresentation,
    Access,
    GetUsersParams,
    GetUsersByRoleParams,
)
from .groups import Group, GroupsCount, GetGroupsParams
from .roles import (
    CompositesRepresentation,
    Role,
    ClientMappingsRepresentation,
    MappingsRepresentation,
    RolesRepresentation,
    RoleDefinition,
    GetRoleParams,
)
from .authz import (
    ResourceOwnerRepresentation,
    ScopeRepresentation,
    ResourceRepresentation,
    GroupDefinition,
    PolicyRepresentation,
    PermissionRepresentation,
    PermissionResource,
    PermissionScope,
    ResourceServerRepresentation,
    AccessRepresentation,
    PermissionTicketDescriptionRepresentation,
    CreatePermissionTicketParams,
    PermissionTicketResponseRepresentation,
    PermissionTicketPermissionRepresentation,
    PermissionTicketRepresentation,
    PermissionGrantParams,
    PermissionGrantResponseRepresentation,
    ResourcePolicyRepresentation,
    GetResourceParams,
    GetScopeParams,
    GetPolicyParams,
    GetPermissionParams,
    GetUserPermissionParams,
    GetResourcePoliciesParams,
)
from .clients import (
    ProtocolMapperRepresentation,
    ProtocolMappersConfig,
    ProtocolMappers,
    ClientScopeAttributes,
    ClientScope,
    Client,
    CredentialSecret,
    GetClientsParams,
    GetClientUserSessionsParams,
)
from .realms import (
    MultiValuedHashMap,
    Attributes,
    KeyStoreConfig,
    ActiveKeys,
    Key,
    Component,
    IdentityProviderRepresentation,
    RealmRepresentation,
    SystemInfoRepresentation,
    MemoryInfoRepresentation,
    ServerInfoRepresentation,
    GetComponentsParams,
)
from .organizations import (
    OrganizationDomainRepresentation,
    OrganizationRepresentation,
    GetOrganizationsParams,
)

__all__ = [
    "Model",
    "attr",
    "camel_case",
    # Tokens
    "JWT",
    "TokenOptions",
    "ResourcePermission",
    "IntroSpectTokenResult",
    "RequestingPartyTokenOptions",
    "RequestingPartyPermission",
    "RequestingPartyPermissionDecision",
    "UserInfoAddress",
    "UserInfo",
    "IssuerResponse",
    "CertResponseKey",
    "CertResponse",
    # Users
    "CredentialRepresentation",
    "User",
    "SetPasswordRequest",
    "ExecuteActionsEmail",
    "UserGroup",
    "FederatedIdentityRepresentation",
    "UserSessionRepresentation",
    "Access",
    "GetUsersParams",
    "GetUsersByRoleParams",
    # Groups
    "Group",
    "GroupsCount",
    "GetGroupsParams",
    # Roles
    "CompositesRepresentation",
    "Role",
    "ClientMappingsRepresentation",
    "MappingsRepresentation",
    "RolesRepresentation",
    "RoleDefinition",
    "GetRoleParams",
    # Authorization
    "ResourceOwnerRepresentation",
    "ScopeRepresentation",
    "ResourceRepresentation",
    "GroupDefinition",
    "PolicyRepresentation",
    "PermissionRepresentation",
    "PermissionResource",
    "PermissionScope",
    "ResourceServerRepresentation",
    "AccessRepresentation",
    "PermissionTicketDescriptionRepresentation",
    "CreatePermissionTicketParams",
    "PermissionTicketResponseRepresentation",
    "PermissionTicketPermissionRepresentation",
    "PermissionTicketRepresentation",
    "PermissionGrantParams",
    "PermissionGrantResponseRepresentation",
    "ResourcePolicyRepresentation",
    "GetResourceParams",
    "GetScopeParams",
    "GetPolicyParams",
    "GetPermissionParams",
    "GetUserPermissionParams",
    "GetResourcePoliciesParams",
    # Clients
    "ProtocolMapperRepresentation",
    "ProtocolMappersConfig",
    "ProtocolMappers",
    "ClientScopeAttributes",
    "ClientScope",
    "Client",
    "CredentialSecret",
    "GetClientsParams",
    "GetClientUserSessionsParams",
    # Realms
    "MultiValuedHashMap",
    "Attributes",
    "KeyStoreConfig",
    "ActiveKeys",
    "Key",
    "Component",
    "IdentityProviderRepresentation",
    "RealmRepresentation",
    "SystemInfoRepresentation",
    "MemoryInfoRepresentation",
    "ServerInfoRepresentation",
    "GetComponentsParams",
    # Organizations
    "OrganizationDomainRepresentation",
    "OrganizationRepresentation",
    "GetOrganizationsParams",
]
