"""Keycloak token and Admin REST API client library.

Architecture:
- client.py: HTTP client, token grants, error mapping
- realm.py: Realms, caches, keys, components and identity providers
- users.py: User lifecycle, credentials and group membership
- groups.py: Group hierarchy and members
- roles.py: Realm and client roles, role mappings and composites
- clients.py: Clients, secrets, protocol mappers and client scopes
- sessions.py: Session listing and revocation
- authz.py: Authorization services and the UMA protection API
- organizations.py: Organizations
- models/: Typed representations with a deterministic ``str()``
- exceptions.py: Typed exceptions for error handling

Usage:
    from kcloak import KCloak
    from kcloak.models import GetUsersParams

    kc = KCloak("http://keycloak:8080")
    token = kc.login_admin("admin", "password", "master")
    users = kc.users.get_users(token.access_token, "demo", GetUsersParams(search="alice"))
"""
import logging

from .version import __version__
from .client import (
    KCloak,
    REQUEST_TIMEOUT,
    ADMIN_CLI,
)
from .exceptions import (
    APIErrType,
    KCloakError,
    DecodeError,
    EncodeError,
    TransportError,
    APIError,
    NotFoundError,
    ConflictError,
    InsufficientPermissionsError,
    parse_api_err_type,
)
from .query import get_query_params, param
from .types import EnforcedString, StringOrArray
from .realm import RealmService
from .users import UserService
from .groups import GroupService
from .roles import RoleService
from .clients import ClientService
from .sessions import SessionService
from .authz import AuthorizationService
from .organizations import OrganizationService
from .config import ClientSettings, load_settings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Client
    "KCloak",
    "REQUEST_TIMEOUT",
    "ADMIN_CLI",

    # Exceptions
    "APIErrType",
    "KCloakError",
    "DecodeError",
    "EncodeError",
    "TransportError",
    "APIError",
    "NotFoundError",
    "ConflictError",
    "InsufficientPermissionsError",
    "parse_api_err_type",

    # Field types and query encoding
    "EnforcedString",
    "StringOrArray",
    "get_query_params",
    "param",

    # Services
    "RealmService",
    "UserService",
    "GroupService",
    "RoleService",
    "ClientService",
    "SessionService",
    "AuthorizationService",
    "OrganizationService",

    # Configuration
    "ClientSettings",
    "load_settings",
]
