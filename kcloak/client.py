"""Low-level HTTP client for the Keycloak token and Admin REST APIs.

Handles URL building, request plumbing, error mapping and the OAuth2 token
grants. The client never stores tokens: every call takes the access token it
should use, so one instance can serve any number of callers.
"""
from __future__ import annotations
import logging
from http import HTTPStatus
from typing import Any, Dict, List, Optional
from urllib.parse import quote, unquote

import requests

from .exceptions import TransportError, api_error_for_status
from .models import (
    JWT,
    CertResponse,
    IntroSpectTokenResult,
    IssuerResponse,
    RequestingPartyPermission,
    RequestingPartyPermissionDecision,
    RequestingPartyTokenOptions,
    ServerInfoRepresentation,
    TokenOptions,
    UserInfo,
)
from .query import get_query_params
from .version import __version__

REQUEST_TIMEOUT = 10
USER_AGENT = f"kcloak/{__version__}"
ADMIN_CLI = "admin-cli"

GRANT_PASSWORD = "password"
GRANT_CLIENT_CREDENTIALS = "client_credentials"
GRANT_REFRESH_TOKEN = "refresh_token"
GRANT_UMA_TICKET = "urn:ietf:params:oauth:grant-type:uma-ticket"

logger = logging.getLogger(__name__)


def url_path(*segments: Any) -> str:
    """Join path segments, percent-encoding each one (slashes included)."""
    return "/" + "/".join(quote(str(segment), safe="") for segment in segments)


def admin_path(realm: str, *segments: Any) -> str:
    """Path below /admin/realms/{realm}."""
    return url_path("admin", "realms", realm, *segments)


def realm_path(realm: str, *segments: Any) -> str:
    """Path below /realms/{realm} (token, userinfo, certs, authz protection API)."""
    return url_path("realms", realm, *segments)


def openid_path(realm: str, *segments: Any) -> str:
    return realm_path(realm, "protocol", "openid-connect", *segments)


def require(value: Optional[str], name: str) -> str:
    """Return value, raising ValueError when it is None or empty."""
    if not value:
        raise ValueError(f"{name} is required")
    return value


def get_id(resp: requests.Response) -> str:
    """Return the ID of a created object from the Location header."""
    location = resp.headers.get("Location", "")
    return unquote(location.rstrip("/").rsplit("/", 1)[-1])


class KCloak:
    """HTTP client for Keycloak.

    Features:
    - One HTTP exchange per call, no retries, no token or response caching
    - Centralized error handling (APIError / TransportError)
    - Service objects per admin area: realms, users, groups, roles, clients,
      sessions, authz, organizations

    Usage:
        kc = KCloak("http://keycloak:8080")
        token = kc.login_admin("admin", "password", "master")
        users = kc.users.get_users(token.access_token, "demo", GetUsersParams(max=10))
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = REQUEST_TIMEOUT,
        verify: bool = True,
        headers: Optional[Dict[str, str]] = None,
        legacy_wildfly_support: bool = False,
        session: Optional[requests.Session] = None,
    ):
        """Initialize Keycloak client.

        Args:
            base_url: Keycloak base URL, e.g. https://sso.example.com
            timeout: Timeout in seconds for each request
            verify: Verify TLS certificates
            headers: Extra headers sent with every request
            legacy_wildfly_support: Prefix every path with /auth (Keycloak < 17)
            session: Pre-configured requests session (adapters, proxies, ...)
        """
        from .authz import AuthorizationService
        from .clients import ClientService
        from .groups import GroupService
        from .organizations import OrganizationService
        from .realm import RealmService
        from .roles import RoleService
        from .sessions import SessionService
        from .users import UserService

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify = verify
        self.path_prefix = "/auth" if legacy_wildfly_support else ""
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = USER_AGENT
        self._session = session
        if headers:
            self._session.headers.update(headers)

        self.realms = RealmService(self)
        self.users = UserService(self)
        self.groups = GroupService(self)
        self.roles = RoleService(self)
        self.clients = ClientService(self)
        self.sessions = SessionService(self)
        self.authz = AuthorizationService(self)
        self.organizations = OrganizationService(self)

    @classmethod
    def from_settings(cls, settings, session: Optional[requests.Session] = None) -> "KCloak":
        """Create a client from a ClientSettings instance."""
        return cls(
            settings.keycloak_url,
            timeout=settings.request_timeout,
            verify=settings.verify_tls,
            legacy_wildfly_support=settings.legacy_wildfly_support,
            session=session,
        )

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "KCloak":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def url(self, path: str) -> str:
        return f"{self.base_url}{self.path_prefix}{path}"

    # ─────────────────────────────────────────────────────────────────────
    # Request plumbing
    # ─────────────────────────────────────────────────────────────────────
    def request(
        self,
        method: str,
        path: str,
        token: Optional[str] = None,
        *,
        params: Any = None,
        json: Any = None,
        data: Any = None,
        auth: Optional[tuple] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """Execute one request and raise on failure.

        Args:
            method: HTTP method
            path: API path (e.g. "/admin/realms/demo/users")
            token: Bearer token, omitted from the request when None
            params: Query parameters, either a dict or a Get*Params object
            json: JSON payload
            data: Form payload
            auth: Basic auth pair
            headers: Extra headers for this request

        Returns:
            Response object with its body already read

        Raises:
            TransportError: On connection, TLS or timeout failures
            APIError: On HTTP status >= 400
        """
        url = self.url(path)
        request_headers = dict(headers or {})
        if token:
            request_headers["Authorization"] = f"Bearer {token}"
        if params is not None and not isinstance(params, dict):
            params = get_query_params(params)

        logger.debug("%s %s", method, url)
        try:
            resp = self._session.request(
                method,
                url,
                params=params or None,
                json=json,
                data=data,
                auth=auth,
                headers=request_headers,
                timeout=self.timeout,
                verify=self.verify,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}", url) from exc

        with resp:
            logger.debug("%s %s -> %s", method, url, resp.status_code)
            self._handle_error(method, resp)
        return resp

    def get(self, path: str, token: Optional[str] = None, **kwargs) -> requests.Response:
        return self.request("GET", path, token, **kwargs)

    def post(self, path: str, token: Optional[str] = None, **kwargs) -> requests.Response:
        return self.request("POST", path, token, **kwargs)

    def put(self, path: str, token: Optional[str] = None, **kwargs) -> requests.Response:
        return self.request("PUT", path, token, **kwargs)

    def delete(self, path: str, token: Optional[str] = None, **kwargs) -> requests.Response:
        return self.request("DELETE", path, token, **kwargs)

    def _handle_error(self, method: str, resp: requests.Response) -> None:
        """Centralized error handling for HTTP responses.

        The message is the status line followed by whichever of the OAuth2
        "error", Keycloak "errorMessage" and "error_description" fields the
        body carries.

        Raises:
            APIError: If response status indicates error
        """
        if resp.status_code < HTTPStatus.BAD_REQUEST:
            return
        parts = [f"{resp.status_code} {resp.reason or ''}".strip()]
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            for key in ("error", "errorMessage", "error_description"):
                if body.get(key):
                    parts.append(str(body[key]))
        message = ": ".join(parts)
        logger.warning("Keycloak request failed: %s %s: %s", method, resp.url, message)
        raise api_error_for_status(resp.status_code, message)

    # ─────────────────────────────────────────────────────────────────────
    # Token endpoint
    # ─────────────────────────────────────────────────────────────────────
    def get_token(self, realm: str, options: TokenOptions) -> JWT:
        """Run any grant against the realm's token endpoint."""
        resp = self.post(openid_path(realm, "token"), data=options.to_form())
        return JWT.from_dict(resp.json())

    def login(self, client_id: str, client_secret: str, realm: str, username: str, password: str) -> JWT:
        """Resource owner password grant for a confidential client."""
        return self.get_token(realm, TokenOptions(
            client_id=client_id,
            client_secret=client_secret or None,
            grant_type=GRANT_PASSWORD,
            username=username,
            password=password,
        ))

    def login_otp(
        self, client_id: str, client_secret: str, realm: str, username: str, password: str, totp: str
    ) -> JWT:
        """Password grant for users with a one-time password configured."""
        return self.get_token(realm, TokenOptions(
            client_id=client_id,
            client_secret=client_secret or None,
            grant_type=GRANT_PASSWORD,
            username=username,
            password=password,
            totp=totp,
        ))

    def login_admin(self, username: str, password: str, realm: str = "master") -> JWT:
        """Password grant through the built-in admin-cli client."""
        return self.get_token(realm, TokenOptions(
            client_id=ADMIN_CLI,
            grant_type=GRANT_PASSWORD,
            username=username,
            password=password,
        ))

    def login_client(self, client_id: str, client_secret: str, realm: str, *scopes: str) -> JWT:
        """Client credentials grant (service account)."""
        return self.get_token(realm, TokenOptions(
            client_id=client_id,
            client_secret=client_secret,
            grant_type=GRANT_CLIENT_CREDENTIALS,
            scopes=list(scopes) or None,
        ))

    def refresh_token(self, refresh_token: str, client_id: str, client_secret: str, realm: str) -> JWT:
        return self.get_token(realm, TokenOptions(
            client_id=client_id,
            client_secret=client_secret or None,
            grant_type=GRANT_REFRESH_TOKEN,
            refresh_token=refresh_token,
        ))

    def logout(self, client_id: str, client_secret: str, realm: str, refresh_token: str) -> None:
        """End the session the refresh token belongs to."""
        form = {"client_id": client_id, "refresh_token": refresh_token}
        if client_secret:
            form["client_secret"] = client_secret
        self.post(openid_path(realm, "logout"), data=form)

    def logout_public_client(self, client_id: str, realm: str, access_token: str, refresh_token: str) -> None:
        self.post(
            openid_path(realm, "logout"),
            access_token,
            data={"client_id": client_id, "refresh_token": refresh_token},
        )

    def revoke_token(self, realm: str, client_id: str, client_secret: str, refresh_token: str) -> None:
        form = {
            "client_id": client_id,
            "token": refresh_token,
            "token_type_hint": "refresh_token",
        }
        if client_secret:
            form["client_secret"] = client_secret
        self.post(openid_path(realm, "revoke"), data=form)

    def retrospect_token(
        self, access_token: str, client_id: str, client_secret: str, realm: str
    ) -> IntroSpectTokenResult:
        """Ask the server whether a token is active (RFC 7662 introspection)."""
        resp = self.post(
            openid_path(realm, "token", "introspect"),
            data={"token_type_hint": "requesting_party_token", "token": access_token},
            auth=(client_id, client_secret),
        )
        return IntroSpectTokenResult.from_dict(resp.json())

    def get_raw_user_info(self, access_token: str, realm: str) -> Dict[str, Any]:
        return self.get(openid_path(realm, "userinfo"), access_token).json()

    def get_user_info(self, access_token: str, realm: str) -> UserInfo:
        return UserInfo.from_dict(self.get_raw_user_info(access_token, realm))

    def get_issuer(self, realm: str) -> IssuerResponse:
        return IssuerResponse.from_dict(self.get(realm_path(realm)).json())

    def get_certs(self, realm: str) -> CertResponse:
        """Fetch the realm's JSON web key set (no caching)."""
        return CertResponse.from_dict(self.get(openid_path(realm, "certs")).json())

    def get_server_info(self, access_token: str) -> ServerInfoRepresentation:
        resp = self.get(url_path("admin", "serverinfo"), access_token)
        return ServerInfoRepresentation.from_dict(resp.json())

    # ─────────────────────────────────────────────────────────────────────
    # UMA requesting party tokens
    # ─────────────────────────────────────────────────────────────────────
    def _uma_request(
        self, token: str, realm: str, options: RequestingPartyTokenOptions, response_mode: Optional[str]
    ) -> requests.Response:
        form = options.to_form()
        if options.grant_type is None:
            form.insert(0, ("grant_type", GRANT_UMA_TICKET))
        if response_mode is not None:
            form = [(key, value) for key, value in form if key != "response_mode"]
            form.append(("response_mode", response_mode))
        return self.post(openid_path(realm, "token"), token, data=form)

    def get_requesting_party_token(
        self, token: str, realm: str, options: RequestingPartyTokenOptions
    ) -> JWT:
        """Exchange a token for an RPT carrying the granted permissions."""
        return JWT.from_dict(self._uma_request(token, realm, options, None).json())

    def get_requesting_party_permissions(
        self, token: str, realm: str, options: RequestingPartyTokenOptions
    ) -> List[RequestingPartyPermission]:
        resp = self._uma_request(token, realm, options, "permissions")
        return RequestingPartyPermission.from_list(resp.json())

    def get_requesting_party_permission_decision(
        self, token: str, realm: str, options: RequestingPartyTokenOptions
    ) -> RequestingPartyPermissionDecision:
        resp = self._uma_request(token, realm, options, "decision")
        return RequestingPartyPermissionDecision.from_dict(resp.json())

