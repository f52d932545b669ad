"""Token endpoint requests and responses."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..types import StringOrArray
from .base import Model, attr


@dataclass
class JWT(Model):
    """Token endpoint response."""

    access_token: Optional[str] = attr("access_token")
    id_token: Optional[str] = attr("id_token")
    expires_in: Optional[int] = attr("expires_in")
    refresh_expires_in: Optional[int] = attr("refresh_expires_in")
    refresh_token: Optional[str] = attr("refresh_token")
    token_type: Optional[str] = attr("token_type")
    not_before_policy: Optional[int] = attr("not-before-policy")
    session_state: Optional[str] = attr("session_state")
    scope: Optional[str] = attr("scope")


@dataclass
class TokenOptions(Model):
    """Form fields of a token request.

    Names follow the OAuth2 form encoding, so ``to_form`` is used instead of
    ``to_dict`` when sending.
    """

    client_id: Optional[str] = attr("client_id")
    client_secret: Optional[str] = attr("client_secret")
    grant_type: Optional[str] = attr("grant_type")
    refresh_token: Optional[str] = attr("refresh_token")
    scopes: Optional[List[str]] = attr("scope")
    response_types: Optional[List[str]] = attr("response_type")
    permission: Optional[str] = attr("permission")
    username: Optional[str] = attr("username")
    password: Optional[str] = attr("password")
    totp: Optional[str] = attr("totp")
    code: Optional[str] = attr("code")
    redirect_uri: Optional[str] = attr("redirect_uri")
    client_assertion_type: Optional[str] = attr("client_assertion_type")
    client_assertion: Optional[str] = attr("client_assertion")
    subject_token: Optional[str] = attr("subject_token")
    requested_subject: Optional[str] = attr("requested_subject")
    audience: Optional[str] = attr("audience")
    requested_token_type: Optional[str] = attr("requested_token_type")

    def to_form(self) -> Dict[str, str]:
        """Form-encodable fields; list fields are joined with spaces."""
        form = {}
        for key, value in self.to_dict().items():
            form[key] = " ".join(value) if isinstance(value, list) else value
        return form


@dataclass
class ResourcePermission(Model):
    rsid: Optional[str] = attr()
    resource_id: Optional[str] = attr("resource_id")
    rsname: Optional[str] = attr()
    scopes: Optional[List[str]] = attr()
    resource_scopes: Optional[List[str]] = attr("resource_scopes")


@dataclass
class IntroSpectTokenResult(Model):
    """Token introspection response."""

    permissions: Optional[List[ResourcePermission]] = attr()
    exp: Optional[int] = attr()
    nbf: Optional[int] = attr()
    iat: Optional[int] = attr()
    aud: Optional[StringOrArray] = attr()
    active: Optional[bool] = attr()
    auth_time: Optional[int] = attr("auth_time")
    jti: Optional[str] = attr()
    type: Optional[str] = attr()


@dataclass
class RequestingPartyTokenOptions(Model):
    """Options of a UMA ticket grant (requesting party token)."""

    grant_type: Optional[str] = attr("grant_type")
    ticket: Optional[str] = attr()
    claim_token: Optional[str] = attr("claim_token")
    claim_token_format: Optional[str] = attr("claim_token_format")
    rpt: Optional[str] = attr()
    permissions: Optional[List[str]] = attr("permission")
    audience: Optional[str] = attr()
    response_include_resource_name: Optional[bool] = attr("response_include_resource_name")
    response_permissions_limit: Optional[int] = attr("response_permissions_limit")
    submit_request: Optional[bool] = attr("submit_request")
    response_mode: Optional[str] = attr("response_mode")
    subject_token: Optional[str] = attr("subject_token")

    def to_form(self) -> List[tuple]:
        """Form fields as pairs; each permission is sent as its own field."""
        form = []
        for key, value in self.to_dict().items():
            if isinstance(value, list):
                form.extend((key, item) for item in value)
            elif isinstance(value, bool):
                form.append((key, "true" if value else "false"))
            else:
                form.append((key, str(value)))
        return form


@dataclass
class RequestingPartyPermission(Model):
    claims: Optional[Dict[str, Any]] = attr()
    resource_id: Optional[str] = attr("rsid")
    resource_name: Optional[str] = attr("rsname")
    scopes: Optional[List[str]] = attr()


@dataclass
class RequestingPartyPermissionDecision(Model):
    result: Optional[bool] = attr()


@dataclass
class UserInfoAddress(Model):
    formatted: Optional[str] = attr()
    street_address: Optional[str] = attr("street_address")
    locality: Optional[str] = attr()
    region: Optional[str] = attr()
    postal_code: Optional[str] = attr("postal_code")
    country: Optional[str] = attr()


@dataclass
class UserInfo(Model):
    """OpenID Connect userinfo response."""

    sub: Optional[str] = attr()
    name: Optional[str] = attr()
    given_name: Optional[str] = attr("given_name")
    family_name: Optional[str] = attr("family_name")
    middle_name: Optional[str] = attr("middle_name")
    nickname: Optional[str] = attr()
    preferred_username: Optional[str] = attr("preferred_username")
    profile: Optional[str] = attr()
    picture: Optional[str] = attr()
    website: Optional[str] = attr()
    email: Optional[str] = attr()
    email_verified: Optional[bool] = attr("email_verified")
    gender: Optional[str] = attr()
    zoneinfo: Optional[str] = attr()
    locale: Optional[str] = attr()
    phone_number: Optional[str] = attr("phone_number")
    phone_number_verified: Optional[bool] = attr("phone_number_verified")
    address: Optional[UserInfoAddress] = attr()
    updated_at: Optional[int] = attr("updated_at")


@dataclass
class IssuerResponse(Model):
    realm: Optional[str] = attr()
    public_key: Optional[str] = attr("public_key")
    token_service: Optional[str] = attr("token-service")
    account_service: Optional[str] = attr("account-service")
    tokens_not_before: Optional[int] = attr("tokens-not-before")


@dataclass
class CertResponseKey(Model):
    kid: Optional[str] = attr()
    kty: Optional[str] = attr()
    alg: Optional[str] = attr()
    use: Optional[str] = attr()
    n: Optional[str] = attr()
    e: Optional[str] = attr()
    x: Optional[str] = attr()
    y: Optional[str] = attr()
    crv: Optional[str] = attr()
    key_ops: Optional[List[str]] = attr("key_ops")
    x5u: Optional[str] = attr()
    x5c: Optional[List[str]] = attr()
    x5t: Optional[str] = attr()
    x5t_s256: Optional[str] = attr("x5t#S256")


@dataclass
class CertResponse(Model):
    """JSON web key set of a realm."""

    keys: Optional[List[CertResponseKey]] = attr()
