import json
from urllib.parse import parse_qs, urlsplit

import pytest
import responses
from responses import matchers

from kcloak.models import (
    CreatePermissionTicketParams,
    GetResourcePoliciesParams,
    GetUserPermissionParams,
    PermissionGrantParams,
    PermissionRepresentation,
    PolicyRepresentation,
    ResourceRepresentation,
    RoleDefinition,
    ScopeRepresentation,
)

from tests.conftest import BASE_URL, REALM, TOKEN, admin_url


def rs_url(*segments: str) -> str:
    return admin_url("clients", "c1", "authz", "resource-server", *segments)


def protection_url(*segments: str) -> str:
    return "/".join([BASE_URL, "realms", REALM, "authz", "protection", *segments])


@responses.activate
def test_authorization_settings(kc):
    responses.add(
        responses.GET,
        rs_url(),
        json={"clientId": "c1", "policyEnforcementMode": "ENFORCING", "decisionStrategy": "UNANIMOUS"},
    )
    settings = kc.authz.get_authorization_settings(TOKEN, REALM, "c1")
    assert settings.policy_enforcement_mode == "ENFORCING"


@responses.activate
def test_resource_crud(kc):
    responses.add(
        responses.POST,
        rs_url("resource"),
        status=201,
        json={"_id": "r1", "name": "doc", "scopes": [{"name": "read"}]},
        match=[matchers.json_params_matcher({"name": "doc", "scopes": [{"name": "read"}], "uris": ["/doc/*"]})],
    )
    responses.add(responses.GET, rs_url("resource"), json=[{"_id": "r1", "name": "doc"}])
    responses.add(responses.GET, rs_url("resource", "r1"), json={"_id": "r1", "name": "doc"})
    responses.add(responses.PUT, rs_url("resource", "r1"), status=204)
    responses.add(responses.DELETE, rs_url("resource", "r1"), status=204)

    resource = ResourceRepresentation(name="doc", resource_scopes=[ScopeRepresentation(name="read")], uris=["/doc/*"])
    created = kc.authz.create_resource(TOKEN, REALM, "c1", resource)
    assert created.id == "r1"
    assert kc.authz.get_resources(TOKEN, REALM, "c1")[0].name == "doc"
    assert kc.authz.get_resource(TOKEN, REALM, "c1", "r1").id == "r1"
    kc.authz.update_resource(TOKEN, REALM, "c1", created)
    kc.authz.delete_resource(TOKEN, REALM, "c1", "r1")
    assert json.loads(responses.calls[3].request.body)["_id"] == "r1"


@responses.activate
def test_scope_crud(kc):
    responses.add(responses.POST, rs_url("scope"), json={"id": "s1", "name": "read"})
    responses.add(responses.GET, rs_url("scope"), json=[{"id": "s1", "name": "read"}])
    responses.add(responses.GET, rs_url("scope", "s1"), json={"id": "s1", "name": "read"})
    responses.add(responses.DELETE, rs_url("scope", "s1"), status=204)

    assert kc.authz.create_scope(TOKEN, REALM, "c1", ScopeRepresentation(name="read")).id == "s1"
    assert len(kc.authz.get_scopes(TOKEN, REALM, "c1")) == 1
    assert kc.authz.get_scope(TOKEN, REALM, "c1", "s1").name == "read"
    kc.authz.delete_scope(TOKEN, REALM, "c1", "s1")


@responses.activate
def test_policy_crud(kc):
    responses.add(
        responses.POST,
        rs_url("policy", "role"),
        json={"id": "p1", "name": "analysts", "type": "role"},
        match=[matchers.json_params_matcher({
            "name": "analysts",
            "type": "role",
            "logic": "POSITIVE",
            "roles": [{"id": "r1", "required": True}],
        })],
    )
    responses.add(responses.GET, rs_url("policy"), json=[{"id": "p1", "name": "analysts", "type": "role"}])
    responses.add(responses.GET, rs_url("policy", "p1"), json={"id": "p1", "type": "role"})
    responses.add(responses.PUT, rs_url("policy", "role", "p1"), status=201)
    responses.add(responses.DELETE, rs_url("policy", "p1"), status=204)

    policy = PolicyRepresentation(
        name="analysts",
        type="role",
        logic="POSITIVE",
        roles=[RoleDefinition(id="r1", required=True)],
    )
    created = kc.authz.create_policy(TOKEN, REALM, "c1", policy)
    assert created.id == "p1"
    assert kc.authz.get_policies(TOKEN, REALM, "c1")[0].type == "role"
    assert kc.authz.get_policy(TOKEN, REALM, "c1", "p1").id == "p1"
    kc.authz.update_policy(TOKEN, REALM, "c1", created)
    kc.authz.delete_policy(TOKEN, REALM, "c1", "p1")


def test_policy_type_is_required(kc):
    with pytest.raises(ValueError):
        kc.authz.create_policy(TOKEN, REALM, "c1", PolicyRepresentation(name="untyped"))


@responses.activate
def test_permission_crud(kc):
    responses.add(responses.POST, rs_url("permission", "resource"), json={"id": "pm1", "type": "resource"})
    responses.add(responses.GET, rs_url("permission"), json=[{"id": "pm1", "type": "resource"}])
    responses.add(responses.GET, rs_url("permission", "pm1"), json={"id": "pm1", "type": "resource"})
    responses.add(responses.PUT, rs_url("permission", "resource", "pm1"), status=201)
    responses.add(responses.DELETE, rs_url("permission", "pm1"), status=204)

    permission = PermissionRepresentation(name="doc-access", type="resource", resources=["r1"], policies=["p1"])
    created = kc.authz.create_permission(TOKEN, REALM, "c1", permission)
    assert kc.authz.get_permissions(TOKEN, REALM, "c1")[0].id == "pm1"
    assert kc.authz.get_permission(TOKEN, REALM, "c1", "pm1").type == "resource"
    kc.authz.update_permission(TOKEN, REALM, "c1", created)
    kc.authz.delete_permission(TOKEN, REALM, "c1", "pm1")


@responses.activate
def test_protection_api(kc):
    responses.add(
        responses.POST,
        protection_url("permission"),
        json={"ticket": "eyJ.ticket"},
        match=[matchers.json_params_matcher([{"resource_id": "r1", "resource_scopes": ["read"]}])],
    )
    responses.add(
        responses.POST,
        protection_url("permission", "ticket"),
        json={"id": "t1", "resource": "r1", "requester": "u2", "granted": True, "scope": "s1"},
        match=[matchers.json_params_matcher({
            "resource": "r1",
            "requester": "u2",
            "granted": True,
            "scopeName": "read",
        })],
    )
    responses.add(
        responses.GET,
        protection_url("permission", "ticket"),
        json=[{"id": "t1", "resource": "r1", "granted": True}],
    )
    responses.add(
        responses.GET,
        protection_url("uma-policy"),
        json=[{"id": "up1", "name": "share with bob", "scopes": ["read"], "users": ["bob"]}],
    )

    ticket = kc.authz.create_permission_ticket(
        "pat", REALM, [CreatePermissionTicketParams(resource_id="r1", resource_scopes=["read"])]
    )
    assert ticket.ticket == "eyJ.ticket"

    grant = kc.authz.grant_user_permission(
        "pat", REALM, PermissionGrantParams(resource_id="r1", requester="u2", granted=True, scope_name="read")
    )
    assert grant.granted is True
    assert grant.resource_id == "r1"

    permissions = kc.authz.get_user_permissions("pat", REALM, GetUserPermissionParams(resource_id="r1", granted=True))
    assert permissions[0].id == "t1"
    query = parse_qs(urlsplit(responses.calls[2].request.url).query)
    assert query == {"resourceId": ["r1"], "granted": ["true"]}

    policies = kc.authz.get_resource_policies("pat", REALM, GetResourcePoliciesParams(resource_id="r1"))
    assert policies[0].users == ["bob"]
    assert responses.calls[3].request.headers["Authorization"] == "Bearer pat"


def test_grant_requires_resource_and_requester(kc):
    with pytest.raises(ValueError):
        kc.authz.grant_user_permission("pat", REALM, PermissionGrantParams(requester="u2"))
