import logging

import pytest
import responses
from responses import matchers

from kcloak.exceptions import NotFoundError
from kcloak.models import Component, GetComponentsParams, IdentityProviderRepresentation, RealmRepresentation

from tests.conftest import BASE_URL, REALM, TOKEN, admin_url


@responses.activate
def test_get_realm_and_realms(kc):
    responses.add(responses.GET, admin_url(), json={"id": "demo", "realm": "demo", "enabled": True})
    responses.add(responses.GET, f"{BASE_URL}/admin/realms", json=[{"realm": "master"}, {"realm": "demo"}])
    assert kc.realms.get_realm(TOKEN, REALM).enabled is True
    assert [r.realm for r in kc.realms.get_realms(TOKEN)] == ["master", "demo"]


@responses.activate
def test_get_missing_realm(kc):
    responses.add(responses.GET, f"{BASE_URL}/admin/realms/ghost", status=404, json={"error": "Realm not found."})
    with pytest.raises(NotFoundError) as exc_info:
        kc.realms.get_realm(TOKEN, "ghost")
    assert exc_info.value.message == "404 Not Found: Realm not found."


@responses.activate
def test_create_update_delete_realm(kc):
    responses.add(
        responses.POST,
        f"{BASE_URL}/admin/realms",
        status=201,
        headers={"Location": f"{BASE_URL}/admin/realms/demo"},
        match=[matchers.json_params_matcher({"realm": "demo", "enabled": True})],
    )
    responses.add(responses.PUT, admin_url(), status=204, match=[matchers.json_params_matcher({"realm": "demo", "displayName": "Demo"})])
    responses.add(responses.DELETE, admin_url(), status=204)

    assert kc.realms.create_realm(TOKEN, RealmRepresentation(realm="demo", enabled=True)) == "demo"
    kc.realms.update_realm(TOKEN, RealmRepresentation(realm="demo", display_name="Demo"))
    kc.realms.delete_realm(TOKEN, REALM)
    with pytest.raises(ValueError):
        kc.realms.update_realm(TOKEN, RealmRepresentation(display_name="nameless"))


@responses.activate
def test_create_realm_without_location_falls_back_to_name(kc):
    responses.add(responses.POST, f"{BASE_URL}/admin/realms", status=201)
    assert kc.realms.create_realm(TOKEN, RealmRepresentation(realm="demo")) == "demo"


@responses.activate
def test_create_realm_decodes_name_from_location(kc):
    location = f"{BASE_URL}/admin/realms/my%20realm"
    responses.add(responses.POST, f"{BASE_URL}/admin/realms", status=201, headers={"Location": location})
    responses.add(responses.DELETE, f"{BASE_URL}/admin/realms/my%20realm", status=204)

    name = kc.realms.create_realm(TOKEN, RealmRepresentation(realm="my realm"))
    assert name == "my realm"
    kc.realms.delete_realm(TOKEN, name)
    assert responses.calls[1].request.url == f"{BASE_URL}/admin/realms/my%20realm"


@responses.activate
def test_create_and_update_realm_keep_secrets_out_of_logs(kc, caplog):
    location = f"{BASE_URL}/admin/realms/demo"
    responses.add(responses.POST, f"{BASE_URL}/admin/realms", status=201, headers={"Location": location})
    responses.add(responses.PUT, admin_url(), status=204)
    caplog.set_level(logging.DEBUG, logger="kcloak")

    realm = RealmRepresentation(realm="demo", smtp_server={"host": "mail", "password": "SmtpPw"})
    kc.realms.create_realm(TOKEN, realm)
    kc.realms.update_realm(TOKEN, realm)

    assert "Creating realm" in caplog.text
    assert "Updating realm" in caplog.text
    assert "SmtpPw" not in caplog.text


@responses.activate
@pytest.mark.parametrize("method, endpoint", [
    ("clear_realm_cache", "clear-realm-cache"),
    ("clear_user_cache", "clear-user-cache"),
    ("clear_keys_cache", "clear-keys-cache"),
])
def test_cache_clearing(kc, method, endpoint):
    responses.add(responses.POST, admin_url(endpoint), status=204)
    getattr(kc.realms, method)(TOKEN, REALM)
    assert responses.calls[0].request.url == admin_url(endpoint)


@responses.activate
def test_get_keys(kc):
    responses.add(
        responses.GET,
        admin_url("keys"),
        json={
            "active": {"RS256": "kid-1"},
            "activeKeys": {"RS256": "kid-1"},
            "keys": [{"kid": "kid-1", "type": "RSA", "algorithm": "RS256", "providerPriority": 100}],
        },
    )
    keys = kc.realms.get_keys(TOKEN, REALM)
    assert keys.active_keys.rs256 == "kid-1"
    assert keys.key[0].provider_priority == 100


@responses.activate
def test_components(kc):
    responses.add(responses.GET, admin_url("components"), json=[{"id": "k1", "providerType": "org.keycloak.keys.KeyProvider"}])
    responses.add(
        responses.POST,
        admin_url("components"),
        status=201,
        headers={"Location": admin_url("components", "k2")},
    )
    responses.add(responses.PUT, admin_url("components", "k2"), status=204)
    responses.add(responses.DELETE, admin_url("components", "k2"), status=204)

    found = kc.realms.get_components(TOKEN, REALM, GetComponentsParams(provider_type="org.keycloak.keys.KeyProvider"))
    assert found[0].id == "k1"
    assert "type=org.keycloak.keys.KeyProvider" in responses.calls[0].request.url

    component = Component(name="rsa", provider_id="rsa-generated", component_config={"priority": ["100"]})
    component.id = kc.realms.create_component(TOKEN, REALM, component)
    assert component.id == "k2"
    kc.realms.update_component(TOKEN, REALM, component)
    kc.realms.delete_component(TOKEN, REALM, "k2")


@responses.activate
def test_identity_providers(kc):
    url = admin_url("identity-provider", "instances")
    responses.add(responses.GET, url, json=[{"alias": "github", "providerId": "github", "enabled": True}])
    responses.add(responses.POST, url, status=201, headers={"Location": f"{url}/github"})
    responses.add(responses.DELETE, f"{url}/github", status=204)

    assert kc.realms.get_identity_providers(TOKEN, REALM)[0].provider_id == "github"
    provider = IdentityProviderRepresentation(alias="github", provider_id="github", config={"clientId": "x"})
    assert kc.realms.create_identity_provider(TOKEN, REALM, provider) == "github"
    kc.realms.delete_identity_provider(TOKEN, REALM, "github")
