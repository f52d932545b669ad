import dataclasses

import pytest

from kcloak import models
from kcloak.models import (
    AccessRepresentation,
    Client,
    CredentialRepresentation,
    GetUsersParams,
    Group,
    IntroSpectTokenResult,
    JWT,
    Model,
    PermissionTicketDescriptionRepresentation,
    ProtocolMappers,
    RealmRepresentation,
    RequestingPartyTokenOptions,
    ResourceRepresentation,
    TokenOptions,
    User,
)
from kcloak.types import EnforcedString, StringOrArray

MODEL_CLASSES = [
    obj
    for obj in (getattr(models, name) for name in models.__all__)
    if isinstance(obj, type) and issubclass(obj, Model) and dataclasses.is_dataclass(obj)
]


# ─────────────────────────────────────────────────────────────────────────────
# Renderer
# ─────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("cls", MODEL_CLASSES, ids=lambda cls: cls.__name__)
def test_empty_model_renders_empty_object(cls):
    assert str(cls()) == "{}"


def test_nested_model_renders_sorted_with_tabs():
    ticket = PermissionTicketDescriptionRepresentation(
        id="1234",
        created_time_stamp=1607702613,
        enabled=True,
        required_actions=["something"],
        access=AccessRepresentation(manage=True),
    )
    expected = (
        "{\n"
        '\t"access": {\n'
        '\t\t"manage": true\n'
        "\t},\n"
        '\t"createdTimestamp": 1607702613,\n'
        '\t"enabled": true,\n'
        '\t"id": "1234",\n'
        '\t"requiredActions": [\n'
        '\t\t"something"\n'
        "\t]\n"
        "}"
    )
    assert str(ticket) == expected


def test_renderer_sorts_by_wire_name():
    realm = RealmRepresentation(realm="demo", display_name="Demo", clients=[Client(client_id="app")])
    expected = (
        "{\n"
        '\t"clients": [\n'
        "\t\t{\n"
        '\t\t\t"clientId": "app"\n'
        "\t\t}\n"
        "\t],\n"
        '\t"displayName": "Demo",\n'
        '\t"realm": "demo"\n'
        "}"
    )
    assert str(realm) == expected


def test_renderer_sorts_plain_dict_values():
    user = User(username="alice", attributes={"zone": ["eu"], "dept": ["it"]})
    rendered = str(user)
    assert rendered.index('"dept"') < rendered.index('"zone"')
    assert rendered.index('"attributes"') < rendered.index('"username"')


def test_renderer_is_deterministic():
    first = User(username="alice", email="a@example.com", enabled=True)
    second = User(enabled=True, email="a@example.com", username="alice")
    assert str(first) == str(second)


def test_renderer_keeps_non_ascii():
    assert "Zoë" in str(User(first_name="Zoë"))


def test_redacted_masks_credentials_and_keeps_the_rest():
    user = User(
        username="alice",
        credentials=[CredentialRepresentation(type="password", value="S3cretPw", temporary=False)],
    )
    rendered = user.redacted()
    assert "S3cretPw" not in rendered
    assert '"username": "alice"' in rendered
    assert '"type": "password"' in rendered
    assert '"temporary": false' in rendered
    assert "S3cretPw" in str(user)


def test_redacted_masks_nested_secrets_and_tokens():
    client = Client(client_id="app", secret="ClientS3cret", registration_access_token="RegTok")
    realm = RealmRepresentation(
        realm="demo",
        smtp_server={"host": "mail", "password": "SmtpPw"},
        clients=[client],
        revoke_refresh_token=True,
    )
    rendered = realm.redacted()
    for secret in ("ClientS3cret", "RegTok", "SmtpPw"):
        assert secret not in rendered
    assert '"host": "mail"' in rendered
    assert '"revokeRefreshToken": true' in rendered


def test_params_objects_render_with_query_names():
    assert str(GetUsersParams(first_name="Alice")) == '{\n\t"firstName": "Alice"\n}'


# ─────────────────────────────────────────────────────────────────────────────
# Wire form
# ─────────────────────────────────────────────────────────────────────────────
def test_to_dict_uses_camel_case_and_drops_absent_fields():
    user = User(username="alice", first_name="Alice", email_verified=False)
    assert user.to_dict() == {"username": "alice", "firstName": "Alice", "emailVerified": False}


def test_from_dict_ignores_unknown_keys_and_decodes_nested():
    group = Group.from_dict({
        "id": "g1",
        "name": "parent",
        "unknownField": 1,
        "subGroups": [{"id": "g2", "name": "child", "path": "/parent/child"}],
    })
    assert group.id == "g1"
    assert isinstance(group.sub_groups[0], Group)
    assert group.sub_groups[0].path == "/parent/child"


def test_explicit_wire_names():
    token = JWT.from_dict({"access_token": "abc", "not-before-policy": 0, "expires_in": 300})
    assert token.access_token == "abc"
    assert token.not_before_policy == 0
    assert token.to_dict()["not-before-policy"] == 0

    resource = ResourceRepresentation.from_dict({"_id": "r1", "scopes": [{"name": "view"}]})
    assert resource.id == "r1"
    assert resource.resource_scopes[0].name == "view"


def test_introspection_audience_accepts_string_or_list():
    single = IntroSpectTokenResult.from_dict({"active": True, "aud": "account"})
    many = IntroSpectTokenResult.from_dict({"active": True, "aud": ["a", "b"]})
    assert isinstance(single.aud, StringOrArray)
    assert single.aud == ["account"]
    assert single.to_dict()["aud"] == "account"
    assert many.to_dict()["aud"] == ["a", "b"]


def test_mapper_config_coerces_unquoted_values():
    mapper = ProtocolMappers.from_dict({
        "name": "groups",
        "config": {"id.token.claim": True, "claim.name": "groups", "multivalued": "true"},
    })
    config = mapper.protocol_mappers_config
    assert isinstance(config.id_token_claim, EnforcedString)
    assert config.id_token_claim == "true"
    assert mapper.to_dict()["config"] == {
        "id.token.claim": "true",
        "claim.name": "groups",
        "multivalued": "true",
    }


def test_from_list_handles_none():
    assert User.from_list(None) == []


# ─────────────────────────────────────────────────────────────────────────────
# Form encodings
# ─────────────────────────────────────────────────────────────────────────────
def test_token_options_form_joins_scopes():
    options = TokenOptions(client_id="app", grant_type="client_credentials", scopes=["openid", "email"])
    assert options.to_form() == {
        "client_id": "app",
        "grant_type": "client_credentials",
        "scope": "openid email",
    }


def test_requesting_party_options_repeat_permissions():
    options = RequestingPartyTokenOptions(
        audience="api",
        permissions=["doc#read", "doc#write"],
        response_include_resource_name=False,
    )
    assert options.to_form() == [
        ("permission", "doc#read"),
        ("permission", "doc#write"),
        ("audience", "api"),
        ("response_include_resource_name", "false"),
    ]
