import pytest

from kcloak.config import settings
from kcloak.config.settings import ClientSettings, _load_secret_from_file, load_settings


@pytest.fixture()
def secrets_dir(monkeypatch, tmp_path):
    """Redirect /run/secrets to a temporary directory."""
    real_path = settings.Path

    def fake_path(target):
        if str(target) == "/run/secrets":
            return tmp_path
        return real_path(target)

    monkeypatch.setattr(settings, "Path", fake_path)
    return tmp_path


def test_keycloak_url_is_required(secrets_dir):
    with pytest.raises(ValueError, match="KEYCLOAK_URL"):
        load_settings()


def test_defaults(monkeypatch, secrets_dir):
    monkeypatch.setenv("KEYCLOAK_URL", "https://sso.example.com/")
    cfg = load_settings()
    assert cfg.keycloak_url == "https://sso.example.com"
    assert cfg.realm == "master"
    assert cfg.client_id == "admin-cli"
    assert cfg.client_secret is None
    assert cfg.admin_username is None
    assert cfg.admin_password is None
    assert cfg.request_timeout == 10
    assert cfg.verify_tls is True
    assert cfg.legacy_wildfly_support is False


def test_values_from_environment(monkeypatch, secrets_dir):
    monkeypatch.setenv("KEYCLOAK_URL", "http://localhost:8080")
    monkeypatch.setenv("KEYCLOAK_REALM", "demo")
    monkeypatch.setenv("KEYCLOAK_CLIENT_ID", "automation-cli")
    monkeypatch.setenv("KEYCLOAK_CLIENT_SECRET", "env-secret")
    monkeypatch.setenv("KEYCLOAK_ADMIN", "admin")
    monkeypatch.setenv("KEYCLOAK_ADMIN_PASSWORD", "env-password")
    monkeypatch.setenv("KCLOAK_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("KCLOAK_VERIFY_TLS", "false")
    monkeypatch.setenv("KCLOAK_LEGACY_WILDFLY", "yes")

    cfg = load_settings()
    assert cfg.realm == "demo"
    assert cfg.client_id == "automation-cli"
    assert cfg.client_secret == "env-secret"
    assert cfg.admin_username == "admin"
    assert cfg.admin_password == "env-password"
    assert cfg.request_timeout == 2.5
    assert cfg.verify_tls is False
    assert cfg.legacy_wildfly_support is True


def test_secret_file_takes_priority(monkeypatch, secrets_dir):
    (secrets_dir / "keycloak_admin_password").write_text("file-password\n")
    monkeypatch.setenv("KEYCLOAK_URL", "http://localhost:8080")
    monkeypatch.setenv("KEYCLOAK_ADMIN_PASSWORD", "env-password")
    assert load_settings().admin_password == "file-password"


def test_empty_secret_file_falls_back_to_env(monkeypatch, secrets_dir):
    (secrets_dir / "keycloak_client_secret").write_text("   ")
    monkeypatch.setenv("KEYCLOAK_CLIENT_SECRET", "env-secret")
    assert _load_secret_from_file("keycloak_client_secret", "KEYCLOAK_CLIENT_SECRET") == "env-secret"


def test_missing_secret(secrets_dir):
    assert _load_secret_from_file("nothing_here", "KCLOAK_UNSET_SECRET") is None


@pytest.mark.parametrize(
    "var, value",
    [
        ("KCLOAK_REQUEST_TIMEOUT", "soon"),
        ("KCLOAK_REQUEST_TIMEOUT", "0"),
        ("KCLOAK_VERIFY_TLS", "maybe"),
        ("KCLOAK_LEGACY_WILDFLY", "2"),
    ],
)
def test_invalid_values_raise(monkeypatch, secrets_dir, var, value):
    monkeypatch.setenv("KEYCLOAK_URL", "http://localhost:8080")
    monkeypatch.setenv(var, value)
    with pytest.raises(ValueError, match=var):
        load_settings()


def test_repr_hides_secrets():
    cfg = ClientSettings(keycloak_url="http://kc", client_secret="s3cr3t", admin_password="pw")
    assert "s3cr3t" not in repr(cfg)
    assert "admin_password" not in repr(cfg)
