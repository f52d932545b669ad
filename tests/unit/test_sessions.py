import logging

import responses

from kcloak.models import GetClientUserSessionsParams

from tests.conftest import REALM, TOKEN, admin_url

SESSION = {
    "id": "185481e0-dc03-41ee-be64-19b569a580f5",
    "username": "test",
    "userId": "facc323e-5228-42bd-bc74-9f5f402176a2",
    "ipAddress": "10.22.18.174",
    "start": 1659394065000,
    "lastAccess": 1659394065000,
    "clients": {"d98aa03e-a258-446b-8ebd-9d91116a8d8f": "account-console"},
}


@responses.activate
def test_get_user_sessions(kc):
    responses.add(responses.GET, admin_url("users", "u1", "sessions"), json=[SESSION])
    sessions = kc.sessions.get_user_sessions(TOKEN, REALM, "u1")
    assert sessions[0].ip_address == "10.22.18.174"
    assert sessions[0].clients == {"d98aa03e-a258-446b-8ebd-9d91116a8d8f": "account-console"}


@responses.activate
def test_offline_and_client_sessions(kc):
    responses.add(responses.GET, admin_url("users", "u1", "offline-sessions", "c1"), json=[SESSION])
    responses.add(responses.GET, admin_url("clients", "c1", "user-sessions"), json=[SESSION, SESSION])
    assert len(kc.sessions.get_user_offline_sessions(TOKEN, REALM, "u1", "c1")) == 1
    sessions = kc.sessions.get_client_user_sessions(TOKEN, REALM, "c1", GetClientUserSessionsParams(max=2))
    assert len(sessions) == 2
    assert "max=2" in responses.calls[1].request.url


@responses.activate
def test_logout_endpoints(kc):
    responses.add(responses.POST, admin_url("users", "u1", "logout"), status=204)
    responses.add(responses.DELETE, admin_url("sessions", "s1"), status=204)
    kc.sessions.logout_all_sessions(TOKEN, REALM, "u1")
    kc.sessions.logout_user_session(TOKEN, REALM, "s1")
    assert [c.request.method for c in responses.calls] == ["POST", "DELETE"]


@responses.activate
def test_revoke_user_sessions_counts_sessions(kc, caplog):
    responses.add(responses.GET, admin_url("users", "u1", "sessions"), json=[SESSION, SESSION])
    responses.add(responses.POST, admin_url("users", "u1", "logout"), status=204)
    caplog.set_level(logging.INFO, logger="kcloak")
    assert kc.sessions.revoke_user_sessions(TOKEN, REALM, "u1") == 2
    assert "Revoked 2 active session(s)" in caplog.text


@responses.activate
def test_revoke_user_sessions_without_sessions(kc):
    responses.add(responses.GET, admin_url("users", "u1", "sessions"), json=[])
    assert kc.sessions.revoke_user_sessions(TOKEN, REALM, "u1") == 0
    assert len(responses.calls) == 1
