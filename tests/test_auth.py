# tests/test_auth.py
import pytest

from marketplace import ApiClient, AuthError, AuthService, MemorySessionStore, SessionState, ValidationError
from stub_server import database

from .fakes import FakeResponse, FakeSession

USER = {"id": "u1", "name": "Ana", "email": "a@b.com", "phone": "11999999999", "avatar": None}


def test_login_returns_body_verbatim_after_one_call():
    session = FakeSession(FakeResponse(200, {"token": "tok-1", "user": USER}))
    auth = AuthService(ApiClient("http://x", session=session), MemorySessionStore())
    resp = auth.login("a@b.com", "secret1")
    assert len(session.calls) == 1
    assert session.calls[0]["json"] == {"email": "a@b.com", "password": "secret1"}
    assert resp.token == "tok-1"
    assert resp.user.model_dump() == USER


def test_login_does_not_persist_token_itself():
    store = MemorySessionStore()
    session = FakeSession(FakeResponse(200, {"token": "tok-1", "user": USER}))
    AuthService(ApiClient("http://x", session=session), store).login("a@b.com", "secret1")
    assert store.get() is None


@pytest.mark.parametrize("email,password,field", [
    ("not-an-email", "secret1", "email"),
    ("a@b", "secret1", "email"),
    ("a@b.com\n", "secret1", "email"),
    ("a@b.com", "12345", "password"),
])
def test_login_validation_before_network(client, request_log, email, password, field):
    with pytest.raises(ValidationError) as info:
        client.login(email, password)
    assert field in info.value.fields
    assert request_log == []


def test_login_success_persists_token(client, store, request_log):
    user = client.login("maria@example.com", "maria123")
    assert user.id == "s1"
    assert store.get() in database.TOKENS
    assert client.state is SessionState.LOGGED_IN
    assert len(request_log) == 1
    assert request_log[0]["authorization"] is None


def test_login_rejected_credentials(client, store):
    with pytest.raises(AuthError) as info:
        client.login("maria@example.com", "wrong-password")
    assert info.value.message == "invalid email or password"
    assert store.get() is None


def test_register_password_mismatch_never_hits_network(client, request_log):
    with pytest.raises(ValidationError) as info:
        client.register("Ana", "11999999999", "ana@example.com", "abcdef", "abcdeg")
    assert "confirmPassword" in info.value.fields
    assert request_log == []


def test_register_reports_every_bad_field(client):
    with pytest.raises(ValidationError) as info:
        client.register("A", "123", "nope", "123", "123")
    assert set(info.value.fields) == {"name", "phone", "email", "password"}


def test_register_sends_avatar_only_when_given():
    session = FakeSession(
        FakeResponse(201, {"token": "t", "user": USER}),
        FakeResponse(201, {"token": "t", "user": USER}),
    )
    auth = AuthService(ApiClient("http://x", session=session), MemorySessionStore())
    auth.register("Ana", "11999999999", "a@b.com", "abcdef", "abcdef")
    auth.register("Ana", "11999999999", "a@b.com", "abcdef", "abcdef", avatar="file:///a.png")
    assert "avatar" not in session.calls[0]["json"]
    assert session.calls[1]["json"]["avatar"] == "file:///a.png"
    assert session.calls[1]["json"]["confirmPassword"] == "abcdef"


def test_register_then_profile(client, store):
    user = client.register("Ana", "11999999999", "ana@example.com", "abcdef", "abcdef", "file:///me.png")
    assert store.get() is not None
    assert client.get_profile() == user
    assert user.avatar == "file:///me.png"


def test_register_duplicate_email_is_auth_error(client):
    with pytest.raises(AuthError) as info:
        client.register("Maria", "11988887777", "maria@example.com", "abcdef", "abcdef")
    assert info.value.status_code == 409


def test_logout_clears_token(client, store):
    client.login("maria@example.com", "maria123")
    client.logout()
    assert store.get() is None
    assert client.state is SessionState.LOGGED_OUT


def test_logout_when_already_logged_out(client, store):
    client.logout()
    assert store.get() is None
