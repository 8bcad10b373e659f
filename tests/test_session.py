"""Tests for the mock sign-in session."""

from __future__ import annotations

import json

import pytest

from career_assistant.auth.session import (
    DEMO_EMAIL,
    DEMO_PASSWORD,
    AuthService,
    Session,
    SessionStore,
)
from career_assistant.errors import AuthenticationError
from career_assistant.models.session import User


@pytest.fixture
def store(tmp_path) -> SessionStore:
    return SessionStore(tmp_path / "nested" / "session.json")


@pytest.fixture
def auth(store) -> AuthService:
    return AuthService(store)


class TestSessionStore:
    def test_load_missing_returns_none(self, store):
        assert store.load() is None

    def test_save_and_load(self, store):
        store.save(User(id="u1", name="Jane", email="jane@example.com", photo_url="x"))
        assert json.loads(store.path.read_text()) == {
            "id": "u1", "name": "Jane", "email": "jane@example.com",
        }
        assert store.load() == User(id="u1", name="Jane", email="jane@example.com")

    def test_corrupt_record_discarded(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json")
        assert store.load() is None
        assert not store.path.exists()

    def test_wrong_shape_discarded(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text('{"id": "u1"}')
        assert store.load() is None

    def test_clear_missing_is_noop(self, store):
        store.clear()
        assert not store.path.exists()


class TestAuthService:
    def test_restore_without_record(self, auth):
        session = auth.restore()
        assert isinstance(session, Session)
        assert not session.signed_in

    def test_sign_in_demo(self, auth, store):
        session = auth.sign_in(DEMO_EMAIL, DEMO_PASSWORD)
        assert session.user.id == "demo_user"
        assert session.user.name == "Demo User"
        assert store.load() == session.user

    def test_sign_in_wrong_password(self, auth, store):
        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            auth.sign_in(DEMO_EMAIL, "nope")
        assert store.load() is None

    def test_sign_up_creates_user(self, auth):
        session = auth.sign_up("jane@example.com", "secret", "Jane")
        assert session.user.id.startswith("user_")
        assert session.user.email == "jane@example.com"
        assert auth.restore().user == session.user

    def test_sign_up_requires_fields(self, auth):
        with pytest.raises(AuthenticationError):
            auth.sign_up("", "secret", "Jane")

    def test_sign_out_clears_session_and_store(self, auth, store):
        session = auth.sign_in(DEMO_EMAIL, DEMO_PASSWORD)
        auth.sign_out(session)
        assert session.user is None
        assert not store.path.exists()
        assert not auth.restore().signed_in

    def test_last_writer_wins(self, auth):
        auth.sign_in(DEMO_EMAIL, DEMO_PASSWORD)
        later = auth.sign_up("jane@example.com", "secret", "Jane")
        assert auth.restore().user == later.user
