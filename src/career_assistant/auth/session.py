"""Mock sign-in backed by a local session file.

The signed-in user lives in an explicit Session object owned by the caller;
the file only carries it across CLI invocations (last writer wins).
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from career_assistant.errors import AuthenticationError
from career_assistant.models.session import User

logger = logging.getLogger(__name__)

DEMO_EMAIL = "demo@skillboost.com"
DEMO_PASSWORD = "password"
DEMO_USER = User(id="demo_user", name="Demo User", email=DEMO_EMAIL)


@dataclass
class Session:
    user: User | None = None

    @property
    def signed_in(self) -> bool:
        return self.user is not None


class SessionStore:
    """Reads and writes the serialized ``{id, name, email}`` record."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> User | None:
        if not self.path.exists():
            return None
        try:
            return User.model_validate(json.loads(self.path.read_text(encoding="utf-8")))
        except (json.JSONDecodeError, ValidationError):
            logger.warning("Discarding unreadable session record at %s", self.path)
            self.clear()
            return None

    def save(self, user: User) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            user.model_dump_json(include={"id", "name", "email"}), encoding="utf-8"
        )

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class AuthService:
    """Local stand-in for an auth provider: sign-up always succeeds, sign-in
    only accepts the demo account."""

    def __init__(self, store: SessionStore):
        self.store = store

    def restore(self) -> Session:
        return Session(user=self.store.load())

    def sign_up(self, email: str, password: str, name: str) -> Session:
        if not email or not password or not name:
            raise AuthenticationError("Email, password and name are required")
        user = User(id=f"user_{int(time.time() * 1000)}", email=email, name=name)
        self.store.save(user)
        logger.info("Account created for %s", email)
        return Session(user=user)

    def sign_in(self, email: str, password: str) -> Session:
        if email != DEMO_EMAIL or password != DEMO_PASSWORD:
            raise AuthenticationError("Invalid email or password")
        self.store.save(DEMO_USER)
        logger.info("Signed in as %s", email)
        return Session(user=DEMO_USER)

    def sign_out(self, session: Session) -> None:
        session.user = None
        self.store.clear()
        logger.info("Signed out")
