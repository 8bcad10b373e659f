"""Pydantic models for the mock sign-in session."""

from __future__ import annotations

from pydantic import BaseModel


class User(BaseModel):
    id: str
    name: str
    email: str
    photo_url: str | None = None
