from __future__ import annotations

import threading
import uuid
from typing import Any

import bcrypt

# Keyed by normalised e-mail
_users: dict[str, dict[str, Any]] = {}
_lock = threading.Lock()


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _public(record: dict[str, Any]) -> dict[str, Any]:
    return {"id": record["id"], "username": record["username"], "email": record["email"]}


def register(email: str, username: str, password: str) -> dict[str, Any] | None:
    """Create an account. Returns ``{id, username, email}`` or ``None`` if the e-mail is taken."""
    key = _normalize_email(email)
    password_hash = _hash_password(password)
    with _lock:
        if key in _users:
            return None
        record = {
            "id": uuid.uuid4().hex,
            "email": key,
            "username": username.strip(),
            "password_hash": password_hash,
        }
        _users[key] = record
    return _public(record)


def authenticate(email: str, password: str) -> dict[str, Any] | None:
    """Verify credentials. Returns ``{id, username, email}`` or ``None``."""
    record = _users.get(_normalize_email(email))
    if record and _verify_password(password, record["password_hash"]):
        return _public(record)
    return None


def get_user(user_id: str) -> dict[str, Any] | None:
    for record in list(_users.values()):
        if record["id"] == user_id:
            return _public(record)
    return None


def clear_users() -> None:
    with _lock:
        _users.clear()
