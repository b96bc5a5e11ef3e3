# app/core/security.py
"""Password hashing and session tokens."""

from typing import Any, Dict, Optional

import bcrypt
import jwt

from app.core.config import settings
from app.core.exceptions import ConfigurationError, NotAuthenticatedError


def require_secret() -> str:
    """Return the signing secret, failing hard when it is not configured."""
    if not settings.JWT_SECRET:
        raise ConfigurationError("JWT_SECRET")
    return settings.JWT_SECRET


# ===================
# Passwords
# ===================

# bcrypt uses at most the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: Optional[str], hashed: str) -> bool:
    if not password:
        return False
    return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))


# ===================
# Tokens
# ===================

def create_token(subject_id: str) -> str:
    """Sign a token naming the credential id. No expiry claim; the cookie expires."""
    return jwt.encode({"id": subject_id}, require_secret(), algorithm=settings.JWT_ALGORITHM)


def decode_token(token: Optional[str]) -> Dict[str, Any]:
    """Verify the signature only. The payload is not checked against any account."""
    if not token:
        raise NotAuthenticatedError("missing token")
    try:
        return jwt.decode(token, require_secret(), algorithms=[settings.JWT_ALGORITHM])
    except jwt.InvalidTokenError as e:
        raise NotAuthenticatedError(str(e)) from e
