"""
security helpers:
- Argon2 password hashing via argon2-cffi
- JWT creation/verification via PyJWT
- Bearer token extraction and opaque refresh token generation
"""
from __future__ import annotations

import secrets
import uuid
from datetime import datetime, timedelta, timezone
from typing import Mapping

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

JWT_ISSUER = "chirpy"
JWT_ALGORITHM = "HS256"

ph = PasswordHasher()


class AuthError(Exception):
    """Raised when a request cannot be tied to a user."""


class MissingBearerError(AuthError):
    """Raised when the Authorization header is absent or not a Bearer token."""


def hash_password(password: str) -> str:
    """Hash a plaintext password using Argon2
    """
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """ Verify a plaintext password using argon2
    """
    try:
        return ph.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def _now() -> datetime:
    return datetime.now(timezone.utc)


def make_jwt(user_id: uuid.UUID | str, secret: str, expires_in: timedelta) -> str:
    """
    Sign an access token for user_id, valid for expires_in from now.
    """
    now = _now()
    payload = {
        "iss": JWT_ISSUER,
        "sub": str(user_id),
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def validate_jwt(token: str, secret: str) -> uuid.UUID:
    """
    Decode and validate an access token. Raises AuthError on invalid signature,
    expiry, wrong issuer or a subject that is not a UUID.
    """
    try:
        decoded = jwt.decode(
            token,
            secret,
            algorithms=[JWT_ALGORITHM],
            issuer=JWT_ISSUER,
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthError("Token expired")
    except jwt.InvalidTokenError as exc:
        raise AuthError(f"Invalid token: {exc}")

    try:
        return uuid.UUID(decoded["sub"])
    except (TypeError, ValueError):
        raise AuthError("Invalid token subject")


def get_bearer_token(headers: Mapping[str, str]) -> str:
    auth = headers.get("Authorization", "")
    if not auth:
        raise MissingBearerError("No Authorization header")
    if not auth.startswith("Bearer "):
        raise MissingBearerError("Authorization header is not a Bearer token")
    return auth[len("Bearer "):].strip()


def make_refresh_token() -> str:
    """32 random bytes, hex encoded."""
    return secrets.token_hex(32)


def authenticate(headers: Mapping[str, str], secret: str) -> uuid.UUID:
    """Resolve the user id carried by the request's bearer access token."""
    return validate_jwt(get_bearer_token(headers), secret)
