"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from roomkey.core.config import settings
from roomkey.core.errors import TokenExpired, TokenInvalid

# bcrypt only looks at the first 72 bytes of input.
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str | None) -> bool:
    """Verify a plain password against a stored hash. Missing or corrupt hashes never match."""
    if not hashed:
        return False
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    sub: str | int,
    expires_delta: timedelta | None = None,
    now: datetime | None = None,
) -> str:
    """Create a JWT access token with sub (user id), iat and exp."""
    issued_at = now or datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, exp, iat).

    Raises TokenExpired when exp has passed and TokenInvalid for anything
    else (bad signature, malformed string, missing subject).
    """
    secret = settings.JWT_SECRET.get_secret_value()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "exp", "iat"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpired("Token expired") from e
    except jwt.PyJWTError as e:
        raise TokenInvalid(str(e)) from e
    sub = payload.get("sub")
    if not isinstance(sub, str) or not sub.strip():
        raise TokenInvalid("Token has no subject")
    return payload
