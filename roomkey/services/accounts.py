"""
Account operations: register, login, profile read/update, logout, Aadhaar stub.

All SQL goes through services.user_schema so the same code works against
every supported shape of the users table.
"""

import logging
import secrets

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from roomkey.core.config import settings
from roomkey.core.errors import (
    ConflictError,
    NotFound,
    Unauthenticated,
    ValidationError,
)
from roomkey.core.security import create_access_token, hash_password, verify_password
from roomkey.schemas.auth import Principal, UserProfile
from roomkey.services.user_schema import (
    build_email_exists,
    build_insert,
    build_select_credentials,
    build_select_profile,
    build_update_name,
    get_capabilities,
)

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MESSAGE = "Email already registered"
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"

# SQLSTATE for unique_violation (PostgreSQL); SQLite only reports it in the message.
UNIQUE_VIOLATION_SQLSTATE = "23505"
_UNIQUE_VIOLATION_MARKERS = ("duplicate key", "unique constraint failed")


def normalize_email(email: str) -> str:
    return email.strip().lower()


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the driver reports a unique/duplicate-key violation."""
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code == UNIQUE_VIOLATION_SQLSTATE:
        return True
    text_ = str(orig).lower()
    return any(marker in text_ for marker in _UNIQUE_VIOLATION_MARKERS)


def register_user(
    db: Session,
    email: str | None,
    password: str | None,
    name: str | None = None,
) -> None:
    """
    Create an account. No token is issued; clients log in afterwards.

    Raises ValidationError for missing/short input (before touching the
    database) and ConflictError when the email is taken, whether detected by
    the pre-check or by the unique index on insert.
    """
    if not email or not password:
        raise ValidationError("Email and password required")
    if not isinstance(password, str) or len(password) < settings.PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters"
        )
    normalized_email = normalize_email(email)
    if not normalized_email:
        raise ValidationError("Email and password required")

    caps = get_capabilities(db)
    existing = db.execute(build_email_exists(caps), {"email": normalized_email}).first()
    if existing is not None:
        raise ConflictError(EMAIL_TAKEN_MESSAGE)

    display_name = (name or "").strip() or normalized_email.split("@")[0]
    values = {
        "email": normalized_email,
        "full_name": display_name,
        "name": display_name,
        "password_hash": hash_password(password),
    }
    if caps.has("aadhaar_key"):
        values["aadhaar_key"] = secrets.token_hex(16)

    stmt, params = build_insert(caps, values)
    try:
        db.execute(stmt, params)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e):
            logger.info("Registration lost race on unique email")
            raise ConflictError(EMAIL_TAKEN_MESSAGE) from e
        raise
    logger.info("Account created", extra={"columns": ",".join(params)})


def authenticate(db: Session, email: str | None, password: str | None) -> str:
    """
    Check credentials and return a signed access token for the account.

    Unknown email, missing hash and wrong password all raise the same
    Unauthenticated error so callers cannot tell them apart.
    """
    if not email or not password:
        raise ValidationError("Email and password required")
    normalized_email = normalize_email(email)

    caps = get_capabilities(db)
    row = db.execute(build_select_credentials(caps), {"email": normalized_email}).first()
    if row is None or not verify_password(password, row.password_hash):
        logger.info("Login rejected")
        raise Unauthenticated(INVALID_CREDENTIALS_MESSAGE)
    return create_access_token(sub=row.uid)


def get_profile(db: Session, principal: Principal) -> UserProfile:
    """
    Load the principal's account; NotFound if it has been removed since the token was issued.

    The token subject is bound as-is: ids are opaque, and the database casts
    the value to the id column's type.
    """
    caps = get_capabilities(db)
    row = db.execute(build_select_profile(caps), {"uid": principal.user_id}).first()
    if row is None:
        raise NotFound("User not found")
    return UserProfile(id=row.uid, email=row.email, name=row.name, created_at=row.created_at)


def update_display_name(db: Session, principal: Principal, name: str | None) -> str:
    """Write the new display name into every name column the table has. Returns the stored name."""
    if not name or not isinstance(name, str) or not name.strip():
        raise ValidationError("Name is required")
    new_name = name.strip()

    caps = get_capabilities(db)
    stmt, params = build_update_name(caps, new_name, principal.user_id)
    result = db.execute(stmt, params)
    if result.rowcount == 0:
        db.rollback()
        raise NotFound("User not found")
    db.commit()
    return new_name


def logout(principal: Principal) -> None:
    # Tokens are stateless; nothing to revoke server-side.
    logger.info("User logged out", extra={"user_id": principal.user_id})


def verify_aadhaar(aadhaar_number: str | None) -> None:
    """Placeholder for the external Aadhaar verification integration."""
    if not aadhaar_number or not aadhaar_number.strip():
        raise ValidationError("Aadhaar number is required")
