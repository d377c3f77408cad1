"""
Runtime capability probe for the accounts table.

Deployed databases disagree on the shape of the users table: the id column
is `id` or `user_id`, the display name lives in `full_name`, `name`, or both,
and `created_at` / `aadhaar_key` / `password_hash` may be missing. This module
inspects the table once per process and builds statements that only reference
columns that actually exist. Column names are drawn from fixed allow-lists;
values are always bound parameters.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any

from sqlalchemy import inspect, text
from sqlalchemy.exc import NoSuchTableError
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import TextClause

from roomkey.core.config import settings
from roomkey.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

ID_COLUMNS = ("id", "user_id")
DEFAULT_ID_COLUMN = "user_id"
NAME_COLUMNS = ("full_name", "name")
# Insert order; also the allow-list of columns registration may write.
WRITABLE_COLUMNS = ("email", "full_name", "name", "password_hash", "aadhaar_key")
NOW_LITERAL = "CURRENT_TIMESTAMP"


@dataclass(frozen=True)
class UserTableCapabilities:
    """Columns present on the accounts table, in table order."""

    table: str
    columns: tuple[str, ...]

    def has(self, column: str) -> bool:
        return column in self.columns

    @property
    def id_column(self) -> str:
        for column in self.columns:
            if column in ID_COLUMNS:
                return column
        return DEFAULT_ID_COLUMN

    @property
    def name_columns(self) -> tuple[str, ...]:
        return tuple(c for c in NAME_COLUMNS if self.has(c))

    @property
    def name_expr(self) -> str:
        """Read expression for the display name; full_name wins when both exist."""
        cols = self.name_columns
        if len(cols) == 2:
            return "COALESCE(full_name, name)"
        if cols:
            return cols[0]
        return "NULL"

    @property
    def created_at_expr(self) -> str:
        return "created_at" if self.has("created_at") else NOW_LITERAL

    @property
    def password_expr(self) -> str:
        return "password_hash" if self.has("password_hash") else "NULL"

    @property
    def writable_columns(self) -> tuple[str, ...]:
        return tuple(c for c in WRITABLE_COLUMNS if self.has(c))


def probe_user_table(db: Session, table: str) -> UserTableCapabilities:
    """Read the column list for `table` from the schema catalog."""
    try:
        columns = inspect(db.connection()).get_columns(table)
    except NoSuchTableError as e:
        raise ConfigurationError(f"Table '{table}' does not exist") from e
    return UserTableCapabilities(
        table=table,
        columns=tuple(c["name"] for c in columns),
    )


class _CapabilityCache:
    """Process-wide, write-once store of probed capabilities (one entry per table)."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_table: dict[str, UserTableCapabilities] = {}

    def get(self, db: Session, table: str) -> UserTableCapabilities:
        caps = self._by_table.get(table)
        if caps is not None:
            return caps
        with self._lock:
            caps = self._by_table.get(table)
            if caps is None:
                caps = probe_user_table(db, table)
                self._by_table[table] = caps
                logger.info(
                    "Resolved user table capabilities",
                    extra={
                        "table": table,
                        "id_column": caps.id_column,
                        "name_columns": ",".join(caps.name_columns),
                        "writable_columns": ",".join(caps.writable_columns),
                    },
                )
            return caps

    def reset(self) -> None:
        with self._lock:
            self._by_table.clear()


_cache = _CapabilityCache()


def get_capabilities(db: Session) -> UserTableCapabilities:
    """Return the capabilities of the configured accounts table, probing on first use."""
    return _cache.get(db, settings.USERS_TABLE)


def reset_capabilities() -> None:
    """Forget probed capabilities (tests, or after running migrations in-process)."""
    _cache.reset()


def _require_email(caps: UserTableCapabilities) -> None:
    if not caps.has("email"):
        raise ConfigurationError(f"Table '{caps.table}' has no email column")


def build_email_exists(caps: UserTableCapabilities) -> TextClause:
    _require_email(caps)
    return text(f"SELECT 1 FROM {caps.table} WHERE email = :email LIMIT 1")


def build_select_credentials(caps: UserTableCapabilities) -> TextClause:
    """Row used by login: uid, email, name, password_hash."""
    _require_email(caps)
    return text(
        f"SELECT {caps.id_column} AS uid, email, {caps.name_expr} AS name, "
        f"{caps.password_expr} AS password_hash "
        f"FROM {caps.table} WHERE email = :email"
    )


def build_select_profile(caps: UserTableCapabilities) -> TextClause:
    """Row used by /me: uid, email, name, created_at."""
    email_expr = "email" if caps.has("email") else "NULL"
    return text(
        f"SELECT {caps.id_column} AS uid, {email_expr} AS email, {caps.name_expr} AS name, "
        f"{caps.created_at_expr} AS created_at "
        f"FROM {caps.table} WHERE {caps.id_column} = :uid"
    )


def build_insert(
    caps: UserTableCapabilities, values: dict[str, Any]
) -> tuple[TextClause, dict[str, Any]]:
    """
    Build an INSERT limited to present, allow-listed columns that have a value.

    Keys of `values` outside WRITABLE_COLUMNS are ignored. Raises
    ConfigurationError when no column is left to write.
    """
    cols = [c for c in caps.writable_columns if c in values]
    if not cols:
        raise ConfigurationError("No compatible columns found for users insert")
    placeholders = ", ".join(f":{c}" for c in cols)
    stmt = text(f"INSERT INTO {caps.table} ({', '.join(cols)}) VALUES ({placeholders})")
    return stmt, {c: values[c] for c in cols}


def build_update_name(
    caps: UserTableCapabilities, name: str, uid: Any
) -> tuple[TextClause, dict[str, Any]]:
    """Build an UPDATE writing `name` into every present name column."""
    cols = caps.name_columns
    if not cols:
        raise ConfigurationError("No updatable name column found")
    sets = ", ".join(f"{c} = :name" for c in cols)
    stmt = text(f"UPDATE {caps.table} SET {sets} WHERE {caps.id_column} = :uid")
    return stmt, {"name": name, "uid": uid}
