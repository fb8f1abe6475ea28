"""Secret service — queries over the secrets table.

Functions take an open session and raise ``VaultError`` for conditions the
store itself does not report (missing rows, bad input). SQLAlchemy errors
propagate to the caller.
"""

from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.orm import Session

from envvault.errors import ErrorKind, VaultError
from envvault.models.secret import Secret
from envvault.schemas.secret import SecretSummary
from envvault.utils.masking import mask_value

LIST_LIMIT = 50
SEARCH_LIMIT = 20


def _summarize(secret: Secret) -> SecretSummary:
    return SecretSummary(id=secret.id, key=secret.key, value_masked=mask_value(secret.value))


def list_secrets(db: Session, limit: int = LIST_LIMIT) -> list[SecretSummary]:
    stmt = select(Secret).order_by(Secret.key).limit(limit)
    return [_summarize(s) for s in db.scalars(stmt)]


def search_secrets(db: Session, query: str, limit: int = SEARCH_LIMIT) -> list[SecretSummary]:
    # % and _ in the query match literally
    stmt = (
        select(Secret)
        .where(Secret.key.icontains(query, autoescape=True))
        .order_by(Secret.key)
        .limit(limit)
    )
    return [_summarize(s) for s in db.scalars(stmt)]


def get_secret_value(db: Session, secret_id: int) -> str:
    """Return the raw value (internal use only — list/search never expose it)."""
    secret = db.get(Secret, secret_id)
    if secret is None:
        raise VaultError(ErrorKind.NOT_FOUND, f"no secret with id {secret_id}")
    return secret.value


def upsert_secret(db: Session, key: str, value: str) -> None:
    """Insert a secret, or replace the value of the secret with the same key."""
    if not key:
        raise VaultError(ErrorKind.MALFORMED_INPUT, "secret key must not be empty")
    stmt = insert(Secret).values(key=key, value=value)
    stmt = stmt.on_conflict_do_update(
        index_elements=[Secret.key],
        set_={"value": stmt.excluded["value"], "updated_at": func.now()},
    )
    db.execute(stmt)
    db.commit()


def update_secret(db: Session, secret_id: int, value: str) -> None:
    stmt = (
        update(Secret)
        .where(Secret.id == secret_id)
        .values(value=value, updated_at=func.now())
        .execution_options(synchronize_session=False)
    )
    matched = db.execute(stmt).rowcount
    db.commit()
    if matched == 0:
        raise VaultError(ErrorKind.NOT_FOUND, f"no secret with id {secret_id}")


def delete_secret(db: Session, secret_id: int) -> None:
    stmt = delete(Secret).where(Secret.id == secret_id).execution_options(
        synchronize_session=False
    )
    matched = db.execute(stmt).rowcount
    db.commit()
    if matched == 0:
        raise VaultError(ErrorKind.NOT_FOUND, f"no secret with id {secret_id}")


def all_pairs(db: Session) -> list[tuple[str, str]]:
    """Every (key, raw value) pair ordered by key, uncapped."""
    rows = db.execute(select(Secret.key, Secret.value).order_by(Secret.key))
    return [(key, value) for key, value in rows]
