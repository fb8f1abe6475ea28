"""EnvVault facade — the operation surface handed to callers.

Every public method opens its own session, catches ``VaultError`` at this
boundary and reports failure as ``False``, ``None``, ``0``, ``""`` or an
empty list. Callers cannot tell failure causes apart; the kind is logged.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path

from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from envvault.config import Settings, settings
from envvault.database import create_session_factory, create_vault_engine, init_db
from envvault.errors import ErrorKind, VaultError
from envvault.schemas.secret import SecretSummary
from envvault.services import env_codec, secret_service, shell_sync
from envvault.utils.paths import data_directory, home_directory

logger = logging.getLogger(__name__)


class EnvVault:
    """Secret store bound to one store file and one home directory."""

    def __init__(self, db_path: Path, home_dir: Path):
        self.db_path = Path(db_path)
        self.home_dir = Path(home_dir)
        self.engine = create_vault_engine(self.db_path)
        self._sessions = create_session_factory(self.engine)

    @classmethod
    def from_settings(cls, cfg: Settings) -> "EnvVault":
        if cfg.data_dir is not None:
            data_dir = cfg.data_dir
            try:
                data_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                logger.warning("Cannot create data directory %s: %s", data_dir, exc)
                data_dir = Path.cwd()
        else:
            data_dir = data_directory(cfg.app_qualifier, cfg.app_organization, cfg.app_name)
        home = cfg.home_dir if cfg.home_dir is not None else home_directory()
        return cls(data_dir / cfg.database_name, home)

    @property
    def dotfile_path(self) -> Path:
        return shell_sync.dotfile_path(self.home_dir)

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with self._sessions() as session:
                yield session
        except OperationalError as exc:
            raise VaultError(ErrorKind.STORE_UNAVAILABLE, str(exc)) from exc
        except SQLAlchemyError as exc:
            raise VaultError(ErrorKind.QUERY_FAILED, str(exc)) from exc
        except (OverflowError, ValueError, UnicodeError) as exc:
            # raised by the sqlite3 driver while binding out-of-range ids or unencodable text
            raise VaultError(ErrorKind.MALFORMED_INPUT, str(exc)) from exc

    # ── Schema ───────────────────────────────────────────────────────

    def init(self) -> bool:
        try:
            init_db(self.engine)
        except SQLAlchemyError as exc:
            logger.warning("Schema init failed for %s: %s", self.db_path, exc)
            return False
        return True

    # ── Reads ────────────────────────────────────────────────────────

    def list_all(self) -> list[SecretSummary]:
        try:
            with self._session() as db:
                return secret_service.list_secrets(db)
        except VaultError as exc:
            logger.warning("list_all failed (%s): %s", exc.kind, exc)
            return []

    def search(self, query: str) -> list[SecretSummary]:
        if not query:
            return self.list_all()
        try:
            with self._session() as db:
                return secret_service.search_secrets(db, query)
        except VaultError as exc:
            logger.warning("search failed (%s): %s", exc.kind, exc)
            return []

    def get_full(self, secret_id: int) -> str | None:
        try:
            with self._session() as db:
                return secret_service.get_secret_value(db, secret_id)
        except VaultError as exc:
            logger.debug("get_full(%s) failed (%s)", secret_id, exc.kind)
            return None

    # ── Writes ───────────────────────────────────────────────────────

    def add(self, key: str, value: str) -> bool:
        try:
            with self._session() as db:
                secret_service.upsert_secret(db, key, value)
        except VaultError as exc:
            logger.warning("add(%r) failed (%s)", key, exc.kind)
            return False
        return True

    def update(self, secret_id: int, value: str) -> bool:
        try:
            with self._session() as db:
                secret_service.update_secret(db, secret_id, value)
        except VaultError as exc:
            logger.warning("update(%s) failed (%s)", secret_id, exc.kind)
            return False
        return True

    def delete(self, secret_id: int) -> bool:
        try:
            with self._session() as db:
                secret_service.delete_secret(db, secret_id)
        except VaultError as exc:
            logger.warning("delete(%s) failed (%s)", secret_id, exc.kind)
            return False
        return True

    # ── Env text ─────────────────────────────────────────────────────

    def import_from_env_text(self, content: str) -> int:
        """Upsert every entry parsed from ``content``; return how many were stored."""
        imported = 0
        for key, value in env_codec.parse_env_text(content):
            if self.add(key, value):
                imported += 1
        logger.info("Imported %d env entries", imported)
        return imported

    def export_to_env_text(self) -> str:
        try:
            with self._session() as db:
                pairs = secret_service.all_pairs(db)
        except VaultError as exc:
            logger.warning("export failed (%s): %s", exc.kind, exc)
            return ""
        return env_codec.render_env_text(pairs)

    # ── Shell ────────────────────────────────────────────────────────

    def sync_to_shell(self) -> bool:
        """Write all secrets to the dotfile and make shell profiles source it."""
        try:
            with self._session() as db:
                pairs = secret_service.all_pairs(db)
            shell_sync.write_dotfile(self.dotfile_path, env_codec.render_shell_exports(pairs))
        except VaultError as exc:
            logger.warning("Shell sync failed (%s): %s", exc.kind, exc)
            return False
        logger.info("Wrote %d exports to %s", len(pairs), self.dotfile_path)

        for profile in shell_sync.patch_profiles(self.home_dir):
            logger.info("Added EnvVault source line to %s", profile)
        return True

    def envvault_file_path(self) -> str:
        return str(self.dotfile_path)


@lru_cache
def get_vault() -> EnvVault:
    """Process-wide vault built from settings (FastAPI dependency)."""
    return EnvVault.from_settings(settings)
