"""Platform-aware locations for the store file and the user's shell files.

Neither resolver raises: when a platform location cannot be determined the
result degrades (current directory for data, ``.`` for home) instead.
"""

import logging
import os
import platform
from pathlib import Path

logger = logging.getLogger(__name__)


def _platform_data_dir(qualifier: str, organization: str, application: str) -> Path | None:
    system = platform.system()
    if system == "Darwin":
        bundle_id = ".".join(
            part.replace(" ", "-") for part in (qualifier, organization, application)
        )
        return Path.home() / "Library" / "Application Support" / bundle_id
    if system == "Windows":
        appdata = os.environ.get("APPDATA")
        if not appdata:
            return None
        return Path(appdata) / organization / application / "data"

    project = application.strip().lower().replace(" ", "")
    xdg = os.environ.get("XDG_DATA_HOME", "")
    # XDG spec: relative paths are invalid and must be ignored
    if xdg and Path(xdg).is_absolute():
        return Path(xdg) / project
    return Path.home() / ".local" / "share" / project


def data_directory(
    qualifier: str = "com",
    organization: str = "envvault",
    application: str = "EnvVault",
) -> Path:
    """Return (and create) the application data directory."""
    try:
        data_dir = _platform_data_dir(qualifier, organization, application)
    except RuntimeError as exc:
        logger.warning("Cannot resolve home directory for data dir: %s", exc)
        data_dir = None

    if data_dir is None:
        logger.warning("No platform data directory, using current directory")
        return Path.cwd()

    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Cannot create data directory %s: %s", data_dir, exc)
        return Path.cwd()
    return data_dir


def home_directory() -> Path:
    """Return the user's home directory, or ``.`` when it cannot be resolved."""
    try:
        return Path.home()
    except RuntimeError as exc:
        logger.warning("Cannot resolve home directory: %s", exc)
        return Path(".")
