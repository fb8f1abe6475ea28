"""Shell sync — publish secrets to ~/.envvault and source it from profiles."""

import logging
from pathlib import Path

from envvault.errors import ErrorKind, VaultError

logger = logging.getLogger(__name__)

DOTFILE_NAME = ".envvault"
SHELL_PROFILES = (".zshrc", ".bashrc", ".bash_profile")
SOURCE_MARKERS = ("source ~/.envvault", ". ~/.envvault")
SOURCE_BLOCK = "\n# EnvVault secrets\n[ -f ~/.envvault ] && source ~/.envvault\n"


def dotfile_path(home: Path) -> Path:
    return home / DOTFILE_NAME


def write_dotfile(path: Path, content: str) -> None:
    """Overwrite the dotfile with ``content``."""
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise VaultError(ErrorKind.IO_FAILURE, f"cannot write {path}: {exc}") from exc


def patch_profile(profile: Path) -> bool:
    """Append the sourcing block to ``profile`` unless it already sources the dotfile.

    Returns True only when the block was appended. Missing, unreadable and
    unwritable profiles are skipped.
    """
    if not profile.exists():
        return False
    try:
        content = profile.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read shell profile %s: %s", profile, exc)
        return False

    if any(marker in content for marker in SOURCE_MARKERS):
        return False

    try:
        with profile.open("a", encoding="utf-8") as fh:
            fh.write(SOURCE_BLOCK)
    except OSError as exc:
        logger.warning("Cannot append to shell profile %s: %s", profile, exc)
        return False
    return True


def patch_profiles(home: Path) -> list[Path]:
    """Patch every known shell profile under ``home``; return the ones changed."""
    patched = []
    for name in SHELL_PROFILES:
        profile = home / name
        if patch_profile(profile):
            patched.append(profile)
    return patched
