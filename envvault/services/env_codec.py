"""Env text codec — ``KEY=VALUE`` lines to (key, value) pairs and back."""

from collections.abc import Iterable


def _strip_quotes(value: str) -> str:
    # Double and single quotes are stripped independently, one char per
    # side, without requiring the two ends to match.
    for quote in ('"', "'"):
        if value.startswith(quote):
            value = value[1:]
        if value.endswith(quote):
            value = value[:-1]
    return value


def parse_env_text(content: str) -> list[tuple[str, str]]:
    """Parse .env style text into ordered (key, value) pairs.

    Blank lines, ``#`` comments, lines without ``=`` and lines with an
    empty key are skipped. Only the first ``=`` splits key from value.
    """
    entries: list[tuple[str, str]] = []
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key:
            continue
        entries.append((key, _strip_quotes(value.strip())))
    return entries


def _quote(value: str) -> str:
    return '"' + value.replace('"', '\\"') + '"'


def render_env_text(pairs: Iterable[tuple[str, str]]) -> str:
    """Render pairs as ``KEY="VALUE"`` lines, no trailing newline."""
    return "\n".join(f"{key}={_quote(value)}" for key, value in pairs)


def render_shell_exports(pairs: Iterable[tuple[str, str]]) -> str:
    """Render pairs as ``export KEY="VALUE"`` lines, no trailing newline."""
    return "\n".join(f"export {key}={_quote(value)}" for key, value in pairs)
