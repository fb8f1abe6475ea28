"""Internal error kinds. Never surfaced past the EnvVault facade."""

from enum import StrEnum


class ErrorKind(StrEnum):
    STORE_UNAVAILABLE = "store_unavailable"
    QUERY_FAILED = "query_failed"
    NOT_FOUND = "not_found"
    IO_FAILURE = "io_failure"
    MALFORMED_INPUT = "malformed_input"


class VaultError(Exception):
    def __init__(self, kind: ErrorKind, message: str = "") -> None:
        super().__init__(message or kind.value)
        self.kind = kind
