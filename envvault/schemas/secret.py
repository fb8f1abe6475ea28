"""Secret request/response schemas."""

from pydantic import BaseModel, Field


class SecretSummary(BaseModel):
    id: int
    key: str
    value_masked: str
    # raw value is NEVER part of a summary


class SecretCreate(BaseModel):
    key: str = Field(..., min_length=1)
    value: str


class SecretUpdate(BaseModel):
    value: str


class SecretValue(BaseModel):
    id: int
    value: str


class EnvImport(BaseModel):
    content: str


class EnvImportResult(BaseModel):
    imported: int


class EnvExport(BaseModel):
    content: str


class OperationResult(BaseModel):
    success: bool


class ShellSyncResult(BaseModel):
    success: bool
    path: str


class EnvvaultPath(BaseModel):
    path: str
