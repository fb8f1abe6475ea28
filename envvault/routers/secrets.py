"""Secret CRUD + env import/export endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from envvault.schemas.secret import (
    EnvExport,
    EnvImport,
    EnvImportResult,
    OperationResult,
    SecretCreate,
    SecretSummary,
    SecretUpdate,
    SecretValue,
)
from envvault.vault import EnvVault, get_vault

router = APIRouter()


@router.get("/", response_model=list[SecretSummary])
def search_secrets(q: str = "", vault: EnvVault = Depends(get_vault)):
    return vault.search(q)


@router.post("/import", response_model=EnvImportResult)
def import_env(data: EnvImport, vault: EnvVault = Depends(get_vault)):
    return EnvImportResult(imported=vault.import_from_env_text(data.content))


@router.get("/export", response_model=EnvExport)
def export_env(vault: EnvVault = Depends(get_vault)):
    return EnvExport(content=vault.export_to_env_text())


@router.get("/{secret_id}/value", response_model=SecretValue)
def get_secret_value(secret_id: int, vault: EnvVault = Depends(get_vault)):
    value = vault.get_full(secret_id)
    if value is None:
        raise HTTPException(status_code=404, detail="Secret not found")
    return SecretValue(id=secret_id, value=value)


@router.post("/", response_model=OperationResult)
def add_secret(data: SecretCreate, vault: EnvVault = Depends(get_vault)):
    return OperationResult(success=vault.add(data.key, data.value))


@router.patch("/{secret_id}", response_model=OperationResult)
def update_secret(secret_id: int, data: SecretUpdate, vault: EnvVault = Depends(get_vault)):
    return OperationResult(success=vault.update(secret_id, data.value))


@router.delete("/{secret_id}", response_model=OperationResult)
def delete_secret(secret_id: int, vault: EnvVault = Depends(get_vault)):
    return OperationResult(success=vault.delete(secret_id))
