"""Shell sync endpoints."""

from fastapi import APIRouter, Depends

from envvault.schemas.secret import EnvvaultPath, ShellSyncResult
from envvault.vault import EnvVault, get_vault

router = APIRouter()


@router.post("/sync", response_model=ShellSyncResult)
def sync_to_shell(vault: EnvVault = Depends(get_vault)):
    return ShellSyncResult(success=vault.sync_to_shell(), path=vault.envvault_file_path())


@router.get("/path", response_model=EnvvaultPath)
def envvault_path(vault: EnvVault = Depends(get_vault)):
    return EnvvaultPath(path=vault.envvault_file_path())
