"""FastAPI application entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from envvault import __version__
from envvault.config import settings
from envvault.routers import secrets, shell
from envvault.vault import get_vault

# ── Logging setup ────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    vault = get_vault()
    if vault.init():
        logger.info("Vault ready at %s", vault.db_path)
    else:
        logger.error("Vault init failed for %s", vault.db_path)
    yield


app = FastAPI(
    title="EnvVault",
    description="Local secret vault with shell sync",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(secrets.router, prefix="/api/secrets", tags=["secrets"])
app.include_router(shell.router, prefix="/api/shell", tags=["shell"])


@app.get("/health")
def health():
    return {"status": "ok", "service": "envvault"}
