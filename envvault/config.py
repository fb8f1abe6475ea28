"""EnvVault configuration — loaded from environment / .env file."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="ENVVAULT_", extra="ignore")

    # Path overrides; None means resolve from the platform
    data_dir: Path | None = None
    home_dir: Path | None = None
    database_name: str = "vault.db"

    # Application identity used for the platform data directory
    app_qualifier: str = "com"
    app_organization: str = "envvault"
    app_name: str = "EnvVault"

    log_level: str = "INFO"


settings = Settings()
