"""EnvVault: local secret store with masked previews and shell sync."""

__version__ = "0.1.0"
