from envvault.models.secret import Secret

__all__ = ["Secret"]
