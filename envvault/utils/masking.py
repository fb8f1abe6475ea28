"""Display-safe redaction of secret values."""


def mask_value(value: str) -> str:
    """Mask a secret value for display: show first 4 and last 4 chars.

    Values of 8 characters or fewer are fully starred so no fragment of a
    short secret is ever shown.
    """
    if len(value) <= 8:
        return "*" * len(value)
    return value[:4] + "..." + value[-4:]
