"""Public id generator service.

Generates opaque public ids of the form ``<prefix>_<base62 chars>``, for
example ``rg_4kQz81LmWb0XaTn2cE7y``.
"""

import secrets

BASE62_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

# Prefix identifying role grant ids
ROLE_GRANT_PREFIX = "rg"


def random_base62(length: int) -> str:
    """Generate a random base62 string.

    Uses the ``secrets`` CSPRNG, which is safe to call from concurrent tasks.

    Args:
        length: Number of characters to generate.

    Returns:
        A random string of base62 characters.

    Raises:
        ValueError: If length is not positive.
    """
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    return "".join(secrets.choice(BASE62_ALPHABET) for _ in range(length))


def generate_public_id(prefix: str, length: int = 20) -> str:
    """Generate a new public id with the given entity prefix.

    Args:
        prefix: Entity kind prefix (e.g. 'rg' for role grants).
        length: Length of the random portion.

    Returns:
        The new public id.

    Raises:
        ValueError: If prefix is empty or length is not positive.
    """
    if not prefix:
        raise ValueError("public id prefix is required")
    return f"{prefix}_{random_base62(length)}"
