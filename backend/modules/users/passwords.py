"""Temporary password generation for privileged admin operations."""

import secrets
import string

ALPHABET = string.ascii_lowercase + string.digits
RANDOM_LENGTH = 8


def generate_temporary_password(prefix: str = "Temp") -> str:
    """
    Build a one-time password the user must change on next sign-in.

    Format: ``<prefix><8 random lower-case alphanumerics>!``
    """
    body = "".join(secrets.choice(ALPHABET) for _ in range(RANDOM_LENGTH))
    return f"{prefix}{body}!"
