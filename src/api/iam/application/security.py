"""Security utilities for root key verification.

Root keys are issued and hashed by the dashboard. They are stored as bcrypt
hashes next to a short plaintext prefix used to narrow the lookup before
the (deliberately slow) hash comparison.
"""

import bcrypt

ROOT_KEY_PREFIX_LENGTH = 12


def extract_prefix(secret: str) -> str:
    """Extract the lookup prefix (first 12 characters) of a root key secret.

    Args:
        secret: The full root key secret

    Returns:
        The first 12 characters of the secret
    """
    return secret[:ROOT_KEY_PREFIX_LENGTH]


def verify_root_key_secret(secret: str, key_hash: str) -> bool:
    """Verify a secret against its hash using constant-time comparison.

    Args:
        secret: The plaintext root key secret to verify
        key_hash: The bcrypt hash to verify against

    Returns:
        True if the secret matches the hash, False otherwise (including
        when the stored hash is malformed)
    """
    try:
        return bcrypt.checkpw(secret.encode(), key_hash.encode())
    except ValueError:
        return False
