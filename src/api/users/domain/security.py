"""Password hashing utilities.

Uses bcrypt for hashing and constant-time verification. bcrypt only reads
the first 72 bytes of its input, and current releases reject longer input
outright, so passwords are pre-hashed with SHA-256 and base64-encoded before
being handed to bcrypt. This keeps every character of a long password
significant.
"""

from __future__ import annotations

import base64
import hashlib

import bcrypt

DEFAULT_BCRYPT_ROUNDS = 12

_rounds = DEFAULT_BCRYPT_ROUNDS


def set_bcrypt_rounds(rounds: int) -> None:
    """Set the bcrypt work factor used for new hashes.

    Args:
        rounds: log2 of the number of bcrypt iterations (4-31)

    Raises:
        ValueError: If rounds is outside bcrypt's supported range
    """
    global _rounds
    if not 4 <= rounds <= 31:
        raise ValueError(f"bcrypt rounds must be between 4 and 31, got {rounds}")
    _rounds = rounds


def get_bcrypt_rounds() -> int:
    """Return the bcrypt work factor used for new hashes."""
    return _rounds


def _prehash(plain_password: str) -> bytes:
    digest = hashlib.sha256(plain_password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_password(plain_password: str) -> str:
    """Hash a plaintext password with bcrypt.

    Args:
        plain_password: The plaintext password

    Returns:
        The bcrypt hash as a string
    """
    return bcrypt.hashpw(
        _prehash(plain_password), bcrypt.gensalt(rounds=_rounds)
    ).decode()


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Verify a plaintext password against a hash using constant-time comparison.

    Args:
        plain_password: The plaintext password to check
        password_hash: The bcrypt hash to verify against

    Returns:
        True if the password matches the hash, False otherwise
    """
    try:
        return bcrypt.checkpw(_prehash(plain_password), password_hash.encode())
    except ValueError:
        # Malformed or non-bcrypt hash
        return False
