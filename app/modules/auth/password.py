"""
Password hashing and verification.

bcrypt with a per-call salt, so hashing the same password twice yields
two different stored values that both verify. bcrypt only reads the first
72 bytes of a password; longer input is truncated before hashing and
verifying alike.
"""

import bcrypt

from app.config.settings import settings

BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode()[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = None) -> str:
    """Hash a password with bcrypt (auto-salted)."""
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash. Malformed hashes never verify."""
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode())
    except (ValueError, TypeError, AttributeError):
        return False
