"""Password hashing utilities.

Hashes are argon2id. Both hashing and verification are CPU-bound, so the
async helpers push them onto a worker thread.
"""

from anyio import to_thread
from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError

_hasher = PasswordHasher(type=Type.ID)


def hash_password(password: str) -> str:
    """Hash a plaintext password.

    Args:
        password: Plaintext password

    Returns:
        Encoded argon2id hash
    """
    return _hasher.hash(password)


def check_password(password_hash: str, password: str) -> bool:
    """Check a plaintext password against a stored hash.

    Returns False on mismatch and on malformed hashes.
    """
    try:
        return _hasher.verify(password_hash, password)
    except (InvalidHashError, VerificationError):
        return False


async def hash_password_async(password: str) -> str:
    """Hash a password without blocking the event loop."""
    return await to_thread.run_sync(hash_password, password)


async def check_password_async(password_hash: str, password: str) -> bool:
    """Check a password without blocking the event loop."""
    return await to_thread.run_sync(check_password, password_hash, password)
