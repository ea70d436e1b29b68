"""
Password hashing

Passwords are peppered with the server secret (HMAC-SHA256) and then stored
as salted bcrypt hashes. The HMAC hex digest is 64 bytes, under bcrypt's
72-byte input limit, so long passwords are not silently truncated.
"""

import functools
import hashlib
import hmac

import bcrypt

from config import ApplicationConfig


def _pepper(password: str) -> bytes:
    return (
        hmac.new(
            ApplicationConfig.AUTH_SECRET.encode("utf-8"),
            password.encode("utf-8"),
            hashlib.sha256,
        )
        .hexdigest()
        .encode("ascii")
    )


def hash_password(password: str) -> str:
    """Hash a password for storage"""
    salt = bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_pepper(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a candidate password against a stored hash; never raises"""
    try:
        return bcrypt.checkpw(_pepper(password), password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@functools.lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("dummy_password")


def burn_verification_time() -> None:
    """Run a throwaway check so unknown emails cost as much as known ones"""
    verify_password("dummy_password_mismatch", _dummy_hash())
