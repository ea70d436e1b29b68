import hashlib
import secrets


def generate_reset_token() -> str:
    """URL-safe token carrying 256 bits from the OS CSPRNG"""
    return secrets.token_urlsafe(32)


def hash_reset_token(token: str) -> str:
    """SHA-256 digest stored in place of the plain token"""
    return hashlib.sha256(token.encode()).hexdigest()
