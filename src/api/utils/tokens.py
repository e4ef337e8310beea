import hashlib
import hmac
import secrets
from datetime import datetime, timedelta
from typing import Optional, Tuple

from config import ApplicationConfig


def hash_token(token: str) -> str:
    """
    Hash an opaque bearer token for storage and lookup

    Args:
        token: Plain token as presented by the client

    Returns:
        SHA-256 hex digest (64 chars)
    """
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def generate_token() -> Tuple[str, str]:
    """
    Generate a new opaque bearer token

    Returns:
        (plain_token, token_hash). Only the hash is persisted; the plain
        token is handed to the client once.
    """
    token = secrets.token_urlsafe(40)
    return token, hash_token(token)


def token_matches(token: str, token_hash: str) -> bool:
    """Constant-time comparison of a presented token against a stored hash"""
    return hmac.compare_digest(hash_token(token), token_hash)


def token_expiry(now: datetime) -> Optional[datetime]:
    ttl_days = ApplicationConfig.TOKEN_TTL_DAYS
    if not ttl_days:
        return None
    return now + timedelta(days=ttl_days)
