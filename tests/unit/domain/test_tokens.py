from datetime import datetime, timedelta
from unittest.mock import patch

from config import ApplicationConfig
from src.api.utils.tokens import generate_token, hash_token, token_expiry, token_matches


def test_generate_token_stores_only_hash():
    token, token_hash = generate_token()

    assert token != token_hash
    assert token_hash == hash_token(token)
    assert len(token_hash) == 64
    assert token not in token_hash


def test_token_matches():
    token, token_hash = generate_token()

    assert token_matches(token, token_hash) is True
    assert token_matches(token + "x", token_hash) is False


def test_token_expiry():
    now = datetime(2024, 1, 1)

    assert token_expiry(now) == now + timedelta(days=30)
    with patch.object(ApplicationConfig, "TOKEN_TTL_DAYS", None):
        assert token_expiry(now) is None
