from datetime import timedelta

from config import ApplicationConfig
from src.api.utils.jwt import issue_session_token, parse_session_token
from src.domain.base import utc_now
from src.domain.identity import UserIdentity


def make_identity(**overrides) -> UserIdentity:
    fields = {
        "id": "7f1c2d4e-0000-4000-8000-000000000001",
        "name": "A",
        "email": "a@x.com",
        "role": "read-write",
        "avatar_url": "https://api.dicebear.com/7.x/avataaars/svg?seed=a@x.com",
    }
    fields.update(overrides)
    return UserIdentity(**fields)


def test_round_trip_returns_identity_unchanged():
    identity = make_identity()

    assert parse_session_token(issue_session_token(identity)) == identity


def test_round_trip_without_avatar():
    identity = make_identity(avatar_url=None)

    assert parse_session_token(issue_session_token(identity)) == identity


def test_token_is_url_safe():
    token = issue_session_token(make_identity())

    assert all(c.isalnum() or c in "-_." for c in token)


def test_token_valid_until_ttl_elapses():
    identity = make_identity()
    issued = utc_now() - timedelta(days=ApplicationConfig.SESSION_TOKEN_TTL_DAYS) + timedelta(minutes=5)

    assert parse_session_token(issue_session_token(identity, now=issued)) == identity


def test_token_invalid_after_ttl():
    issued = utc_now() - timedelta(days=ApplicationConfig.SESSION_TOKEN_TTL_DAYS, minutes=1)

    assert parse_session_token(issue_session_token(make_identity(), now=issued)) is None


def test_tampered_token_is_invalid():
    token = issue_session_token(make_identity())
    header, payload, signature = token.split(".")
    flipped = ("A" if signature[0] != "A" else "B") + signature[1:]

    assert parse_session_token(f"{header}.{payload}.{flipped}") is None


def test_token_signed_with_other_secret_is_invalid(monkeypatch):
    token = issue_session_token(make_identity())

    monkeypatch.setattr(ApplicationConfig, "AUTH_SECRET", "another-secret")

    assert parse_session_token(token) is None


def test_malformed_tokens_are_invalid():
    assert parse_session_token("") is None
    assert parse_session_token("not-a-token") is None
    assert parse_session_token("a.b.c") is None
