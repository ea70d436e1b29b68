"""
Unit tests for ResetPasswordUseCase

Tests all business logic with mocked dependencies.
"""
from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.app.services.password_hasher import hash_password, verify_password
from src.app.services.reset_tokens import hash_reset_token
from src.app.use_cases.auth import ResetPasswordUseCase
from src.domain.base import utc_now
from src.domain.entities import PasswordResetToken, User

PLAIN_TOKEN = "reset_token_12345"


def make_token(expires_in: timedelta = timedelta(minutes=30)) -> PasswordResetToken:
    return PasswordResetToken(
        id=uuid4(),
        email="a@x.com",
        token_hash=hash_reset_token(PLAIN_TOKEN),
        expires_at=utc_now() + expires_in,
    )


def make_user() -> User:
    return User(
        id=uuid4(),
        name="A",
        email="a@x.com",
        password_hash=hash_password("Secret123!"),
    )


@pytest.mark.asyncio
async def test_successful_password_reset(mock_uow):
    user = make_user()
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token()
    mock_uow.users.get_by_email.return_value = user

    result = await ResetPasswordUseCase(mock_uow).execute(PLAIN_TOKEN, "NewSecret456?")

    assert result.is_ok()
    assert result.value.status == "success"

    token_hash = hash_reset_token(PLAIN_TOKEN)
    mock_uow.password_reset_tokens.get_by_token_hash.assert_called_once_with(token_hash)
    mock_uow.password_reset_tokens.delete_by_token_hash.assert_called_once_with(token_hash)
    mock_uow.users.get_by_email.assert_called_once_with("a@x.com")

    assert verify_password("NewSecret456?", user.password_hash)
    assert not verify_password("Secret123!", user.password_hash)
    mock_uow.users.update.assert_called_once_with(user)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_unknown_token(mock_uow):
    result = await ResetPasswordUseCase(mock_uow).execute("nope", "NewSecret456?")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_empty_token(mock_uow):
    result = await ResetPasswordUseCase(mock_uow).execute("", "NewSecret456?")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_uow.password_reset_tokens.get_by_token_hash.assert_not_called()


@pytest.mark.asyncio
async def test_expired_token_is_purged(mock_uow):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token(
        expires_in=timedelta(minutes=-1)
    )

    result = await ResetPasswordUseCase(mock_uow).execute(PLAIN_TOKEN, "NewSecret456?")

    assert result.is_err()
    assert result.error.code == "TOKEN_EXPIRED"
    mock_uow.password_reset_tokens.delete_by_token_hash.assert_called_once_with(
        hash_reset_token(PLAIN_TOKEN)
    )
    mock_uow.commit.assert_called_once()
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_token_claimed_by_concurrent_reset(mock_uow):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token()
    mock_uow.password_reset_tokens.delete_by_token_hash = AsyncMock(return_value=False)

    result = await ResetPasswordUseCase(mock_uow).execute(PLAIN_TOKEN, "NewSecret456?")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_weak_new_password(mock_uow):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token()

    result = await ResetPasswordUseCase(mock_uow).execute(PLAIN_TOKEN, "password")

    assert result.is_err()
    assert result.error.code == "WEAK_PASSWORD"
    mock_uow.password_reset_tokens.delete_by_token_hash.assert_not_called()


@pytest.mark.asyncio
async def test_user_removed_after_token_issued(mock_uow):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token()

    result = await ResetPasswordUseCase(mock_uow).execute(PLAIN_TOKEN, "NewSecret456?")

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_expired_token_with_weak_password_is_purged(mock_uow):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token(
        expires_in=timedelta(minutes=-1)
    )

    result = await ResetPasswordUseCase(mock_uow).execute(PLAIN_TOKEN, "password")

    assert result.is_err()
    assert result.error.code == "TOKEN_EXPIRED"
    mock_uow.password_reset_tokens.delete_by_token_hash.assert_called_once_with(
        hash_reset_token(PLAIN_TOKEN)
    )
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_unknown_token_with_weak_password(mock_uow):
    result = await ResetPasswordUseCase(mock_uow).execute("nope", "password")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_uow.password_reset_tokens.delete_by_token_hash.assert_not_called()
