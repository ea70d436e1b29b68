from uuid import uuid4

import pytest

from src.app.use_cases.users import GetUserUseCase, UpdateUserCommand, UpdateUserUseCase
from src.domain.entities import User, UserRole
from src.domain.identity import UserIdentity


def make_user(**overrides) -> User:
    fields = dict(
        id=uuid4(),
        name="A",
        email="a@x.com",
        password_hash="hash",
        role=UserRole.read_write,
        is_active=True,
    )
    fields.update(overrides)
    return User(**fields)


def admin_identity(user_id=None) -> UserIdentity:
    return UserIdentity(
        id=str(user_id or uuid4()), name="Admin", email="admin@x.com", role="admin"
    )


@pytest.mark.asyncio
async def test_get_user(mock_uow):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    result = await GetUserUseCase(mock_uow).execute(user.id)

    assert result.is_ok()
    assert result.value == UserIdentity.from_user(user)


@pytest.mark.asyncio
async def test_get_user_not_found(mock_uow):
    result = await GetUserUseCase(mock_uow).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_admin_deactivates_user(mock_uow):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    result = await UpdateUserUseCase(mock_uow).execute(
        admin_identity(), user.id, UpdateUserCommand(is_active=False)
    )

    assert result.is_ok()
    assert result.value.is_active is False
    assert result.value.role == "read-write"
    assert user.is_active is False
    mock_uow.users.update.assert_called_once_with(user)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_admin_changes_role(mock_uow):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    result = await UpdateUserUseCase(mock_uow).execute(
        admin_identity(), user.id, UpdateUserCommand(role="read", name=" Reader ")
    )

    assert result.is_ok()
    assert user.role == UserRole.read
    assert user.name == "Reader"


@pytest.mark.asyncio
async def test_non_admin_forbidden(mock_uow):
    actor = UserIdentity(id=str(uuid4()), name="B", email="b@x.com", role="read-write")

    result = await UpdateUserUseCase(mock_uow).execute(
        actor, uuid4(), UpdateUserCommand(role="admin")
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.users.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_role(mock_uow):
    result = await UpdateUserUseCase(mock_uow).execute(
        admin_identity(), uuid4(), UpdateUserCommand(role="owner")
    )

    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "command",
    [UpdateUserCommand(role="read"), UpdateUserCommand(is_active=False)],
)
async def test_admin_cannot_demote_self(mock_uow, command):
    admin_id = uuid4()

    result = await UpdateUserUseCase(mock_uow).execute(
        admin_identity(admin_id), admin_id, command
    )

    assert result.is_err()
    assert result.error.code == "CANNOT_DEMOTE_SELF"


@pytest.mark.asyncio
async def test_update_missing_user(mock_uow):
    result = await UpdateUserUseCase(mock_uow).execute(
        admin_identity(), uuid4(), UpdateUserCommand(is_active=False)
    )

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
    mock_uow.commit.assert_not_called()
