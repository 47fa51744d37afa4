import pytest

from registrar.core.errors import ValidationFailedError
from registrar.models.user import User
from registrar.schemas.users import SignupForm
from registrar.services.users import UsersService


@pytest.fixture
def users_service(mock_users_repository, auth_service, signup_validator):
    return UsersService(
        users_repository=mock_users_repository,
        auth_service=auth_service,
        validator=signup_validator,
    )


async def test_register_hashes_password_before_storing(users_service, mock_users_repository, auth_service):
    stored = User(id=1, email="jason@mccallister.io", password="hash")
    mock_users_repository.find_or_create.return_value = (stored, True)

    user = await users_service.register(
        SignupForm(email="jason@mccallister.io", password="somePassword1!")
    )

    assert user is stored
    mock_users_repository.find_or_create.assert_awaited_once()
    user_in_db = mock_users_repository.find_or_create.await_args.args[0]
    assert mock_users_repository.find_or_create.await_args.kwargs == {"email": "jason@mccallister.io"}
    assert user_in_db.email == "jason@mccallister.io"
    assert user_in_db.password != "somePassword1!"
    assert auth_service.verify_password("somePassword1!", user_in_db.password)


async def test_register_returns_existing_user(users_service, mock_users_repository):
    existing = User(id=7, email="jason@mccallister.io", password="original-hash")
    mock_users_repository.find_or_create.return_value = (existing, False)

    user = await users_service.register(
        SignupForm(email="jason@mccallister.io", password="somePassword1!")
    )

    assert user.id == 7
    assert user.password == "original-hash"


async def test_register_rejects_invalid_form_without_touching_store(users_service, mock_users_repository):
    with pytest.raises(ValidationFailedError) as exc_info:
        await users_service.register(SignupForm())

    assert exc_info.value.payload == {
        "errors": [
            "The email field is required",
            "The email field must be minimum 4 char",
            "The email field must be a valid email address",
            "The password field is required",
            "The password field must be minimum 8 char",
        ]
    }
    mock_users_repository.find_or_create.assert_not_awaited()


async def test_list_users_returns_active_users(users_service, mock_users_repository):
    active = [User(id=1, email="jason@mccallister.io", password="hash")]
    mock_users_repository.get_active.return_value = active

    assert await users_service.list_users() == active
