"""Users service for signup and listing"""

import logging
from typing import Sequence

from registrar.core.errors import ValidationFailedError
from registrar.core.validation import Validator
from registrar.models.user import User
from registrar.repositories.users import UserRepository
from registrar.schemas.users import SignupForm, UserInDB
from registrar.services.auth import AuthService

logger = logging.getLogger(__name__)


class UsersService:
    def __init__(
        self,
        users_repository: UserRepository,
        auth_service: AuthService,
        validator: Validator,
    ):
        self.users_repository = users_repository
        self.auth_service = auth_service
        self.validator = validator

    async def register(self, form: SignupForm) -> User:
        """Validate the form and return the user for its email, creating it if needed.

        A repeated signup for a known email returns the stored user as is; the
        stored password hash is never replaced.
        """
        errors = self.validator.validate(form.model_dump())
        if errors:
            raise ValidationFailedError(errors)

        user_in_db = UserInDB(
            email=form.email,
            password=self.auth_service.hash_password(form.password),
        )

        user, created = await self.users_repository.find_or_create(user_in_db, email=form.email)
        if created:
            logger.info("Created user %s", user.id)
        else:
            logger.info("Signup for existing user %s", user.id)
        return user

    async def list_users(self) -> Sequence[User]:
        return await self.users_repository.get_active()
