import logging

import bcrypt

from src.app.repositories.errors import DuplicateEntryError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import User
from src.domain.result import Error, Result, Return
from src.domain.rules import validate_registration

from .dtos import AuthResponse, RegisterCommand, UserInfo
from .token_issuer import issue_token

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MESSAGE = "The email has already been taken."


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (raw registration intent)
    - Output: Result[AuthResponse] (user + first access token)

    Business Logic:
    1. Validate name, email format, password strength and confirmation
    2. Reject duplicate email (reported with the other field errors)
    3. Hash password with bcrypt cost factor 12
    4. Create User
    5. Issue one access token
    6. Commit transaction atomically
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with name, email, password, confirmation

        Returns:
            Result[AuthResponse], or a validation Error keyed by field
        """
        errors = validate_registration(
            command.name, command.email, command.password, command.password_confirmation
        )

        async with self.uow:
            if "email" not in errors:
                existing_user = await self.uow.users.get_by_email(command.email)
                if existing_user:
                    errors["email"] = [EMAIL_TAKEN_MESSAGE]

            if errors:
                return Return.err(Error.validation(errors))

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(12)
            )

            now = utcnow()
            user = User(
                name=command.name.strip(),
                email=command.email,
                password_hash=password_hash.decode("utf-8"),
                created_at=now,
                updated_at=now,
            )
            try:
                user = await self.uow.users.create(user)
            except DuplicateEntryError:
                logger.info("Registration for %s lost a race on the email", command.email)
                return Return.err(Error.validation({"email": [EMAIL_TAKEN_MESSAGE]}))

            token = await issue_token(self.uow, user.id)

            await self.uow.commit()

            logger.info("User %s registered", user.id)

            return Return.ok(AuthResponse(user=UserInfo.from_entity(user), token=token))
