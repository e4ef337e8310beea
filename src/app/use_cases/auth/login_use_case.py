"""
Login Use Case

Handles credential check and single-active-token rotation.
"""

import logging

import bcrypt

from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return
from src.domain.rules import BCRYPT_MAX_BYTES

from .dtos import AuthResponse, UserInfo
from .token_issuer import issue_token

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error.authentication("INVALID_CREDENTIALS", "Invalid credentials.")


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Same error for unknown email and wrong password (no user enumeration)
    - bcrypt check runs even when the user is not found
    - Passwords bcrypt cannot hash fail like a wrong password
    - Every existing token of the user is revoked before a new one is issued,
      so a login leaves exactly one live token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email (exact match)
            password: Plain text password

        Returns:
            Result with AuthResponse containing user and token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            password_bytes = password.encode("utf-8")

            if user is None or len(password_bytes) > BCRYPT_MAX_BYTES:
                # Hash dummy password to keep timing close to the found-user path
                bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(12))
                return Return.err(INVALID_CREDENTIALS)

            password_valid = bcrypt.checkpw(
                password_bytes, user.password_hash.encode("utf-8")
            )
            if not password_valid:
                return Return.err(INVALID_CREDENTIALS)

            revoked = await self.uow.tokens.delete_all_by_user_id(user.id)
            token = await issue_token(self.uow, user.id)

            await self.uow.commit()

            logger.info("User %s logged in, %s previous token(s) revoked", user.id, revoked)

            return Return.ok(AuthResponse(user=UserInfo.from_entity(user), token=token))
