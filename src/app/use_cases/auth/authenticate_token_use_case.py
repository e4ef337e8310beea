"""
Authenticate Token Use Case

Resolves a bearer token to the caller identity.
"""

from src.api.utils.tokens import hash_token, token_matches
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.result import Error, Result, Return

from .dtos import AuthContext


class AuthenticateTokenUseCase:
    """
    Use case for resolving an opaque bearer token.

    Business Rules:
    - Lookup is by SHA-256 hash; the plain token is never stored
    - The match is confirmed with a constant-time comparison
    - Expired tokens are rejected
    - Returns plain identity data, never the ORM entity
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[AuthContext]:
        """
        Execute authenticate token use case.

        Args:
            token: Plain bearer token from the Authorization header

        Returns:
            Result with AuthContext, or authentication Error
        """
        if not token:
            return Return.err(Error.authentication())

        async with self.uow:
            access_token = await self.uow.tokens.get_by_hash(hash_token(token))

            if access_token is None or not token_matches(token, access_token.token_hash):
                return Return.err(Error.authentication())

            if access_token.is_expired(utcnow()):
                return Return.err(
                    Error.authentication("TOKEN_EXPIRED", "Token has expired.")
                )

            user = await self.uow.users.get_by_id(access_token.user_id)
            if user is None:
                return Return.err(Error.authentication())

            return Return.ok(
                AuthContext(
                    user_id=user.id,
                    token_id=access_token.id,
                    name=user.name,
                    email=user.email,
                )
            )
