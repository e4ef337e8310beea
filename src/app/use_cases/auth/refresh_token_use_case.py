"""
Refresh Token Use Case

Rotates the presented access token.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return

from .dtos import AuthContext, TokenResponse
from .token_issuer import issue_token


class RefreshTokenUseCase:
    """
    Use case for rotating an access token.

    Business Rules:
    - The presented token is revoked and a new one issued in one transaction
    - Other tokens of the same user stay valid
    - The new token is returned once only
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: AuthContext) -> Result[TokenResponse]:
        """
        Execute refresh token use case.

        Args:
            context: Caller identity including the presented token id

        Returns:
            Result with TokenResponse containing the new token, or Error
        """
        async with self.uow:
            revoked = await self.uow.tokens.delete_by_id(context.token_id)
            if not revoked:
                return Return.err(
                    Error.authentication("INVALID_TOKEN", "Token is no longer valid.")
                )

            token = await issue_token(self.uow, context.user_id)

            await self.uow.commit()

            return Return.ok(TokenResponse(token=token))
