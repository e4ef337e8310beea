import logging

from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return

from .dtos import AuthContext

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Revoke the token used for the current request.

    Other tokens of the same user remain valid. A token that is already
    revoked fails with INVALID_TOKEN rather than succeeding silently.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: AuthContext) -> Result[None]:
        async with self.uow:
            revoked = await self.uow.tokens.delete_by_id(context.token_id)
            if not revoked:
                return Return.err(
                    Error.authentication("INVALID_TOKEN", "Token is no longer valid.")
                )

            await self.uow.commit()

            logger.info("User %s logged out", context.user_id)

            return Return.ok()
