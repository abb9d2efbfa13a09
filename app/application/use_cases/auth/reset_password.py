# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import InternalError, NoModification
from ....core.security import hash_password

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """Use case for the forget-password flow"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, email: str, password: str) -> None:
        """
        Set a new password for the first user with this email

        Raises:
            NoModification: If no document changed (unknown email, or the
                stored hash already matched byte for byte)
            InternalError: If hashing or the store fails
        """
        try:
            hashed_password = await asyncio.to_thread(hash_password, password)
            modified = await self.user_repository.update_password_by_email(email, hashed_password)
        except Exception as exception:
            logger.error(f"Error resetting password: {exception}", exc_info=True)
            raise InternalError(cause=exception) from exception

        if modified == 0:
            raise NoModification("reset_password")
