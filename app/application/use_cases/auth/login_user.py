# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import InternalError
from ....core.security import verify_password, create_jwt_token
from ...dto.auth_dto import UserLoginRequest


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> Optional[str]:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with username and password

        Returns:
            Signed token if authentication succeeded, None for unknown
            username or wrong password (the caller cannot tell which)

        Raises:
            InternalError: If the store or token signing fails
        """
        try:
            user = await self.user_repository.find_by_username(request.username)
            if user is None:
                return None

            if request.password is None or not verify_password(request.password, user.hashed_password):
                return None

            return create_jwt_token(user.to_claims())
        except Exception as exception:
            raise InternalError(cause=exception) from exception
