# Standard library imports
import asyncio

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import InternalError, ValidationConflict
from ....core.security import hash_password
from ...dto.auth_dto import UserRegistrationRequest


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> User:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            The stored user

        Raises:
            ValidationConflict: If the username is already taken
            InternalError: If hashing or the store fails; nothing is inserted
        """
        try:
            existing_user = await self.user_repository.find_by_username(request.username)
            if existing_user is not None:
                raise ValidationConflict(request.username)

            hashed_password = await asyncio.to_thread(hash_password, request.password)

            new_user = User(
                id=None,  # Will be set by repository
                username=request.username,
                hashed_password=hashed_password,
                email=request.email,
                name=request.name,
                gender=request.gender,
                photo=request.photo,
            )
            return await self.user_repository.save(new_user)
        except ValidationConflict:
            raise
        except Exception as exception:
            raise InternalError(cause=exception) from exception
