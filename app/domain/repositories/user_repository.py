from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user and return it with its id set"""
        pass

    @abstractmethod
    async def update_password_by_email(self, email: str, hashed_password: str) -> int:
        """Set the password hash of the first user with this email. Returns the modified count."""
        pass
