# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import ValidationConflict
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by username

        Args:
            username: Username to search for

        Returns:
            User domain model if found, None otherwise
        """
        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username})
        except Exception as e:
            raise RuntimeError(f"Error finding user by username: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Insert a new user

        Args:
            user: User domain model to insert (id is ignored)

        Returns:
            The user with the store-generated id set

        Raises:
            ValidationConflict: If the unique username index rejects the insert
        """
        if not user:
            raise ValueError("User cannot be None")

        try:
            result = await self.user_collection.insert_one(self._user_to_dict(user))
        except DuplicateKeyError:
            raise ValidationConflict(user.username)
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

        return User(
            id=str(result.inserted_id),
            username=user.username,
            hashed_password=user.hashed_password,
            email=user.email,
            name=user.name,
            gender=user.gender,
            photo=user.photo,
        )

    async def update_password_by_email(self, email: str, hashed_password: str) -> int:
        """
        Replace the password hash of the first user matching `email`

        Returns:
            Number of documents modified (0 when nothing matched or the hash was unchanged)
        """
        try:
            result = await self.user_collection.update_one(
                {UserFields.EMAIL: email},
                {"$set": {UserFields.PASSWORD: hashed_password}}
            )
        except Exception as e:
            raise RuntimeError(f"Error updating password: {str(e)}")
        return result.modified_count

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            hashed_password=document.get(UserFields.PASSWORD, ""),
            email=document.get(UserFields.EMAIL),
            name=document.get(UserFields.NAME),
            gender=document.get(UserFields.GENDER),
            photo=document.get(UserFields.PHOTO),
        )

    def _user_to_dict(self, user: User) -> dict:
        """Convert User domain model to a MongoDB document (without _id)"""
        return {
            UserFields.USERNAME: user.username,
            UserFields.PASSWORD: user.hashed_password,
            UserFields.EMAIL: user.email,
            UserFields.GENDER: user.gender,
            UserFields.NAME: user.name,
            UserFields.PHOTO: user.photo,
        }
