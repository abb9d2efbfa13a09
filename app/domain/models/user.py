from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..constants import UserFields


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: Any
    hashed_password: str
    email: Any = None
    name: Any = None
    gender: Any = None
    photo: Any = None

    def __post_init__(self):
        """Business validations"""
        if not self.hashed_password:
            raise ValueError("Password hash is required")

    def to_claims(self) -> Dict[str, Any]:
        """The user record minus its password, as carried in a bearer token"""
        return {
            UserFields.MONGO_ID: self.id,
            UserFields.USERNAME: self.username,
            UserFields.EMAIL: self.email,
            UserFields.GENDER: self.gender,
            UserFields.NAME: self.name,
            UserFields.PHOTO: self.photo,
        }
