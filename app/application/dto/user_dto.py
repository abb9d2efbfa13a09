from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CurrentUser(BaseModel):
    """Acting identity decoded from a bearer token (the user record minus password)"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="_id")
    username: Any = None
    email: Any = None
    name: Any = None
    gender: Any = None
    photo: Any = None
