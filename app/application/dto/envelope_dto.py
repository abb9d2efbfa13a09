from typing import Optional

from pydantic import BaseModel


class Envelope(BaseModel):
    """The {success, message} wrapper returned by most routes"""
    success: bool
    message: Optional[str] = None
