# Standard library imports
from typing import Any, Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import InternalError


class CreatePostUseCase:
    """Use case for submitting a post"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, document: Any) -> Optional[str]:
        """
        Store the request body as a new post, field for field

        Args:
            document: Decoded JSON body; no whitelist is applied

        Returns:
            The generated post id, or None if the store reported none

        Raises:
            InternalError: If the body is not a JSON object or the insert fails
        """
        if not isinstance(document, dict):
            raise InternalError("Post body must be a JSON object")

        try:
            return await self.post_repository.insert(document)
        except Exception as exception:
            raise InternalError(cause=exception) from exception
