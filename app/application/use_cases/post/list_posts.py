# Standard library imports
from typing import Any, Dict, List

# Local application imports
from ....domain.repositories.post_repository import PostRepository


class ListPostsUseCase:
    """Use case for listing every post; no filtering, sorting or paging"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self) -> List[Dict[str, Any]]:
        return await self.post_repository.list_all()
