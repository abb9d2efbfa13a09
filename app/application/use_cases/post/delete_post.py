# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import NoModification
from ...services.post_authorization import PostOwnershipPolicy


class DeletePostUseCase:
    """Use case for deleting a post by id; nothing else is cascaded"""

    def __init__(
        self,
        post_repository: PostRepository,
        ownership_policy: Optional[PostOwnershipPolicy] = None,
    ) -> None:
        self.post_repository = post_repository
        self.ownership_policy = ownership_policy or PostOwnershipPolicy(post_repository)

    async def execute(self, post_id: str, acting_user_id: Optional[str] = None) -> None:
        """
        Raises:
            Forbidden: If ownership checks apply and the caller is not the author
            NoModification: If no post was removed
        """
        # Anonymous deletes are only possible when the route is not gated
        if acting_user_id is not None:
            await self.ownership_policy.ensure_owner(post_id, acting_user_id)

        deleted = await self.post_repository.delete(post_id)
        if deleted == 0:
            raise NoModification("delete_post")
