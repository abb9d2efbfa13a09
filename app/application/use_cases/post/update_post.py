# Standard library imports
from typing import Any, Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import NoModification
from ...services.post_authorization import PostOwnershipPolicy


class UpdatePostUseCase:
    """Use case for replacing a post's content wholesale"""

    def __init__(
        self,
        post_repository: PostRepository,
        ownership_policy: Optional[PostOwnershipPolicy] = None,
    ) -> None:
        self.post_repository = post_repository
        self.ownership_policy = ownership_policy or PostOwnershipPolicy(post_repository)

    async def execute(self, post_id: str, new_content: Any, acting_user_id: Optional[str]) -> None:
        """
        Raises:
            Forbidden: If ownership checks are enabled and the caller is not the author
            NoModification: If the post does not exist or already had this content
        """
        await self.ownership_policy.ensure_owner(post_id, acting_user_id)

        modified = await self.post_repository.set_content(post_id, new_content)
        if modified == 0:
            raise NoModification("update_post")
