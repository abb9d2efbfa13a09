# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import InternalError, NoModification, NotFound


class ToggleLikeUseCase:
    """Use case for liking or unliking a post as the acting user"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, user_id: str) -> None:
        """
        Flip the acting user's membership in the post's likedBy set

        The repository performs the check and the write as a single atomic
        update, so `likes` always equals the size of `likedBy`.

        Raises:
            NotFound: If no post has this id
            NoModification: If the post matched but the store changed nothing
            InternalError: If the store fails
        """
        try:
            result = await self.post_repository.toggle_like(post_id, user_id)
        except Exception as exception:
            raise InternalError(cause=exception) from exception

        if not result.found:
            raise NotFound(post_id)
        if not result.changed:
            raise NoModification("toggle_like")
