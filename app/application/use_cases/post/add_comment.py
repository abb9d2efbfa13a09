# Standard library imports
from typing import Any, Dict, Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.comment import Comment
from ....domain.exceptions import NoModification


class AddCommentUseCase:
    """Use case for appending a comment to a post"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, comment_info: Optional[Dict[str, Any]]) -> Comment:
        """
        Append `comment_info` plus a new comment id to the post's comments

        Returns:
            The stored comment, with its generated id

        Raises:
            NoModification: If the post does not exist
        """
        comment = Comment(id=None, info=dict(comment_info or {}))
        modified = await self.post_repository.push_comment(post_id, comment)
        if modified == 0:
            raise NoModification("add_comment")
        return comment
