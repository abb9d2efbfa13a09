# Standard library imports
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Local application imports
from .comment import Comment
from .like_set import LikeSet


@dataclass
class Post:
    """
    Pure domain model for Post entity.

    Posts are stored as submitted, so every field the client sent that is not
    one of the known ones below is kept in `extra`.
    """
    id: Optional[str]
    content: Any = None
    likes: int = 0
    liked_by: LikeSet = field(default_factory=LikeSet)
    comments: List[Comment] = field(default_factory=list)
    liked: Optional[bool] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def toggle_like(self, user_id: str) -> bool:
        """
        Like the post for `user_id` if they have not, otherwise unlike it.
        Keeps `likes` equal to the size of `liked_by`.

        Returns:
            The new value of `liked`
        """
        self.liked = self.liked_by.toggle(user_id)
        self.likes = len(self.liked_by)
        return self.liked

    def add_comment(self, comment: Comment) -> None:
        """Append a comment; existing comments are never reordered"""
        if comment.id is None:
            raise ValueError("Comment id is required")
        if any(existing.id == comment.id for existing in self.comments):
            raise ValueError(f"Duplicate comment id {comment.id}")
        self.comments.append(comment)
