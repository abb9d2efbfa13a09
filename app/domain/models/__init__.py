from .user import User
from .post import Post
from .comment import Comment
from .like_set import LikeSet
from .write_result import WriteResult

__all__ = ["User", "Post", "Comment", "LikeSet", "WriteResult"]
