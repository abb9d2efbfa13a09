from .list_posts import ListPostsUseCase
from .create_post import CreatePostUseCase
from .toggle_like import ToggleLikeUseCase
from .add_comment import AddCommentUseCase
from .update_post import UpdatePostUseCase
from .delete_post import DeletePostUseCase

__all__ = [
    "ListPostsUseCase",
    "CreatePostUseCase",
    "ToggleLikeUseCase",
    "AddCommentUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
]
