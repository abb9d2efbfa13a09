from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.post_repository import PostRepository
from ...application.services.post_authorization import PostOwnershipPolicy
from ...application.use_cases.post.list_posts import ListPostsUseCase
from ...application.use_cases.post.create_post import CreatePostUseCase
from ...application.use_cases.post.toggle_like import ToggleLikeUseCase
from ...application.use_cases.post.add_comment import AddCommentUseCase
from ...application.use_cases.post.update_post import UpdatePostUseCase
from ...application.use_cases.post.delete_post import DeletePostUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider - registers all post-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the ownership policy as a singleton and every post use case
        as a factory.
        """
        container.register_singleton(
            PostOwnershipPolicy,
            PostOwnershipPolicy(
                post_repository=container.get(PostRepository),
                owner_field=get_settings().post_owner_field,
            )
        )

        container.register_factory(
            ListPostsUseCase,
            lambda: ListPostsUseCase(post_repository=container.get(PostRepository))
        )

        container.register_factory(
            CreatePostUseCase,
            lambda: CreatePostUseCase(post_repository=container.get(PostRepository))
        )

        container.register_factory(
            ToggleLikeUseCase,
            lambda: ToggleLikeUseCase(post_repository=container.get(PostRepository))
        )

        container.register_factory(
            AddCommentUseCase,
            lambda: AddCommentUseCase(post_repository=container.get(PostRepository))
        )

        container.register_factory(
            UpdatePostUseCase,
            lambda: UpdatePostUseCase(
                post_repository=container.get(PostRepository),
                ownership_policy=container.get(PostOwnershipPolicy),
            )
        )

        container.register_factory(
            DeletePostUseCase,
            lambda: DeletePostUseCase(
                post_repository=container.get(PostRepository),
                ownership_policy=container.get(PostOwnershipPolicy),
            )
        )
