# Standard library imports
import logging
from typing import Any, Optional

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.exceptions import Forbidden

logger = logging.getLogger(__name__)


class PostOwnershipPolicy:
    """
    Optional author check for post mutations.

    With no owner field configured every caller may mutate every post.
    Otherwise the post's `owner_field` value must equal the acting user id.
    """

    def __init__(self, post_repository: PostRepository, owner_field: str = "") -> None:
        self.post_repository = post_repository
        self.owner_field = owner_field

    @property
    def enabled(self) -> bool:
        return bool(self.owner_field)

    async def ensure_owner(self, post_id: str, acting_user_id: Optional[str]) -> None:
        """
        Raises:
            Forbidden: If the check is enabled and the caller is not the author
        """
        if not self.enabled:
            return

        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            # Let the write itself report that nothing was modified
            return

        owner = post.extra.get(self.owner_field)
        if acting_user_id is None or owner is None or str(owner) != acting_user_id:
            raise Forbidden("Not allowed")


def warn_on_unchecked_deletes(settings: Any) -> bool:
    """
    Log a warning when ownership checks are configured but the delete route
    is not gated: anonymous deletes carry no identity to check.

    Returns:
        True if the warning was logged
    """
    if settings.post_owner_field and not settings.delete_requires_auth:
        logger.warning(
            "POST_OWNER_FIELD is set but DELETE_REQUIRES_AUTH is off; "
            "deletes will not be checked for ownership"
        )
        return True
    return False
