from .post_authorization import PostOwnershipPolicy, warn_on_unchecked_deletes

__all__ = ["PostOwnershipPolicy", "warn_on_unchecked_deletes"]
