# Standard library imports
from typing import Iterable, Iterator, List, Optional


class LikeSet:
    """
    Set of user ids that liked a post.

    Keeps first-seen order so that it serializes to a stable list, but
    behaves as a set: adding an id twice is a no-op.
    """

    def __init__(self, user_ids: Optional[Iterable[str]] = None) -> None:
        self._user_ids: dict[str, None] = {}
        for user_id in user_ids or ():
            self.add(user_id)

    def add(self, user_id: str) -> bool:
        """Add a user id. Returns False if it was already present."""
        if user_id in self._user_ids:
            return False
        self._user_ids[user_id] = None
        return True

    def remove(self, user_id: str) -> bool:
        """Remove a user id. Returns False if it was not present."""
        if user_id not in self._user_ids:
            return False
        del self._user_ids[user_id]
        return True

    def toggle(self, user_id: str) -> bool:
        """
        Flip membership of a user id.

        Returns:
            True if the id is now present (a like), False if it was removed
        """
        if self.remove(user_id):
            return False
        self.add(user_id)
        return True

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._user_ids

    def __len__(self) -> int:
        return len(self._user_ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self._user_ids)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LikeSet):
            return set(self._user_ids) == set(other._user_ids)
        return NotImplemented

    def __repr__(self) -> str:
        return f"LikeSet({self.to_list()!r})"

    def to_list(self) -> List[str]:
        return list(self._user_ids)
