from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.comment import Comment
from ..models.post import Post
from ..models.write_result import WriteResult


class PostRepository(ABC):
    """Repository interface - defines contract for post data access"""

    @abstractmethod
    async def list_all(self) -> List[Dict[str, Any]]:
        """Every stored post document, in natural order, JSON-ready"""
        pass

    @abstractmethod
    async def insert(self, document: Dict[str, Any]) -> Optional[str]:
        """Insert a document as-is. Returns the generated id, if any."""
        pass

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID"""
        pass

    @abstractmethod
    async def toggle_like(self, post_id: str, user_id: str) -> WriteResult:
        """Atomically like or unlike a post for a user"""
        pass

    @abstractmethod
    async def push_comment(self, post_id: str, comment: Comment) -> int:
        """Append a comment. Returns the modified count."""
        pass

    @abstractmethod
    async def set_content(self, post_id: str, content: Any) -> int:
        """Replace the post content. Returns the modified count."""
        pass

    @abstractmethod
    async def delete(self, post_id: str) -> int:
        """Delete a post. Returns the deleted count."""
        pass
