from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class CommentRequest(BaseModel):
    """DTO for adding a comment; `commentInfo` is stored as sent"""
    commentInfo: Optional[Dict[str, Any]] = None


class UpdatePostRequest(BaseModel):
    """DTO for replacing a post's content"""
    newContent: Any = None


class PostListResponse(BaseModel):
    """DTO for the post feed"""
    success: bool = True
    posts: List[Dict[str, Any]]
