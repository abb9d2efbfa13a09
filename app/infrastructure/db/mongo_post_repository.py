# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models import Comment, LikeSet, Post, WriteResult
from ...domain.constants import CommentFields, PostFields
from .mongo_connection import get_post_collection
from .serialization import serialize_document, to_object_id


def build_toggle_like_pipeline(user_id: str) -> List[Dict[str, Any]]:
    """
    Update pipeline that likes or unlikes a post for `user_id` in one write.

    Membership is evaluated server-side against the stored `likedBy`, and
    `likes` is recomputed from the resulting array, so concurrent toggles
    cannot leave the counter out of step with the set.
    """
    liked_by = {"$ifNull": ["$" + PostFields.LIKED_BY, []]}
    return [
        {"$set": {PostFields.LIKED: {"$not": [{"$in": [user_id, liked_by]}]}}},
        {"$set": {
            PostFields.LIKED_BY: {
                "$cond": [
                    "$" + PostFields.LIKED,
                    {"$concatArrays": [liked_by, [user_id]]},
                    {"$filter": {"input": liked_by, "cond": {"$ne": ["$$this", user_id]}}},
                ]
            }
        }},
        {"$set": {PostFields.LIKES: {"$size": "$" + PostFields.LIKED_BY}}},
    ]


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""

    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()

    async def list_all(self) -> List[Dict[str, Any]]:
        """Every post document in natural order"""
        try:
            cursor = self.post_collection.find()
            posts = []
            async for document in cursor:
                posts.append(serialize_document(document))
            return posts
        except Exception as e:
            raise RuntimeError(f"Error listing posts: {str(e)}")

    async def insert(self, document: Dict[str, Any]) -> Optional[str]:
        """
        Insert a client document verbatim

        Args:
            document: Request body, stored without any field filtering

        Returns:
            The generated id as a string, None if the store did not report one
        """
        try:
            result = await self.post_collection.insert_one(document)
        except Exception as e:
            raise RuntimeError(f"Error inserting post: {str(e)}")
        if not result.inserted_id:
            return None
        return str(result.inserted_id)

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID; malformed ids are treated as missing"""
        object_id = to_object_id(post_id)
        if object_id is None:
            return None

        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding post by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_post(document)

    async def toggle_like(self, post_id: str, user_id: str) -> WriteResult:
        object_id = to_object_id(post_id)
        if object_id is None:
            return WriteResult()

        try:
            result = await self.post_collection.update_one(
                {PostFields.MONGO_ID: object_id},
                build_toggle_like_pipeline(user_id),
            )
        except Exception as e:
            raise RuntimeError(f"Error toggling like: {str(e)}")
        return WriteResult(matched=result.matched_count, modified=result.modified_count)

    async def push_comment(self, post_id: str, comment: Comment) -> int:
        """
        Append a comment with a freshly generated _id

        The generated id is written back onto `comment`.
        """
        object_id = to_object_id(post_id)
        if object_id is None:
            return 0

        comment_id = ObjectId()
        try:
            result = await self.post_collection.update_one(
                {PostFields.MONGO_ID: object_id},
                {"$push": {PostFields.COMMENTS: {**comment.info, CommentFields.MONGO_ID: comment_id}}},
            )
        except Exception as e:
            raise RuntimeError(f"Error adding comment: {str(e)}")
        comment.id = str(comment_id)
        return result.modified_count

    async def set_content(self, post_id: str, content: Any) -> int:
        object_id = to_object_id(post_id)
        if object_id is None:
            return 0

        try:
            result = await self.post_collection.update_one(
                {PostFields.MONGO_ID: object_id},
                {"$set": {PostFields.CONTENT: content}},
            )
        except Exception as e:
            raise RuntimeError(f"Error updating post content: {str(e)}")
        return result.modified_count

    async def delete(self, post_id: str) -> int:
        object_id = to_object_id(post_id)
        if object_id is None:
            return 0

        try:
            result = await self.post_collection.delete_one({PostFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting post: {str(e)}")
        return result.deleted_count

    def _document_to_post(self, document: Dict[str, Any]) -> Post:
        """
        Convert MongoDB document to Post domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Post domain model; unknown fields are kept in `extra`
        """
        if not document or PostFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        known = {
            PostFields.MONGO_ID,
            PostFields.CONTENT,
            PostFields.LIKES,
            PostFields.LIKED_BY,
            PostFields.LIKED,
            PostFields.COMMENTS,
        }
        comments = []
        for raw in document.get(PostFields.COMMENTS) or []:
            info = {k: v for k, v in raw.items() if k != CommentFields.MONGO_ID}
            raw_id = raw.get(CommentFields.MONGO_ID)
            comments.append(Comment(id=str(raw_id) if raw_id is not None else None, info=serialize_document(info)))

        return Post(
            id=str(document[PostFields.MONGO_ID]),
            content=serialize_document(document.get(PostFields.CONTENT)),
            likes=document.get(PostFields.LIKES, 0),
            liked_by=LikeSet(str(user_id) for user_id in document.get(PostFields.LIKED_BY) or []),
            comments=comments,
            liked=document.get(PostFields.LIKED),
            extra=serialize_document({k: v for k, v in document.items() if k not in known}),
        )
