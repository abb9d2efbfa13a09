"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post model"""
    ID = "id"
    CONTENT = "content"
    LIKES = "likes"
    LIKED_BY = "likedBy"
    LIKED = "liked"
    COMMENTS = "comments"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class CommentFields:
    """Field name constants for embedded comments"""
    MONGO_ID = "_id"
