from .auth_dto import UserRegistrationRequest, UserLoginRequest, PasswordResetRequest, TokenResponse
from .user_dto import CurrentUser
from .post_dto import CommentRequest, UpdatePostRequest, PostListResponse
from .envelope_dto import Envelope

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "PasswordResetRequest",
    "TokenResponse",
    "CurrentUser",
    "CommentRequest",
    "UpdatePostRequest",
    "PostListResponse",
    "Envelope",
]
