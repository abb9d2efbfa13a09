from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
    ResetPasswordUseCase,
)
from .post import (
    ListPostsUseCase,
    CreatePostUseCase,
    ToggleLikeUseCase,
    AddCommentUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "ResetPasswordUseCase",
    "ListPostsUseCase",
    "CreatePostUseCase",
    "ToggleLikeUseCase",
    "AddCommentUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
]
