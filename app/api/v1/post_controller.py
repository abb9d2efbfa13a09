# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

# Local application imports
from ...application.dto.envelope_dto import Envelope
from ...application.dto.post_dto import CommentRequest, PostListResponse, UpdatePostRequest
from ...application.dto.user_dto import CurrentUser
from ...application.use_cases.post.list_posts import ListPostsUseCase
from ...application.use_cases.post.create_post import CreatePostUseCase
from ...application.use_cases.post.toggle_like import ToggleLikeUseCase
from ...application.use_cases.post.add_comment import AddCommentUseCase
from ...application.use_cases.post.update_post import UpdatePostUseCase
from ...application.use_cases.post.delete_post import DeletePostUseCase
from ...di.container import get_container
from ...domain.exceptions import Forbidden, InternalError, NoModification, NotFound
from .dependencies import gate_when, get_current_user


router = APIRouter(tags=["posts"])


def _forbidden(exception: Forbidden) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"success": False, "message": exception.message},
    )


@router.get("/posts", response_model=PostListResponse)
async def list_posts() -> PostListResponse:
    """Return every post, unfiltered and unpaginated"""
    container = get_container()
    list_posts_use_case = container.get(ListPostsUseCase)

    posts = await list_posts_use_case.execute()
    return PostListResponse(success=True, posts=posts)


@router.post("/posts", response_model=Envelope)
async def create_post(request: Request):
    """
    Submit a post; the JSON body is stored exactly as sent

    Errors (including a body that is not a JSON object) answer 400 with a
    plain-text body rather than an envelope.
    """
    container = get_container()
    create_post_use_case = container.get(CreatePostUseCase)

    try:
        # An empty body is stored as an empty post
        document = await request.json() if await request.body() else {}
        post_id = await create_post_use_case.execute(document)
    except (ValueError, InternalError):
        return PlainTextResponse("Something Went Wrong!", status_code=status.HTTP_400_BAD_REQUEST)

    if post_id:
        return Envelope(success=True, message="Post Submitted Successfully")
    return Envelope(success=False, message="Post Submitted Failed")


@router.patch("/like/{post_id}", response_model=Envelope)
async def toggle_like(
    post_id: str,
    current_user: CurrentUser = Depends(get_current_user),
):
    """Like the post as the token's user, or unlike it if already liked"""
    container = get_container()
    toggle_like_use_case = container.get(ToggleLikeUseCase)

    try:
        await toggle_like_use_case.execute(post_id=post_id, user_id=current_user.id)
    except NotFound as exception:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "message": exception.message},
        )
    except NoModification:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Failed to update post"},
        )
    except InternalError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "Internal Server Error"},
        )
    return Envelope(success=True, message="Post updated successfully")


@router.patch("/comment/{post_id}", response_model=Envelope)
async def add_comment(
    post_id: str,
    request: Optional[CommentRequest] = None,
    current_user: Optional[CurrentUser] = Depends(gate_when("comment_requires_auth")),
) -> Envelope:
    """Append `commentInfo` to the post's comments under a new comment id"""
    container = get_container()
    add_comment_use_case = container.get(AddCommentUseCase)
    comment_info = request.commentInfo if request is not None else None

    try:
        await add_comment_use_case.execute(post_id=post_id, comment_info=comment_info)
    except NoModification:
        return Envelope(success=False, message="Comment Failed!")
    return Envelope(success=True, message="Comment Added!")


@router.patch("/post/{post_id}", response_model=Envelope)
async def update_post(
    post_id: str,
    request: Optional[UpdatePostRequest] = None,
    current_user: CurrentUser = Depends(get_current_user),
):
    """Replace the post's content with `newContent`"""
    container = get_container()
    update_post_use_case = container.get(UpdatePostUseCase)
    new_content = request.newContent if request is not None else None

    try:
        await update_post_use_case.execute(
            post_id=post_id,
            new_content=new_content,
            acting_user_id=current_user.id,
        )
    except Forbidden as exception:
        return _forbidden(exception)
    except NoModification:
        return Envelope(success=False, message="Post Updated Failed!")
    return Envelope(success=True, message="Post Updated Successfully!")


@router.delete("/post/{post_id}", response_model=Envelope)
async def delete_post(
    post_id: str,
    current_user: Optional[CurrentUser] = Depends(gate_when("delete_requires_auth")),
):
    """Delete a post; an unknown id yields a failure envelope, not an error"""
    container = get_container()
    delete_post_use_case = container.get(DeletePostUseCase)

    try:
        await delete_post_use_case.execute(
            post_id=post_id,
            acting_user_id=current_user.id if current_user is not None else None,
        )
    except Forbidden as exception:
        return _forbidden(exception)
    except NoModification:
        return Envelope(success=False, message="Something Wrong!")
    return Envelope(success=True, message="Successfully Deleted!")
