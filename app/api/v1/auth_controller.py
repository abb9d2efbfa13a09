# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.auth_dto import (
    PasswordResetRequest,
    TokenResponse,
    UserLoginRequest,
    UserRegistrationRequest,
)
from ...application.dto.envelope_dto import Envelope
from ...application.dto.user_dto import CurrentUser
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.reset_password import ResetPasswordUseCase
from ...di.container import get_container
from ...domain.exceptions import InternalError, NoModification, ValidationConflict
from .dependencies import get_current_user


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=Envelope, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest):
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        201 envelope on success, 400 if the username is taken, 500 on store errors
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        await register_use_case.execute(request)
    except ValidationConflict as exception:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": exception.message},
        )
    except InternalError as exception:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": exception.message},
        )
    return Envelope(success=True, message="User registered successfully")


@router.post("/login")
async def login_user(request: UserLoginRequest):
    """
    Authenticate user and get access token

    Failed logins answer 200 with a generic message so the response does not
    reveal whether the username or the password was wrong.
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        token = await login_use_case.execute(request)
    except InternalError as exception:
        return JSONResponse(content={"message": exception.message})

    if token is None:
        return Envelope(success=False, message="Invalid credentials")
    return TokenResponse(token=token)


@router.patch("/forget_password/{email}", response_model=Envelope)
async def forget_password(
    email: str,
    request: Optional[PasswordResetRequest] = None,
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Reset the password of the user registered with `email`

    Requires a bearer token, but the token's user is not compared with `email`.
    """
    container = get_container()
    reset_use_case = container.get(ResetPasswordUseCase)
    password = request.password if request is not None else None

    try:
        await reset_use_case.execute(email=email, password=password)
    except NoModification:
        return Envelope(success=False, message="Password Reset Failed!")
    except InternalError as exception:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": exception.message},
        )
    return Envelope(success=True, message="Password Reset Successfully!")
