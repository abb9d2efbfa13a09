# Standard library imports
from typing import Callable, Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import CurrentUser
from ...core.config import get_settings
from ...di.container import get_container
from ...domain.exceptions import Unauthenticated


# auto_error is off so a missing token surfaces as Unauthenticated (401)
security_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> CurrentUser:
    """
    FastAPI dependency implementing the auth gate

    Args:
        credentials: HTTP Bearer token credentials, None if the header is absent

    Returns:
        CurrentUser decoded from the token claims

    Raises:
        Unauthenticated: If no bearer token was sent
        Forbidden: If the token is invalid or expired
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    return await get_current_user_use_case.execute(credentials.credentials)


def gate_when(setting_name: str) -> Callable:
    """
    Build a dependency that applies the auth gate only when the boolean
    setting `setting_name` is on; otherwise it yields None.
    """

    async def dependency(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
    ) -> Optional[CurrentUser]:
        if not getattr(get_settings(), setting_name):
            return None
        return await get_current_user(credentials)

    return dependency
