# Local application imports
from ....core.security import decode_jwt_token
from ....domain.exceptions import Forbidden
from ...dto.user_dto import CurrentUser


class GetCurrentUserUseCase:
    """
    Use case for resolving the acting user from a JWT token.

    The token carries the whole user record as it was at login, so no
    lookup is made; validity is purely signature and expiry.
    """

    async def execute(self, token: str) -> CurrentUser:
        """
        Get current user from JWT token

        Args:
            token: JWT access token

        Returns:
            CurrentUser built from the token claims

        Raises:
            Forbidden: If the token is invalid, expired or lacks a user id
        """
        try:
            payload = decode_jwt_token(token)
        except ValueError:
            raise Forbidden()

        if not payload.get("_id"):
            raise Forbidden()
        return CurrentUser.model_validate(payload)
