"""Request-level helpers shared by the routes."""

from typing import Any

from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from forum.domain.service import JWTService
from forum.interface.error import AuthenticationError

bearer_scheme = HTTPBearer(auto_error=False)


def require_user_id(
    jwt_service: JWTService,
    credentials: HTTPAuthorizationCredentials | None,
) -> str:
    """Resolve the authenticated user from a bearer credential.

    Args:
        jwt_service: JWT service for token verification
        credentials: Parsed ``Authorization: Bearer`` header, if any

    Returns:
        The authenticated user ID

    Raises:
        AuthenticationError: If the header is missing or the token is invalid
    """
    token = credentials.credentials if credentials else None
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise AuthenticationError()
    return user_id


def success(data: dict[str, Any] | None = None) -> dict[str, Any]:
    """Wrap response data in the success envelope."""
    if data is None:
        return {"status": "success"}
    return {"status": "success", "data": data}
