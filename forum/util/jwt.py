"""Bearer token verification.

Tokens are issued by the external auth service and signed with the shared
secret from AuthSettings; this module never signs anything.
"""

from datetime import datetime

import jwt
from pydantic import BaseModel

from forum.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims the forum relies on."""

    user_id: str
    exp: datetime


class JWTError(Exception):
    """Raised when a bearer token cannot be trusted."""

    pass


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode a token and check its signature and expiry.

    Args:
        token: Encoded JWT
        settings: Authentication settings holding the shared secret

    Returns:
        Token payload

    Raises:
        JWTError: If the signature is wrong, the token expired or lacks ``exp``
        pydantic.ValidationError: If the claims lack a usable ``user_id``
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
            leeway=settings.jwt_leeway_seconds,
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}") from e
    return TokenPayload.model_validate(claims)
