"""Bearer token encoding.

Tokens are HS256 JWTs with the standard ``sub``, ``iat`` and ``exp``
claims plus an informational ``admin`` claim. Authorization decisions
read the stored user, never the ``admin`` claim.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, Field

from projectlink.config import AuthSettings

_REQUIRED_CLAIMS = ["sub", "exp"]


class TokenPayload(BaseModel):
    """Decoded token claims."""

    user_id: str = Field(alias="sub")
    is_admin: bool = Field(default=False, alias="admin")
    issued_at: datetime | None = Field(default=None, alias="iat")
    exp: datetime


class JWTError(Exception):
    """Token is missing a claim, badly signed, malformed or expired."""


def create_token(user_id: str, is_admin: bool, settings: AuthSettings) -> str:
    """Sign a token for ``user_id`` valid for ``jwt_expiry_days``.

    Args:
        user_id: Subject of the token
        is_admin: Value for the ``admin`` claim
        settings: Secret, algorithm and lifetime

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "admin": is_admin,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and lifetime of ``token`` and decode it.

    Raises:
        JWTError: If the token is expired or invalid in any other way
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": _REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload.model_validate(claims)
    except ValueError:
        raise JWTError("Invalid token")
