"""Bearer token helpers for routes."""

from uuid import UUID

from fastapi import Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from projectlink.domain.error import AuthenticationError
from projectlink.domain.service import JWTService
from projectlink.util.jwt import JWTError

# Routes decide themselves whether a token is required
bearer_scheme = HTTPBearer(auto_error=False)


def require_user_id(
    credentials: HTTPAuthorizationCredentials | None, jwt_service: JWTService
) -> str:
    """Return the authenticated user's ID.

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    if not credentials or not credentials.credentials:
        raise AuthenticationError("No token provided")

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except JWTError as e:
        raise AuthenticationError(str(e))

    try:
        UUID(payload.user_id)
    except ValueError:
        raise AuthenticationError("Invalid token")
    return payload.user_id


def client_address(request: Request) -> str:
    """First ``X-Forwarded-For`` hop, falling back to the peer address."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def viewer_key(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
    jwt_service: JWTService,
) -> str:
    """Identity used for view deduplication.

    Authenticated viewers are keyed by user, everyone else by address.
    """
    token = credentials.credentials if credentials else None
    user_id = jwt_service.get_user_id_from_token(token)
    if user_id:
        return f"user:{user_id}"
    return f"ip:{client_address(request)}"
