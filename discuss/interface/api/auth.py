"""Viewer identification for API routes."""

from fastapi import HTTPException, status

from discuss.domain.service import JWTService


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Return the authenticated user's ID or fail with 401.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie

    Raises:
        HTTPException: If the token is missing or invalid
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user_id
