"""Caller identity from the session cookie or a bearer header."""

from banter.domain.error import UnauthenticatedError
from banter.domain.service import JWTService


def session_token(auth_token: str | None, authorization: str | None) -> str | None:
    """Pick the session token from the request.

    The ``auth_token`` cookie wins over an ``Authorization: Bearer`` header.
    """
    if auth_token:
        return auth_token
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return None


def require_user_id(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> str:
    """Return the signed-in user's ID.

    Raises:
        UnauthenticatedError: If the request has no valid session
    """
    user_id = jwt_service.get_user_id_from_token(
        session_token(auth_token, authorization)
    )
    if not user_id:
        raise UnauthenticatedError()
    return user_id
