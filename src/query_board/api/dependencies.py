"""Shared API dependencies for authentication and common functionality."""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from query_board.core.security import decode_access_token
from query_board.db.ids import is_object_id
from query_board.db.session import get_db
from query_board.models import User
from query_board.repositories.query_repo import QueryRepository

logger = logging.getLogger(__name__)

# Missing credentials are reported by get_current_user, not by the scheme.
bearer_scheme = HTTPBearer(auto_error=False)

NO_TOKEN = "No token, authorization denied"
INVALID_TOKEN = "Token is not valid"
INVALID_ID = "Invalid ID"

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
) -> User:
    """Get the current authenticated user from JWT token.

    Args:
        credentials: HTTP Bearer token credentials, if any were sent
        db: Database session

    Returns:
        User object for the authenticated user

    Raises:
        HTTPException: If the token is missing, invalid, or names an unknown user
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=NO_TOKEN)

    try:
        user_id = decode_access_token(credentials.credentials)
    except JWTError as err:
        logger.info("Rejected bearer token: %s", err)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_TOKEN,
        ) from err

    user = db.get(User, user_id) if user_id else None
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_TOKEN)
    return user


def get_query_repository(db: SessionDep) -> QueryRepository:
    """Return a query repository bound to the request session."""
    return QueryRepository(db)


def checked_query_id(query_id: str) -> str:
    """Reject malformed object ids; return well-formed ones in stored (lower) case."""
    if not is_object_id(query_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID)
    return query_id.lower()


# Type alias for current user dependency
CurrentUserDep = Annotated[User, Depends(get_current_user)]
QueryRepoDep = Annotated[QueryRepository, Depends(get_query_repository)]
QueryIdDep = Annotated[str, Depends(checked_query_id)]
