# src/query_board/api/endpoints/queries.py
"""Query, like and comment endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import IntegrityError

from query_board.api.dependencies import CurrentUserDep, QueryIdDep, QueryRepoDep
from query_board.models import Query, QueryComment, QueryLike
from query_board.repositories.query_repo import QueryRepository
from query_board.schemas.query import (
    CommentCreate,
    CommentResponse,
    LikeResponse,
    MessageResponse,
    QueryCreate,
    QueryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/queries", tags=["queries"])

QUERY_NOT_FOUND = "Query not found"
NOT_AUTHORIZED = "User not authorized"
ALREADY_LIKED = "Query already liked"
NOT_LIKED = "Query has not yet been liked"
COMMENT_NOT_FOUND = "Comment does not exist"


def _get_query_or_404(repo: QueryRepository, query_id: str) -> Query:
    query = repo.get_by_id(query_id)
    if query is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=QUERY_NOT_FOUND)
    return query


def _not_authorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=NOT_AUTHORIZED)


@router.post("", response_model=QueryResponse)
async def create_query(
    payload: QueryCreate,
    current_user: CurrentUserDep,
    repo: QueryRepoDep,
) -> Query:
    """Create a query authored by the caller.

    The caller's name and avatar are copied onto the query.
    """
    query = repo.create(author=current_user, text=payload.text)
    logger.info("Query %s created by %s", query.id, current_user.id)
    return query


@router.get("", response_model=list[QueryResponse])
async def list_queries(current_user: CurrentUserDep, repo: QueryRepoDep) -> list[Query]:
    """Return all queries, newest first."""
    return repo.list_recent()


@router.get("/{query_id}", response_model=QueryResponse)
async def get_query(
    current_user: CurrentUserDep,
    query_id: QueryIdDep,
    repo: QueryRepoDep,
) -> Query:
    """Get a specific query by ID.

    Raises:
        HTTPException: If the id is malformed or the query does not exist
    """
    return _get_query_or_404(repo, query_id)


@router.delete("/{query_id}", response_model=MessageResponse)
async def delete_query(
    current_user: CurrentUserDep,
    query_id: QueryIdDep,
    repo: QueryRepoDep,
) -> MessageResponse:
    """Delete a query owned by the caller.

    Raises:
        HTTPException: If the query does not exist or the caller is not its author
    """
    query = _get_query_or_404(repo, query_id)

    # Only the author can delete their own queries
    if query.user_id != current_user.id:
        logger.info("User %s refused deletion of query %s", current_user.id, query_id)
        raise _not_authorized()

    repo.delete(query)
    logger.info("Query %s removed by %s", query_id, current_user.id)
    return MessageResponse(msg="Query removed")


@router.put("/like/{query_id}", response_model=list[LikeResponse])
async def like_query(
    current_user: CurrentUserDep,
    query_id: QueryIdDep,
    repo: QueryRepoDep,
) -> list[QueryLike]:
    """Like a query; each user may like a query once.

    Returns:
        The query's like sequence, newest first
    """
    query = _get_query_or_404(repo, query_id)

    if query.find_like(current_user.id) is not None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ALREADY_LIKED)

    repo.add_like(query, current_user.id)
    try:
        repo.save(query)
    except IntegrityError as err:
        # A concurrent request stored the same like first.
        repo.rollback()
        logger.warning("Duplicate like on query %s by %s", query_id, current_user.id)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ALREADY_LIKED,
        ) from err

    return query.likes


@router.put("/unlike/{query_id}", response_model=list[LikeResponse])
async def unlike_query(
    current_user: CurrentUserDep,
    query_id: QueryIdDep,
    repo: QueryRepoDep,
) -> list[QueryLike]:
    """Remove the caller's like from a query.

    Returns:
        The query's remaining like sequence
    """
    query = _get_query_or_404(repo, query_id)

    like = query.find_like(current_user.id)
    if like is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NOT_LIKED)

    repo.remove_like(query, like)
    repo.save(query)
    return query.likes


@router.post("/comment/{query_id}", response_model=list[CommentResponse])
async def add_comment(
    payload: CommentCreate,
    current_user: CurrentUserDep,
    query_id: QueryIdDep,
    repo: QueryRepoDep,
) -> list[QueryComment]:
    """Comment on a query.

    Returns:
        The query's comment sequence, newest first
    """
    query = _get_query_or_404(repo, query_id)

    comment = repo.add_comment(query, author=current_user, text=payload.text)
    repo.save(query)
    logger.info("Comment %s added to query %s", comment.id, query_id)
    return query.comments


@router.delete("/comment/{query_id}/{comment_id}", response_model=list[CommentResponse])
async def delete_comment(
    current_user: CurrentUserDep,
    query_id: str,
    comment_id: str,
    repo: QueryRepoDep,
) -> list[QueryComment]:
    """Delete one of the caller's comments.

    Raises:
        HTTPException: If the query or comment does not exist, or the caller
            is not the comment's author
    """
    query = _get_query_or_404(repo, query_id)

    comment = query.find_comment(comment_id)
    if comment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=COMMENT_NOT_FOUND)

    if comment.user_id != current_user.id:
        logger.info("User %s refused deletion of comment %s", current_user.id, comment_id)
        raise _not_authorized()

    repo.remove_comment(query, comment)
    repo.save(query)
    return query.comments
