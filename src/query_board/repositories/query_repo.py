"""Data access helpers for working with queries."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from query_board.models import Query, QueryComment, QueryLike, User

__all__ = ["QueryRepository"]


class QueryRepository:
    """Thin wrapper around database access for query entities.

    Mutating methods only stage changes; :meth:`save` commits them.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, query_id: str) -> Query | None:
        """Return a query by identifier."""
        return self.session.get(Query, query_id)

    def list_recent(self) -> list[Query]:
        """Return all queries sorted newest first."""
        result = self.session.execute(select(Query).order_by(Query.date.desc()))
        return list(result.scalars())

    def create(self, *, author: User, text: str) -> Query:
        """Insert a new query, snapshotting the author's name and avatar."""
        query = Query(
            user_id=author.id,
            text=text,
            name=author.name,
            avatar=author.avatar,
        )
        self.session.add(query)
        self.save(query)
        return query

    def delete(self, query: Query) -> None:
        """Remove a query together with its likes and comments."""
        self.session.delete(query)
        self.session.commit()

    def add_like(self, query: Query, user_id: str) -> QueryLike:
        """Prepend a like by ``user_id``."""
        like = QueryLike(user_id=user_id)
        query.likes.insert(0, like)
        return like

    def remove_like(self, query: Query, like: QueryLike) -> None:
        """Drop ``like`` from the query's like sequence."""
        query.likes.remove(like)

    def add_comment(self, query: Query, *, author: User, text: str) -> QueryComment:
        """Prepend a comment written by ``author``."""
        comment = QueryComment(
            user_id=author.id,
            text=text,
            name=author.name,
            avatar=author.avatar,
        )
        query.comments.insert(0, comment)
        return comment

    def remove_comment(self, query: Query, comment: QueryComment) -> None:
        """Drop ``comment`` from the query's comment sequence."""
        query.comments.remove(comment)

    def save(self, query: Query) -> Query:
        """Commit pending changes and reload ``query``."""
        self.session.commit()
        self.session.refresh(query)
        return query

    def rollback(self) -> None:
        """Discard pending changes."""
        self.session.rollback()
