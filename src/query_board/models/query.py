# src/query_board/models/query.py
"""SQLAlchemy models for queries and their embedded likes and comments."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import Mapped, mapped_column, relationship

from query_board.db.ids import OBJECT_ID_LENGTH, new_object_id
from query_board.db.session import Base
from query_board.db.time import utcnow


class Query(Base):
    """A user-authored post carrying its likes and comments.

    ``name`` and ``avatar`` are a snapshot of the author taken at creation;
    they are not kept in sync with the user record.
    """

    __tablename__ = "query"
    __table_args__ = (Index("ix_query_date", "date"),)

    id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH),
        primary_key=True,
        default=new_object_id,
    )
    # Set once at creation; never reassigned.
    user_id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH),
        ForeignKey("user_account.id"),
        nullable=False,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    avatar: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Newest first: inserting at index 0 renumbers ``position`` on the rest.
    likes: Mapped[list[QueryLike]] = relationship(
        "QueryLike",
        back_populates="query",
        order_by="QueryLike.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    comments: Mapped[list[QueryComment]] = relationship(
        "QueryComment",
        back_populates="query",
        order_by="QueryComment.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def find_like(self, user_id: str) -> QueryLike | None:
        """Return the like left by ``user_id``, if any."""
        return next((like for like in self.likes if like.user_id == user_id), None)

    def find_comment(self, comment_id: str) -> QueryComment | None:
        """Return the comment with ``comment_id``, if any."""
        return next((c for c in self.comments if c.id == comment_id), None)


class QueryLike(Base):
    """A user's like on a query."""

    __tablename__ = "query_like"

    query_id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH),
        ForeignKey("query.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH),
        ForeignKey("user_account.id"),
        primary_key=True,
    )

    # Composite primary key prevents duplicate likes from the same user.

    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    query: Mapped[Query] = relationship("Query", back_populates="likes")


class QueryComment(Base):
    """A reply attached to exactly one query."""

    __tablename__ = "query_comment"
    __table_args__ = (Index("ix_query_comment_query_id", "query_id"),)

    id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH),
        primary_key=True,
        default=new_object_id,
    )
    query_id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH),
        ForeignKey("query.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH),
        ForeignKey("user_account.id"),
        nullable=False,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    avatar: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    query: Mapped[Query] = relationship("Query", back_populates="comments")
