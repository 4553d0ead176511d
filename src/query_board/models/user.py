# src/query_board/models/user.py
"""SQLAlchemy model for the users who author queries."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from query_board.db.ids import OBJECT_ID_LENGTH, new_object_id
from query_board.db.session import Base
from query_board.db.time import utcnow


class User(Base):
    """Account whose display name and avatar are copied onto queries and comments."""

    __tablename__ = "user_account"

    id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH),
        primary_key=True,
        default=new_object_id,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str | None] = mapped_column(Text, unique=True, nullable=True)
    avatar: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
