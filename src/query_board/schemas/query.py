"""Query-related Pydantic schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from query_board.db.time import as_utc

TEXT_REQUIRED = "Text is required"


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class _TextBody(BaseModel):
    """Request body carrying a single required ``text`` field.

    Non-string values are stored as their string form; only a missing,
    null or empty value is rejected. Whitespace counts as text.
    """

    text: str = Field(default="", validate_default=True)

    @field_validator("text", mode="before")
    @classmethod
    def _require_text(cls, value: Any) -> str:
        text = "" if value is None else _as_text(value)
        if text == "":
            raise PydanticCustomError("text_required", TEXT_REQUIRED)
        return text


class QueryCreate(_TextBody):
    """Schema for creating a new query."""


class CommentCreate(_TextBody):
    """Schema for commenting on a query."""


class LikeResponse(BaseModel):
    """A single entry of a query's like sequence."""

    user: str = Field(validation_alias="user_id")

    model_config = ConfigDict(from_attributes=True)


class _Dated(BaseModel):
    date: datetime

    @field_validator("date")
    @classmethod
    def _utc_date(cls, value: datetime) -> datetime:
        return as_utc(value)


class CommentResponse(_Dated):
    """Schema for a comment returned by the API."""

    id: str
    user: str = Field(validation_alias="user_id")
    text: str
    name: str | None = None
    avatar: str | None = None

    model_config = ConfigDict(from_attributes=True)


class QueryResponse(_Dated):
    """Schema for query information returned by the API."""

    id: str
    user: str = Field(validation_alias="user_id")
    text: str
    name: str | None = None
    avatar: str | None = None
    likes: list[LikeResponse] = []
    comments: list[CommentResponse] = []

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    """Plain confirmation or error message."""

    msg: str
