"""Data model for the posts resource."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    """
    One post record as returned by the upstream API.

    ``id`` and ``userId`` are required and taken as-is. Fields the payload
    carries beyond the declared ones are kept in ``model_extra`` and written
    back on encoding.

    Example:
        >>> post = Post.model_validate({"id": 1, "userId": 1, "title": "t", "body": "b"})
        >>> post.user_id
        1
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: int
    user_id: int = Field(alias="userId")
    title: Optional[str] = None
    body: Optional[str] = None
