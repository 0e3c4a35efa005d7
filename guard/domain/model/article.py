"""Awareness article entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from guard.domain.model.common import DomainModel
from guard.domain.value import ArticleId, UserId


class Article(DomainModel):
    """Educational article shown in the app."""

    id: ArticleId
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    thumbnail: Optional[str] = None
    user_id: Optional[UserId] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
