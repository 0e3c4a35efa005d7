"""List articles use case."""

from datetime import datetime

from guard.application.usecase.base import BaseUseCase, CamelModel
from guard.domain.model import Article
from guard.domain.repository import ArticleRepository


class ArticleResponse(CamelModel):
    """Awareness article."""

    id: str
    title: str
    description: str | None
    category: str | None
    thumbnail: str | None
    user_id: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_article(cls, article: Article) -> "ArticleResponse":
        return cls(
            id=str(article.id),
            title=article.title,
            description=article.description,
            category=article.category,
            thumbnail=article.thumbnail,
            user_id=str(article.user_id) if article.user_id else None,
            created_at=article.created_at,
            updated_at=article.updated_at,
        )


class ListArticlesResponse(CamelModel):
    """List articles response."""

    articles: list[ArticleResponse]
    count: int


class ListArticlesUseCase(BaseUseCase):
    """Use case for listing awareness articles, newest first."""

    def __init__(self, article_repository: ArticleRepository) -> None:
        """Initialize list articles use case.

        Args:
            article_repository: Article repository
        """
        self.article_repository = article_repository

    async def execute(self, request: None = None) -> ListArticlesResponse:
        articles = await self.article_repository.find_all()
        return ListArticlesResponse(
            articles=[ArticleResponse.from_article(a) for a in articles],
            count=len(articles),
        )
