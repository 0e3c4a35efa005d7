"""In-memory article repository for testing."""

from guard.domain.model.article import Article
from guard.domain.repository.article import ArticleRepository
from guard.domain.value import ArticleId


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    async def save(self, article: Article) -> Article:
        self._articles[article.id] = article
        return article

    async def find_all(self) -> list[Article]:
        return sorted(
            self._articles.values(), key=lambda a: a.created_at, reverse=True
        )
