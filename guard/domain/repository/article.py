"""Article repository interface."""

from abc import ABC, abstractmethod

from guard.domain.model.article import Article


class ArticleRepository(ABC):
    """Repository for awareness articles."""

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Article]:
        """Return all articles, newest first."""
        pass
