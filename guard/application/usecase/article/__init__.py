"""Article use cases."""

from .list_articles import ArticleResponse, ListArticlesResponse, ListArticlesUseCase

__all__ = ["ArticleResponse", "ListArticlesResponse", "ListArticlesUseCase"]
