"""In-memory repository implementations for testing."""

from .article import InMemoryArticleRepository
from .report import InMemoryReportRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryReportRepository",
    "InMemoryUserRepository",
]
