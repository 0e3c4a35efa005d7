"""PostgreSQL repository implementations."""

from guard.persistence.repository.article import PostgresArticleRepository
from guard.persistence.repository.report import PostgresReportRepository
from guard.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresArticleRepository",
    "PostgresReportRepository",
    "PostgresUserRepository",
]
