"""Repository interfaces for the ChildGuard domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from guard.domain.repository.article import ArticleRepository
from guard.domain.repository.report import ReportRepository
from guard.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ReportRepository",
    "ArticleRepository",
]
