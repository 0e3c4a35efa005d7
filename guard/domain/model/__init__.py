"""Domain model entities for ChildGuard."""

from guard.domain.model.article import Article
from guard.domain.model.report import Report
from guard.domain.model.user import User

__all__ = [
    "User",
    "Report",
    "Article",
]
