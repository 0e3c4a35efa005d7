"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from guard.domain.model import Article, Report, User
from guard.domain.value import (
    ArticleId,
    Evidence,
    RecoveryScheme,
    ReportId,
    UserId,
    UserRole,
    UserStatus,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        phone=row["phone"],
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
        status=UserStatus(row["status"]),
        avatar=row.get("avatar"),
        identity_document=row.get("identity_document"),
        selfie_image=row.get("selfie_image"),
        reset_secret=row.get("reset_secret"),
        reset_scheme=(
            RecoveryScheme(row["reset_scheme"]) if row.get("reset_scheme") else None
        ),
        reset_expires_at=row.get("reset_expires_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump(mode="python")
    data["role"] = user.role.value
    data["status"] = user.status.value
    data["reset_scheme"] = user.reset_scheme.value if user.reset_scheme else None
    return data


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model."""
    return Report(
        id=ReportId(_uuid(row["id"])),
        abuser_name=row.get("abuser_name"),
        abuser_gender=row.get("abuser_gender"),
        abuser_age=row.get("abuser_age"),
        relationship=row.get("relationship"),
        nature_of_abuse=row.get("nature_of_abuse"),
        description_of_incident=row.get("description_of_incident"),
        location=row.get("location"),
        reporter_name=row.get("reporter_name"),
        reporter_phone=row.get("reporter_phone"),
        victim_name=row.get("victim_name"),
        victim_age=row.get("victim_age"),
        victim_gender=row.get("victim_gender"),
        description_of_victim=row.get("description_of_victim"),
        latitude=row.get("latitude"),
        longitude=row.get("longitude"),
        date=row["date"],
        evidence=[Evidence(**item) for item in row.get("evidence") or []],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to database dict.

    Evidence is stored as a JSONB array.
    """
    data = report.model_dump(mode="python", exclude={"evidence"})
    data["evidence"] = [item.model_dump(mode="json") for item in report.evidence]
    return data


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model."""
    return Article(
        id=ArticleId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        category=row.get("category"),
        thumbnail=row.get("thumbnail"),
        user_id=UserId(_uuid(row["user_id"])) if row.get("user_id") else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict."""
    return article.model_dump(mode="python")
