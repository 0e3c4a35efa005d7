"""PostgreSQL implementation of Article repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from guard.domain.model import Article
from guard.domain.repository import ArticleRepository
from guard.persistence.mappers import article_to_dict, row_to_article
from guard.persistence.tables import articles_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        article_dict = article_to_dict(article)

        existing = await self.session.execute(
            select(articles_table.c.id).where(articles_table.c.id == article.id)
        )
        if existing.first():
            stmt = (
                articles_table.update()
                .where(articles_table.c.id == article.id)
                .values(**article_dict)
            )
        else:
            stmt = articles_table.insert().values(**article_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return article

    async def find_all(self) -> list[Article]:
        """Return all articles, newest first."""
        stmt = select(articles_table).order_by(articles_table.c.created_at.desc())
        result = await self.session.execute(stmt)
        return [row_to_article(dict(row)) for row in result.mappings().all()]
