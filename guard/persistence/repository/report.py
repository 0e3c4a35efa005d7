"""PostgreSQL implementation of Report repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from guard.domain.model import Report
from guard.domain.repository import ReportRepository
from guard.persistence.mappers import report_to_dict, row_to_report
from guard.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, report: Report) -> Report:
        """Persist a new report."""
        stmt = reports_table.insert().values(**report_to_dict(report))
        await self.session.execute(stmt)
        await self.session.flush()
        return report

    async def find_all(self) -> list[Report]:
        """Return all reports, newest first."""
        stmt = select(reports_table).order_by(reports_table.c.date.desc())
        result = await self.session.execute(stmt)
        return [row_to_report(dict(row)) for row in result.mappings().all()]
