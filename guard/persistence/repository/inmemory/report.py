"""In-memory report repository for testing."""

from guard.domain.model.report import Report
from guard.domain.repository.report import ReportRepository
from guard.domain.value import ReportId


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[ReportId, Report] = {}

    async def save(self, report: Report) -> Report:
        self._reports[report.id] = report
        return report

    async def find_all(self) -> list[Report]:
        return sorted(self._reports.values(), key=lambda r: r.date, reverse=True)
