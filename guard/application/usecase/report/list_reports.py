"""List reports use case."""

from guard.application.usecase.base import BaseUseCase, CamelModel
from guard.domain.service import ReportService

from .create_report import ReportResponse


class ListReportsResponse(CamelModel):
    """List reports response."""

    reports: list[ReportResponse]
    count: int


class ListReportsUseCase(BaseUseCase):
    """Use case for listing reports, newest first."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: None = None) -> ListReportsResponse:
        reports = await self.report_service.list_reports()
        return ListReportsResponse(
            reports=[ReportResponse.from_report(report) for report in reports],
            count=len(reports),
        )
