"""Incident report domain service."""

import logfire

from guard.domain.model import Report
from guard.domain.repository import ReportRepository

from .base import Service


class ReportService(Service):
    """Domain service for incident reports."""

    def __init__(self, report_repository: ReportRepository) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
        """
        self.report_repository = report_repository

    async def submit(self, report: Report) -> Report:
        """Store a new report."""
        with logfire.span("report_service.submit", report_id=str(report.id)):
            saved = await self.report_repository.save(report)
            logfire.info(
                "Report submitted",
                report_id=str(saved.id),
                evidence_count=len(saved.evidence),
            )
            return saved

    async def list_reports(self) -> list[Report]:
        """Return every report, newest first."""
        with logfire.span("report_service.list_reports"):
            return await self.report_repository.find_all()
