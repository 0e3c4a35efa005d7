"""Create report use case."""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import Field

from guard.application.usecase.base import BaseUseCase, CamelModel
from guard.domain.model import Report
from guard.domain.service import ReportService
from guard.domain.value import Evidence, ReportId


class EvidenceItem(CamelModel):
    """Evidence file attached to a report."""

    filename: str | None = None
    base64: str | None = None


class CreateReportRequest(CamelModel):
    """Incident report submitted from the app.

    All fields are optional; ``date`` defaults to now.
    """

    abuser_name: str | None = None
    abuser_gender: str | None = None
    abuser_age: str | None = None
    relationship: str | None = None
    nature_of_abuse: str | None = None
    description_of_incident: str | None = None
    location: str | None = None
    reporter_name: str | None = None
    reporter_phone: str | None = None
    victim_name: str | None = None
    victim_age: str | None = None
    victim_gender: str | None = None
    description_of_victim: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    date: datetime | None = None
    evidence: list[EvidenceItem] = Field(default_factory=list)


class ReportResponse(CamelModel):
    """Stored report."""

    id: str
    abuser_name: str | None
    abuser_gender: str | None
    abuser_age: str | None
    relationship: str | None
    nature_of_abuse: str | None
    description_of_incident: str | None
    location: str | None
    reporter_name: str | None
    reporter_phone: str | None
    victim_name: str | None
    victim_age: str | None
    victim_gender: str | None
    description_of_victim: str | None
    latitude: float | None
    longitude: float | None
    date: datetime
    evidence: list[EvidenceItem]

    @classmethod
    def from_report(cls, report: Report) -> "ReportResponse":
        data = report.model_dump(exclude={"id", "evidence"})
        return cls(
            id=str(report.id),
            evidence=[
                EvidenceItem(filename=item.filename, base64=item.base64)
                for item in report.evidence
            ],
            **data,
        )


class CreateReportResponse(CamelModel):
    """Create report response."""

    message: str
    report: ReportResponse


class CreateReportUseCase(BaseUseCase):
    """Use case for submitting an incident report."""

    def __init__(self, report_service: ReportService) -> None:
        """Initialize create report use case.

        Args:
            report_service: Report domain service
        """
        self.report_service = report_service

    async def execute(self, request: CreateReportRequest) -> CreateReportResponse:
        data = request.model_dump(exclude={"date", "evidence"})
        report = Report(
            id=ReportId(uuid4()),
            date=request.date or datetime.now(timezone.utc),
            evidence=[
                Evidence(filename=item.filename, base64=item.base64)
                for item in request.evidence
            ],
            **data,
        )

        saved = await self.report_service.submit(report)

        return CreateReportResponse(
            message="Report submitted successfully",
            report=ReportResponse.from_report(saved),
        )
