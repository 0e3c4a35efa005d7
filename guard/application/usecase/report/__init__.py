"""Report use cases."""

from .create_report import (
    CreateReportRequest,
    CreateReportResponse,
    CreateReportUseCase,
    EvidenceItem,
    ReportResponse,
)
from .list_reports import ListReportsResponse, ListReportsUseCase

__all__ = [
    "CreateReportRequest",
    "CreateReportResponse",
    "CreateReportUseCase",
    "EvidenceItem",
    "ListReportsResponse",
    "ListReportsUseCase",
    "ReportResponse",
]
