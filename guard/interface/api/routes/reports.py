"""Incident report routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from guard.application.usecase.report import (
    CreateReportRequest,
    CreateReportResponse,
    CreateReportUseCase,
    ListReportsResponse,
    ListReportsUseCase,
)

router = APIRouter(prefix="/api/reports", tags=["reports"], route_class=DishkaRoute)


@router.post(
    "", response_model=CreateReportResponse, status_code=status.HTTP_201_CREATED
)
async def create_report(
    request: CreateReportRequest,
    create_report_use_case: FromDishka[CreateReportUseCase],
) -> CreateReportResponse:
    """Submit an incident report.

    Every field is optional. ``evidence`` is a list of
    ``{"filename": ..., "base64": ...}`` objects.
    """
    return await create_report_use_case.execute(request)


@router.get("", response_model=ListReportsResponse)
async def list_reports(
    list_reports_use_case: FromDishka[ListReportsUseCase],
) -> ListReportsResponse:
    """List reports, newest first."""
    return await list_reports_use_case.execute()
