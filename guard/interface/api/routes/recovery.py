"""Password recovery routes.

Two schemes are served side by side: ``/forgot-password`` emails a link
carrying a long token, ``/request-reset`` emails a six digit code.
"""

from html import escape
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse
from pydantic import AliasChoices, Field

from guard.application.usecase.base import CamelModel
from guard.application.usecase.recovery import (
    CompleteResetRequest,
    CompleteResetResponse,
    CompleteResetUseCase,
    RequestResetRequest,
    RequestResetResponse,
    RequestResetUseCase,
)
from guard.config import Settings
from guard.domain.value import RecoveryScheme

router = APIRouter(tags=["recovery"], route_class=DishkaRoute)


class VerifyResetAPIRequest(CamelModel):
    """API request for completing a code reset."""

    email: str | None = None
    code: str | int | None = None
    new_password: str | None = None


class ResetPasswordAPIRequest(CamelModel):
    """API request for completing a token reset."""

    new_password: str | None = Field(
        default=None, validation_alias=AliasChoices("newPassword", "password")
    )


@router.post("/forgot-password", response_model=RequestResetResponse)
async def forgot_password(
    request: RequestResetRequest,
    request_reset_use_case: FromDishka[RequestResetUseCase],
) -> RequestResetResponse:
    """Email a password reset link.

    Returns 404 for an unknown email, 429 while a previous link is still
    valid and 502 if the email could not be sent.
    """
    return await request_reset_use_case.execute(request, RecoveryScheme.TOKEN)


@router.post("/request-reset", response_model=RequestResetResponse)
async def request_reset(
    request: RequestResetRequest,
    request_reset_use_case: FromDishka[RequestResetUseCase],
) -> RequestResetResponse:
    """Email a six digit password reset code."""
    return await request_reset_use_case.execute(request, RecoveryScheme.CODE)


@router.post("/verify-reset", response_model=CompleteResetResponse)
async def verify_reset(
    request: VerifyResetAPIRequest,
    complete_reset_use_case: FromDishka[CompleteResetUseCase],
) -> CompleteResetResponse:
    """Set a new password using the emailed code."""
    return await complete_reset_use_case.execute(
        CompleteResetRequest(
            scheme=RecoveryScheme.CODE,
            secret=str(request.code) if request.code is not None else None,
            new_password=request.new_password,
            email=request.email,
        )
    )


@router.post("/reset-password/{token}", response_model=CompleteResetResponse)
async def reset_password(
    token: str,
    request: ResetPasswordAPIRequest,
    complete_reset_use_case: FromDishka[CompleteResetUseCase],
) -> CompleteResetResponse:
    """Set a new password using the token from the emailed link."""
    return await complete_reset_use_case.execute(
        CompleteResetRequest(
            scheme=RecoveryScheme.TOKEN,
            secret=token,
            new_password=request.new_password,
        )
    )


@router.get("/go-reset", response_class=HTMLResponse)
async def go_reset(
    settings: FromDishka[Settings],
    token: str | None = None,
) -> HTMLResponse:
    """Bounce an emailed link into the mobile app.

    Mail clients do not follow custom URL schemes, so the link points here
    and this page redirects to ``<app_scheme>://reset-password?token=...``.
    """
    if not token:
        return HTMLResponse(
            "<p>Missing reset token.</p>", status_code=status.HTTP_400_BAD_REQUEST
        )

    target = escape(
        f"{settings.recovery.app_scheme}://reset-password?{urlencode({'token': token})}"
    )
    return HTMLResponse(
        "<!DOCTYPE html>"
        "<html><head>"
        f'<meta http-equiv="refresh" content="0; url={target}">'
        "<title>Reset your password</title>"
        "</head><body>"
        f'<p>Opening the app... If nothing happens, <a href="{target}">tap here</a>.</p>'
        "</body></html>"
    )
