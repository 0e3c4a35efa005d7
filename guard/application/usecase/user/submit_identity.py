"""Submit identity document use case."""

from pydantic import AliasChoices, Field

from guard.application.usecase.base import BaseUseCase, CamelModel
from guard.domain.error import ValidationError
from guard.domain.service import UserService

from .get_user import parse_user_id


class SubmitIdentityRequest(CamelModel):
    """Submit identity document request."""

    user_id: str | None = None
    identity_document: str | None = Field(
        default=None, validation_alias=AliasChoices("identityDocument", "base64Image")
    )


class SubmitIdentityResponse(CamelModel):
    """Submit identity document response."""

    message: str


class SubmitIdentityUseCase(BaseUseCase):
    """Use case for re-uploading the identity document under review."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: SubmitIdentityRequest) -> SubmitIdentityResponse:
        """Store the new document.

        Raises:
            ValidationError: If a field is missing or the ID is malformed
            NotFoundError: If the user does not exist
        """
        if not request.user_id:
            raise ValidationError("Missing required fields: user_id")

        await self.user_service.submit_identity_document(
            parse_user_id(request.user_id), request.identity_document
        )
        return SubmitIdentityResponse(message="Identity document submitted for review")
