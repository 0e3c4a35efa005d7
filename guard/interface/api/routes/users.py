"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from guard.application.usecase.base import CamelModel
from guard.application.usecase.user import (
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    ListUsersResponse,
    ListUsersUseCase,
    SubmitIdentityRequest,
    SubmitIdentityResponse,
    SubmitIdentityUseCase,
    UpdateAvatarRequest,
    UpdateAvatarUseCase,
    UserResponse,
)

router = APIRouter(tags=["users"], route_class=DishkaRoute)


class UpdateAvatarAPIRequest(CamelModel):
    """API request for updating the avatar."""

    avatar: str | None = None


@router.get("/api/users", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> ListUsersResponse:
    """List all users without credentials."""
    return await list_users_use_case.execute()


@router.get("/api/users/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse:
    """Get a user by ID.

    Returns 400 for a malformed ID and 404 if the user does not exist.

    Example:
        GET /api/users/123e4567-e89b-12d3-a456-426614174000

        Response:
        {
            "id": "123e4567-e89b-12d3-a456-426614174000",
            "name": "Ama Mensah",
            "email": "ama@example.com",
            "phone": "+233201234567",
            "role": "user",
            "status": "approved",
            "avatar": null,
            "createdAt": "2025-01-15T12:34:56Z",
            "updatedAt": "2025-01-15T12:34:56Z"
        }
    """
    return await get_user_use_case.execute(GetUserRequest(user_id=user_id))


@router.delete(
    "/api/users/{user_id}",
    response_model=DeleteUserResponse,
    responses={status.HTTP_502_BAD_GATEWAY: {"model": DeleteUserResponse}},
)
async def delete_user(
    user_id: str,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
):
    """Delete a user and their chat identity.

    If the chat identity cannot be removed the local delete still stands
    and the response is 502 with ``error: partial_failure``.
    """
    result = await delete_user_use_case.execute(DeleteUserRequest(user_id=user_id))

    if result.is_partial:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=result.model_dump(mode="json", by_alias=True),
        )

    return result


@router.post("/api/users/{user_id}/avatar", response_model=UserResponse)
async def update_avatar(
    user_id: str,
    request: UpdateAvatarAPIRequest,
    update_avatar_use_case: FromDishka[UpdateAvatarUseCase],
) -> UserResponse:
    """Replace the user's avatar reference."""
    return await update_avatar_use_case.execute(
        UpdateAvatarRequest(user_id=user_id, avatar=request.avatar)
    )


@router.post("/submit-id", response_model=SubmitIdentityResponse)
async def submit_identity(
    request: SubmitIdentityRequest,
    submit_identity_use_case: FromDishka[SubmitIdentityUseCase],
) -> SubmitIdentityResponse:
    """Upload a new identity document for moderator review."""
    return await submit_identity_use_case.execute(request)
