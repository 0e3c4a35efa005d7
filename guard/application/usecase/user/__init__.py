"""User use cases."""

from .approve_user import ApproveUserRequest, ApproveUserResponse, ApproveUserUseCase
from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .get_user import GetUserRequest, GetUserUseCase, UserResponse
from .list_users import ListUsersResponse, ListUsersUseCase
from .submit_identity import (
    SubmitIdentityRequest,
    SubmitIdentityResponse,
    SubmitIdentityUseCase,
)
from .update_avatar import UpdateAvatarRequest, UpdateAvatarUseCase

__all__ = [
    "ApproveUserRequest",
    "ApproveUserResponse",
    "ApproveUserUseCase",
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "ListUsersResponse",
    "ListUsersUseCase",
    "SubmitIdentityRequest",
    "SubmitIdentityResponse",
    "SubmitIdentityUseCase",
    "UpdateAvatarRequest",
    "UpdateAvatarUseCase",
    "UserResponse",
]
