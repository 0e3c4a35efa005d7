"""Password recovery use cases."""

from .complete_reset import (
    CompleteResetRequest,
    CompleteResetResponse,
    CompleteResetUseCase,
)
from .request_reset import (
    RequestResetRequest,
    RequestResetResponse,
    RequestResetUseCase,
)

__all__ = [
    "CompleteResetRequest",
    "CompleteResetResponse",
    "CompleteResetUseCase",
    "RequestResetRequest",
    "RequestResetResponse",
    "RequestResetUseCase",
]
