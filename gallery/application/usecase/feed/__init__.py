"""Feed use cases."""

from .get_latest_comments import (
    GetLatestCommentsRequest,
    GetLatestCommentsResponse,
    GetLatestCommentsUseCase,
)

__all__ = [
    "GetLatestCommentsRequest",
    "GetLatestCommentsResponse",
    "GetLatestCommentsUseCase",
]
