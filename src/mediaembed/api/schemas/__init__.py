"""Pydantic models for API I/O."""

from .embed import (
    CanEmbedRequest,
    CanEmbedResponse,
    EmbedRequest,
    EmbedResponse,
    MarkersResponse,
)
from .player import PlayerResponse

__all__ = [
    "CanEmbedRequest",
    "CanEmbedResponse",
    "EmbedRequest",
    "EmbedResponse",
    "MarkersResponse",
    "PlayerResponse",
]
