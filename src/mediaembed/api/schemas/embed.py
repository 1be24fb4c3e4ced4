from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class EmbedRequest(BaseModel):
    urls: list[str] = Field(..., min_length=1)
    name: str = ""
    width: int | str = 0
    height: int | str = 0
    options: dict[str, Any] = Field(default_factory=dict)


class EmbedResponse(BaseModel):
    html: str
    embeddable: bool


class CanEmbedRequest(BaseModel):
    urls: list[str] = Field(..., min_length=1)
    options: dict[str, Any] = Field(default_factory=dict)


class CanEmbedResponse(BaseModel):
    embeddable: bool


class MarkersResponse(BaseModel):
    pattern: str
