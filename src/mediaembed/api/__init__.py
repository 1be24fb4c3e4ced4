"""REST API for the media renderer."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from mediaembed.api.schemas import (
    CanEmbedRequest,
    CanEmbedResponse,
    EmbedRequest,
    EmbedResponse,
    MarkersResponse,
    PlayerResponse,
)
from mediaembed.models import EmbedOptions
from mediaembed.renderer import MediaRenderer


logger = logging.getLogger(__name__)


def _parse_options(raw: dict[str, Any]) -> EmbedOptions:
    try:
        return EmbedOptions.coerce(raw)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=f"Invalid options: {exc}") from exc


def create_app(renderer: MediaRenderer | None = None) -> FastAPI:
    app = FastAPI(title="mediaembed renderer")
    app.state.renderer = renderer or MediaRenderer()
    logger.info(
        "Media renderer ready with players: %s",
        ", ".join(player.name for player in app.state.renderer.get_players()) or "<none>",
    )

    def current_renderer() -> MediaRenderer:
        return app.state.renderer

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/players", response_model=list[PlayerResponse])
    async def players() -> list[PlayerResponse]:
        return [
            PlayerResponse(
                name=player.name,
                rank=player.get_rank(),
                enabled=player.is_enabled(),
                markers=player.get_embeddable_markers(),
            )
            for player in current_renderer().get_players()
        ]

    @app.get("/markers", response_model=MarkersResponse)
    async def markers() -> MarkersResponse:
        return MarkersResponse(pattern=current_renderer().get_embeddable_markers())

    @app.post("/embed", response_model=EmbedResponse)
    async def embed(request: EmbedRequest) -> EmbedResponse:
        options = _parse_options(request.options)
        renderer = current_renderer()
        try:
            if len(request.urls) == 1:
                html = renderer.embed_url(
                    request.urls[0], request.name, request.width, request.height, options
                )
            else:
                html = renderer.embed_alternatives(
                    request.urls, request.name, request.width, request.height, options
                )
            embeddable = renderer.can_embed_urls(request.urls, options)
        except (httpx.InvalidURL, ValueError) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return EmbedResponse(html=html, embeddable=embeddable)

    @app.post("/can-embed", response_model=CanEmbedResponse)
    async def can_embed(request: CanEmbedRequest) -> CanEmbedResponse:
        options = _parse_options(request.options)
        try:
            embeddable = current_renderer().can_embed_urls(request.urls, options)
        except (httpx.InvalidURL, ValueError) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return CanEmbedResponse(embeddable=embeddable)

    return app
