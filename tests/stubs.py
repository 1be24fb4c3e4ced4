"""Configurable players and settings shared by the test modules."""

from __future__ import annotations

from mediaembed.players import MediaPlayer
from mediaembed.settings import Settings


SETTINGS = Settings(
    players=None,
    disabled_players=(),
    video_width=400,
    video_height=300,
    audio_width=300,
)


class StubPlayer(MediaPlayer):
    """Player that claims fixed extensions and returns fixed markup."""

    def __init__(
        self,
        name: str,
        rank: int,
        extensions: tuple[str, ...] = (),
        markup: str = "",
        *,
        enabled: bool = True,
        claim_all: bool = False,
    ):
        super().__init__(enabled=enabled, rank=rank, settings=SETTINGS)
        self.name = name
        self.supported_extensions = extensions
        self.markup = markup
        self.claim_all = claim_all
        self.embed_calls = 0

    def list_supported_urls(self, urls, options):
        if self.claim_all:
            return list(urls)
        return super().list_supported_urls(urls, options)

    def embed(self, urls, name, width, height, options):
        self.embed_calls += 1
        return self.markup
