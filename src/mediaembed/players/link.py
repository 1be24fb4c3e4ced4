"""Plain download link; the last resort of every fallback chain."""

from __future__ import annotations

from typing import List, Sequence

import httpx

from mediaembed import html
from mediaembed.models import EmbedOptions, Fragment
from mediaembed.urls import get_filename

from .base import Dimension, MediaPlayer


class LinkPlayer(MediaPlayer):
    name = "link"
    default_rank = 0

    def get_embeddable_markers(self) -> List[str]:
        # Links are always possible, so they never narrow a pre-filter.
        return []

    def list_supported_urls(
        self, urls: Sequence[httpx.URL], options: EmbedOptions
    ) -> List[httpx.URL]:
        return list(urls)

    def embed(
        self,
        urls: Sequence[httpx.URL],
        name: str,
        width: Dimension,
        height: Dimension,
        options: EmbedOptions,
    ) -> Fragment:
        if options.no_link:
            return Fragment.leaf("")
        links = [
            html.link(str(url), get_filename(url) or str(url), {"class": "mediafallbacklink"})
            for url in urls
        ]
        return Fragment.leaf(" ".join(links))
