"""Selects players for a set of alternative URLs and composes their markup."""

from __future__ import annotations

import logging
import re
import threading
from typing import Any, Iterable, Mapping, Sequence, Tuple, Union

from mediaembed import html
from mediaembed.compose import FallbackComposer
from mediaembed.models import EmbedOptions, Fragment
from mediaembed.players import MediaPlayer
from mediaembed.registry import PlayerRegistry
from mediaembed.urls import UrlLike, extract_size_hint, to_urls


logger = logging.getLogger(__name__)

OptionsLike = Union[EmbedOptions, Mapping[str, Any], None]

_MATCH_NOTHING = re.compile(r"(?!)")


class MediaRenderer:
    """Entry point for embedding media URLs with a graceful fallback chain."""

    def __init__(self, registry: PlayerRegistry | None = None):
        self.registry = registry or PlayerRegistry()
        self._markers: str | None = None
        self._markers_lock = threading.Lock()

    def get_players(self) -> Tuple[MediaPlayer, ...]:
        return self.registry.get_players()

    def embed_url(
        self,
        url: UrlLike,
        name: str = "",
        width: int | str = 0,
        height: int | str = 0,
        options: OptionsLike = None,
    ) -> str:
        """
        Render a single media URL.

        A ``?d=WIDTHxHEIGHT`` (or ``#d=...``) hint in the URL overrides
        ``width`` and ``height`` and is stripped from the URL before the
        players see it.
        """

        raw_url = url if isinstance(url, str) else str(url)
        hint = extract_size_hint(raw_url)
        if hint is not None:
            width, height = hint.width, hint.height
            url = hint.url
        return self.embed_alternatives([url], name, width, height, options)

    def embed_alternatives(
        self,
        alternatives: Iterable[UrlLike],
        name: str = "",
        width: int | str = 0,
        height: int | str = 0,
        options: OptionsLike = None,
    ) -> str:
        """
        Render alternative encodings of the same media.

        Every enabled player that supports at least one URL contributes
        markup, highest rank outermost; each weaker player's markup goes into
        the fallback slot of the stronger one before it.

        Args:
            alternatives: URLs of the same content in different formats
            name: Optional display name for the download link
            width: Width hint in pixels (or percent string), 0 if unknown
            height: Height hint in pixels (or percent string), 0 if unknown
            options: Embed options (``block``, ``fallback_to_blank``, ...)

        Returns:
            str: HTML fragment, empty when nothing could be rendered
        """
        urls = to_urls(alternatives)
        embed_options = EmbedOptions.coerce(options)
        composer = FallbackComposer()

        for player in self.get_players():
            if not composer.has_open_slot:
                break
            # Don't degrade straight to the link player when nothing richer matched.
            if embed_options.fallback_to_blank and player.get_rank() == 0 and composer.is_bare:
                continue

            supported = player.list_supported_urls(urls, embed_options)
            if not supported:
                continue
            rendered = player.embed(supported, name, width, height, embed_options)
            composer.offer(Fragment.coerce(rendered))
            logger.debug("Player %s embedded %d of %d URLs", player.name, len(supported), len(urls))

        out = composer.render()
        if embed_options.block and out != "":
            out = html.tag("div", out, {"class": "resourcecontent"})
        return out

    def can_embed_url(self, url: UrlLike, options: OptionsLike = None) -> bool:
        return self.can_embed_urls([url], options)

    def can_embed_urls(self, urls: Sequence[UrlLike], options: OptionsLike = None) -> bool:
        """True if a player richer than a plain link supports any of ``urls``."""

        candidates = to_urls(urls)
        embed_options = EmbedOptions.coerce(options)
        for player in self.get_players():
            # The link tier is always last and does not count.
            if player.get_rank() <= 0:
                break
            if player.list_supported_urls(candidates, embed_options):
                return True
        return False

    def get_embeddable_markers(self) -> str:
        """
        Alternation of every enabled player's markers, regex-escaped.

        Suitable for a quick keyword pre-filter such as
        ``re.search(renderer.get_embeddable_markers(), href)`` before running
        the full selection on each link of a large document. Markers are
        lower-case and players match extensions case-insensitively, so callers
        must search with ``re.IGNORECASE`` (or use ``get_embeddable_pattern``).
        """

        markers = self._markers
        if markers is not None:
            return markers
        with self._markers_lock:
            if self._markers is None:
                self._markers = "|".join(
                    re.escape(marker)
                    for player in self.get_players()
                    for marker in player.get_embeddable_markers()
                )
                logger.debug("Built embeddable marker pattern: %s", self._markers)
            return self._markers

    def get_embeddable_pattern(self) -> re.Pattern[str]:
        markers = self.get_embeddable_markers()
        if not markers:
            return _MATCH_NOTHING
        return re.compile(markers, re.IGNORECASE)
