"""
Base class for media players.

A player represents one way of embedding media (a native ``<video>`` element,
a native ``<audio>`` element, a plain download link, ...). The renderer asks
each enabled player, highest rank first, which of a set of alternative URLs it
supports, and nests the markup of weaker players inside the fallback slot of
stronger ones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple

import httpx

from mediaembed.models import EmbedOptions, Fragment
from mediaembed.settings import Settings, load_settings
from mediaembed.urls import get_extension, get_filename


Dimension = int | str


class MediaPlayer(ABC):
    """
    Abstract base class for players.

    Subclasses set ``name`` and ``default_rank`` and implement ``embed``.
    Players are stateless with respect to requests: the constructor fixes the
    rank, the enabled flag and the settings, and nothing changes afterwards.
    """

    name: str = ""
    default_rank: int = 0
    supported_extensions: Tuple[str, ...] = ()
    mimetypes: Mapping[str, str] = MappingProxyType({})

    def __init__(
        self,
        *,
        enabled: bool = True,
        rank: int | None = None,
        settings: Settings | None = None,
    ):
        self._enabled = enabled
        self._rank = self.default_rank if rank is None else rank
        self.settings = settings or load_settings()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, rank={self._rank}, enabled={self._enabled})"

    def get_rank(self) -> int:
        return self._rank

    def is_enabled(self) -> bool:
        # A negative rank disables the player as well.
        return self._enabled and self._rank >= 0

    def get_supported_extensions(self) -> Tuple[str, ...]:
        return self.supported_extensions

    def get_embeddable_markers(self) -> List[str]:
        """
        Literal substrings that a URL must contain before this player could
        support it. Defaults to the supported extensions.

        Returns:
            List[str]: Markers in a stable (sorted) order
        """
        return sorted(set(self.get_supported_extensions()))

    def list_supported_urls(
        self, urls: Sequence[httpx.URL], options: EmbedOptions
    ) -> List[httpx.URL]:
        """
        Pick the URLs this player can embed.

        The default implementation keeps URLs whose path extension is one of
        ``get_supported_extensions()``. The input sequence is never modified.

        Args:
            urls: Alternative URLs for the same content
            options: Embed options

        Returns:
            List[httpx.URL]: Supported subset, in input order
        """
        extensions = set(self.get_supported_extensions())
        return [url for url in urls if get_extension(url) in extensions]

    @abstractmethod
    def embed(
        self,
        urls: Sequence[httpx.URL],
        name: str,
        width: Dimension,
        height: Dimension,
        options: EmbedOptions,
    ) -> Fragment | str:
        """
        Render markup for supported URLs.

        Args:
            urls: Non-empty list returned by ``list_supported_urls``
            name: Display name, may be empty
            width: Width hint (0 when unspecified)
            height: Height hint (0 when unspecified)
            options: Embed options

        Returns:
            Fragment | str: Markup, optionally with one fallback slot
        """
        pass

    def get_name(self, name: str, urls: Sequence[httpx.URL]) -> str:
        if name:
            return name
        return get_filename(urls[0]) if urls else ""

    def get_mimetype(self, url: httpx.URL) -> str:
        return self.mimetypes.get(get_extension(url), "application/octet-stream")

    def pick_video_size(self, width: Dimension, height: Dimension) -> Tuple[Dimension, Dimension]:
        if not width and not height:
            return self.settings.video_width, self.settings.video_height
        return width, height

    @staticmethod
    def compare_by_rank(a: "MediaPlayer", b: "MediaPlayer") -> int:
        """Comparator for ``functools.cmp_to_key``: higher rank sorts first."""

        return b.get_rank() - a.get_rank()
