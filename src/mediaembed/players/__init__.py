"""
Media player strategies.

Each player implements one embedding technique and exposes its rank, enabled
flag, embeddable markers and the ``list_supported_urls``/``embed`` pair used
by :class:`mediaembed.renderer.MediaRenderer`.

Bundled players:
    - ``html5video`` (rank 50): native ``<video>`` element
    - ``html5audio`` (rank 20): native ``<audio>`` element
    - ``link`` (rank 0): plain download link

Example:
    >>> from mediaembed.models import EmbedOptions
    >>> from mediaembed.players import Html5VideoPlayer
    >>> from mediaembed.urls import to_urls
    >>> player = Html5VideoPlayer()
    >>> player.list_supported_urls(to_urls(["clip.webm", "clip.txt"]), EmbedOptions())
    [URL('clip.webm')]
"""

from .base import MediaPlayer
from .html5audio import Html5AudioPlayer
from .html5video import Html5VideoPlayer
from .link import LinkPlayer

__all__ = ["MediaPlayer", "Html5AudioPlayer", "Html5VideoPlayer", "LinkPlayer"]
