"""Native HTML5 ``<audio>`` player."""

from __future__ import annotations

from typing import Sequence

import httpx

from mediaembed import html
from mediaembed.models import EmbedOptions, Fragment

from .base import Dimension, MediaPlayer


class Html5AudioPlayer(MediaPlayer):
    name = "html5audio"
    default_rank = 20
    supported_extensions = (".aac", ".flac", ".m4a", ".mp3", ".oga", ".ogg", ".wav")
    mimetypes = {
        ".aac": "audio/aac",
        ".flac": "audio/flac",
        ".m4a": "audio/mp4",
        ".mp3": "audio/mpeg",
        ".oga": "audio/ogg",
        ".ogg": "audio/ogg",
        ".wav": "audio/wav",
    }

    def embed(
        self,
        urls: Sequence[httpx.URL],
        name: str,
        width: Dimension,
        height: Dimension,
        options: EmbedOptions,
    ) -> Fragment:
        # Audio ignores height.
        sources = "\n".join(
            html.empty_tag("source", {"src": str(url), "type": self.get_mimetype(url)})
            for url in urls
        )
        attributes = {
            "controls": "true",
            "preload": "none",
            "title": self.get_name(name, urls),
            "style": f"width: {_css_length(width or self.settings.audio_width)}",
        }
        before = (
            html.start_tag("div", {"class": "mediaplugin mediaplugin_html5audio"})
            + html.start_tag("audio", attributes)
            + sources
        )
        after = html.end_tag("audio") + html.end_tag("div")
        return Fragment.wrapping(before, after)


def _css_length(value: Dimension) -> str:
    text = str(value)
    return text if text.endswith("%") else f"{text}px"
