"""Native HTML5 ``<video>`` player."""

from __future__ import annotations

from typing import Sequence

import httpx

from mediaembed import html
from mediaembed.models import EmbedOptions, Fragment

from .base import Dimension, MediaPlayer


class Html5VideoPlayer(MediaPlayer):
    name = "html5video"
    default_rank = 50
    supported_extensions = (".m4v", ".mov", ".mp4", ".ogv", ".webm")
    mimetypes = {
        ".m4v": "video/mp4",
        ".mov": "video/quicktime",
        ".mp4": "video/mp4",
        ".ogv": "video/ogg",
        ".webm": "video/webm",
    }

    def embed(
        self,
        urls: Sequence[httpx.URL],
        name: str,
        width: Dimension,
        height: Dimension,
        options: EmbedOptions,
    ) -> Fragment:
        sources = "\n".join(
            html.empty_tag("source", {"src": str(url), "type": self.get_mimetype(url)})
            for url in urls
        )
        width, height = self.pick_video_size(width, height)
        attributes: dict[str, object] = {
            "controls": "true",
            "width": width or None,
            "height": height or None,
            "preload": "metadata",
            "title": self.get_name(name, urls),
        }
        before = (
            html.start_tag("div", {"class": "mediaplugin mediaplugin_html5video"})
            + html.start_tag("video", attributes)
            + sources
        )
        after = html.end_tag("video") + html.end_tag("div")
        return Fragment.wrapping(before, after)
