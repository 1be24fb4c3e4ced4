"""Embed media URLs with the best available player and a fallback chain."""

from .models import (
    OPTION_BLOCK,
    OPTION_FALLBACK_TO_BLANK,
    OPTION_NO_LINK,
    PLACEHOLDER,
    EmbedOptions,
    Fragment,
)
from .registry import PlayerRegistry
from .renderer import MediaRenderer

__all__ = [
    "EmbedOptions",
    "Fragment",
    "MediaRenderer",
    "PlayerRegistry",
    "OPTION_BLOCK",
    "OPTION_FALLBACK_TO_BLANK",
    "OPTION_NO_LINK",
    "PLACEHOLDER",
]
