"""Value types shared by players and the renderer."""

from .fragment import PLACEHOLDER, Fragment
from .options import OPTION_BLOCK, OPTION_FALLBACK_TO_BLANK, OPTION_NO_LINK, EmbedOptions

__all__ = [
    "PLACEHOLDER",
    "Fragment",
    "EmbedOptions",
    "OPTION_BLOCK",
    "OPTION_FALLBACK_TO_BLANK",
    "OPTION_NO_LINK",
]
