"""Environment-driven settings for player construction and default sizes."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Tuple


logger = logging.getLogger(__name__)

_PLAYERS_ENV = "MEDIAEMBED_PLAYERS"
_DISABLED_PLAYERS_ENV = "MEDIAEMBED_DISABLED_PLAYERS"
_VIDEO_WIDTH_ENV = "MEDIAEMBED_VIDEO_WIDTH"
_VIDEO_HEIGHT_ENV = "MEDIAEMBED_VIDEO_HEIGHT"
_AUDIO_WIDTH_ENV = "MEDIAEMBED_AUDIO_WIDTH"

_VIDEO_WIDTH_DEFAULT = 400
_VIDEO_HEIGHT_DEFAULT = 300
_AUDIO_WIDTH_DEFAULT = 300


@dataclass(frozen=True)
class Settings:
    players: Tuple[str, ...] | None
    disabled_players: Tuple[str, ...]
    video_width: int
    video_height: int
    audio_width: int


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_list(name: str) -> Tuple[str, ...] | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    return tuple(item.strip().lower() for item in raw.split(",") if item.strip())


def load_settings() -> Settings:
    """Read settings from the environment, falling back to defaults."""

    return Settings(
        players=_env_list(_PLAYERS_ENV),
        disabled_players=_env_list(_DISABLED_PLAYERS_ENV) or (),
        video_width=_env_int(_VIDEO_WIDTH_ENV, _VIDEO_WIDTH_DEFAULT, min_value=1),
        video_height=_env_int(_VIDEO_HEIGHT_ENV, _VIDEO_HEIGHT_DEFAULT, min_value=1),
        audio_width=_env_int(_AUDIO_WIDTH_ENV, _AUDIO_WIDTH_DEFAULT, min_value=1),
    )
