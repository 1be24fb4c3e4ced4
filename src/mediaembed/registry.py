"""Ranked, cached list of enabled players."""

from __future__ import annotations

import logging
import threading
from functools import cmp_to_key
from typing import Iterable, Mapping, Tuple

from mediaembed.config import PlayerFactory, build_players, resolve_factories
from mediaembed.players import MediaPlayer
from mediaembed.settings import Settings, load_settings


logger = logging.getLogger(__name__)


class PlayerRegistry:
    """
    Builds the player set once and keeps it in rank order.

    Pass ``factories`` (name -> factory) to choose which players are built,
    or ``players`` to hand over already constructed instances. With neither,
    the players named by ``MEDIAEMBED_PLAYERS`` (default: all configured
    players) are built.
    """

    def __init__(
        self,
        factories: Mapping[str, PlayerFactory] | None = None,
        *,
        players: Iterable[MediaPlayer] | None = None,
        settings: Settings | None = None,
    ):
        if factories is not None and players is not None:
            raise ValueError("Pass either factories or players, not both")
        self.settings = settings or load_settings()
        self._factories = factories
        self._explicit_players = tuple(players) if players is not None else None
        self._players: Tuple[MediaPlayer, ...] | None = None
        self._lock = threading.Lock()

    def get_players_raw(self) -> Tuple[MediaPlayer, ...]:
        """All players regardless of enabled flag, in registration order."""

        if self._explicit_players is not None:
            return self._explicit_players
        factories = self._factories
        if factories is None:
            factories = resolve_factories(self.settings.players)
        return tuple(build_players(factories, self.settings).values())

    def get_players(self) -> Tuple[MediaPlayer, ...]:
        """Enabled players, highest rank first; equal ranks keep registration order."""

        players = self._players
        if players is not None:
            return players
        with self._lock:
            if self._players is None:
                enabled = [player for player in self.get_players_raw() if player.is_enabled()]
                # sorted() is stable, so ties stay in registration order.
                self._players = tuple(sorted(enabled, key=cmp_to_key(MediaPlayer.compare_by_rank)))
                logger.debug(
                    "Built player registry: %s",
                    ", ".join(f"{player.name}({player.get_rank()})" for player in self._players) or "<empty>",
                )
            return self._players
