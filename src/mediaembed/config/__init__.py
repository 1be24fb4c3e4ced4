"""Configuration helpers for the player set."""

from .players import (
    PlayerFactory,
    build_players,
    get_player_factory,
    iter_player_names,
    resolve_factories,
)

__all__ = [
    "PlayerFactory",
    "build_players",
    "get_player_factory",
    "iter_player_names",
    "resolve_factories",
]
