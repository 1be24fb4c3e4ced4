"""Player factory configuration: which players exist and how they are built."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Mapping, Sequence

from mediaembed.players import Html5AudioPlayer, Html5VideoPlayer, LinkPlayer, MediaPlayer
from mediaembed.settings import Settings


PlayerFactory = Callable[..., MediaPlayer]


# Registration order doubles as the tie-break for players of equal rank.
_PLAYER_FACTORIES: Dict[str, PlayerFactory] = {
    "html5video": Html5VideoPlayer,
    "html5audio": Html5AudioPlayer,
    "link": LinkPlayer,
}


def iter_player_names() -> Iterable[str]:
    """Return the configured player names in registration order."""

    return _PLAYER_FACTORIES.keys()


def get_player_factory(name: str) -> PlayerFactory:
    """Fetch the factory for a player name, raising KeyError if missing."""

    key = name.strip().lower()
    if key not in _PLAYER_FACTORIES:
        raise KeyError(f"No player configured with name={name!r}")
    return _PLAYER_FACTORIES[key]


def resolve_factories(names: Sequence[str] | None = None) -> Dict[str, PlayerFactory]:
    """Map each requested name to its factory; ``None`` selects every player."""

    if names is None:
        return dict(_PLAYER_FACTORIES)
    return {name.strip().lower(): get_player_factory(name) for name in names}


def build_players(
    factories: Mapping[str, PlayerFactory],
    settings: Settings,
) -> Dict[str, MediaPlayer]:
    """Instantiate players keyed by name, honouring the disabled list in settings."""

    disabled = set(settings.disabled_players)
    return {
        name: factory(enabled=name not in disabled, settings=settings)
        for name, factory in factories.items()
    }
