"""Command-line interface for rendering media embeds."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from mediaembed.models import EmbedOptions
from mediaembed.renderer import MediaRenderer


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render HTML embeds for media URLs")
    parser.add_argument("urls", nargs="*", help="Media URL and any alternative encodings")
    parser.add_argument("--name", default="", help="Display name for the download link")
    parser.add_argument("--width", default="0", help="Width in pixels or percent (e.g. 640, 50%%)")
    parser.add_argument("--height", default="0", help="Height in pixels or percent")
    parser.add_argument("--block", action="store_true", help="Wrap output in a block container")
    parser.add_argument(
        "--fallback-to-blank",
        action="store_true",
        help="Print nothing instead of a bare download link when no player matches",
    )
    parser.add_argument("--no-link", action="store_true", help="Suppress download links")
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        help="Extra option passed to players (e.g. autoplay=true)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only report whether the URLs can be embedded (exit 1 if not)",
    )
    parser.add_argument("--markers", action="store_true", help="Print the embeddable marker pattern")
    parser.add_argument("--players", action="store_true", help="List enabled players in rank order")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid option entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _dimension(raw: str) -> int | str:
    raw = raw.strip()
    return int(raw) if raw.isdigit() else raw


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    renderer = MediaRenderer()

    if args.players:
        payload = [
            {
                "name": player.name,
                "rank": player.get_rank(),
                "markers": player.get_embeddable_markers(),
            }
            for player in renderer.get_players()
        ]
        print(json.dumps(payload, indent=2))
        return 0

    if args.markers:
        print(renderer.get_embeddable_markers())
        return 0

    if not args.urls:
        print("At least one URL is required", file=sys.stderr)
        return 2

    raw_options: dict[str, Any] = _parse_mapping(args.option)
    raw_options.update(
        block=args.block,
        fallback_to_blank=args.fallback_to_blank,
        no_link=args.no_link,
    )
    options = EmbedOptions.coerce(raw_options)

    if args.check:
        embeddable = renderer.can_embed_urls(args.urls, options)
        print("embeddable" if embeddable else "not embeddable")
        return 0 if embeddable else 1

    width = _dimension(args.width)
    height = _dimension(args.height)
    if len(args.urls) == 1:
        output = renderer.embed_url(args.urls[0], args.name, width, height, options)
    else:
        output = renderer.embed_alternatives(args.urls, args.name, width, height, options)
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
