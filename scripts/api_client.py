"""Lightweight REST client for the mediaembed API."""

from __future__ import annotations

import argparse
import json

import httpx


def build_options(raw: str) -> dict:
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid options JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the mediaembed REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("urls", nargs="*", help="Media URL and alternatives")
    parser.add_argument("--name", default="", help="Display name for the download link")
    parser.add_argument("--width", type=int, default=0, help="Width in pixels")
    parser.add_argument("--height", type=int, default=0, help="Height in pixels")
    parser.add_argument("--options", default="", help="JSON object of embed options")
    parser.add_argument("--check", action="store_true", help="Ask whether the URLs can be embedded")
    parser.add_argument("--players", action="store_true", help="List players and exit")
    parser.add_argument("--markers", action="store_true", help="Print the marker pattern and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.players:
            resp = client.get("/players")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return
        if args.markers:
            resp = client.get("/markers")
            resp.raise_for_status()
            print(resp.json()["pattern"])
            return

        if not args.urls:
            raise SystemExit("At least one URL is required")
        options = build_options(args.options)
        if args.check:
            resp = client.post("/can-embed", json={"urls": args.urls, "options": options})
            resp.raise_for_status()
            print("embeddable" if resp.json()["embeddable"] else "not embeddable")
            return

        payload = {
            "urls": args.urls,
            "name": args.name,
            "width": args.width,
            "height": args.height,
            "options": options,
        }
        resp = client.post("/embed", json=payload)
        resp.raise_for_status()
        print(resp.json()["html"])


if __name__ == "__main__":
    main()
