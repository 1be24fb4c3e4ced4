"""Small HTML tag writers used by players and the block wrapper."""

from __future__ import annotations

from html import escape
from typing import Mapping


def _attributes(attributes: Mapping[str, object] | None) -> str:
    if not attributes:
        return ""
    parts = []
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        parts.append(f' {escape(str(key))}="{escape(str(value))}"')
    return "".join(parts)


def start_tag(name: str, attributes: Mapping[str, object] | None = None) -> str:
    return f"<{name}{_attributes(attributes)}>"


def end_tag(name: str) -> str:
    return f"</{name}>"


def tag(name: str, contents: str, attributes: Mapping[str, object] | None = None) -> str:
    """Wrap already-escaped ``contents`` in an element; attribute values are escaped."""

    return f"{start_tag(name, attributes)}{contents}{end_tag(name)}"


def empty_tag(name: str, attributes: Mapping[str, object] | None = None) -> str:
    return f"<{name}{_attributes(attributes)} />"


def link(href: str, text: str, attributes: Mapping[str, object] | None = None) -> str:
    merged: dict[str, object] = {"href": href}
    if attributes:
        merged.update(attributes)
    return tag("a", escape(text), merged)
