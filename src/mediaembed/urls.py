"""URL helpers: conversion to ``httpx.URL`` and the ``d=WIDTHxHEIGHT`` size hint."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Union

import httpx


UrlLike = Union[httpx.URL, str]

_SIZE_HINT = re.compile(r"[?#]d=(\d{1,4}%?)x(\d{1,4}%?)")


@dataclass(frozen=True)
class SizeHint:
    url: str
    width: int | str
    height: int | str


def _dimension(raw: str) -> int | str:
    # Percentages stay as strings, plain pixel counts become ints.
    return raw if raw.endswith("%") else int(raw)


def to_url(value: UrlLike) -> httpx.URL:
    if isinstance(value, httpx.URL):
        return value
    if isinstance(value, str):
        return httpx.URL(value)
    raise TypeError(f"Expected a URL or string, got {type(value).__name__}")


def to_urls(values: Iterable[UrlLike]) -> List[httpx.URL]:
    return [to_url(value) for value in values]


def extract_size_hint(raw_url: str) -> SizeHint | None:
    """Find a ``?d=WxH`` or ``#d=WxH`` hint and return the URL without it.

    Dimensions are 1-4 digits with an optional ``%`` suffix. Anything that
    does not match is left alone and ``None`` is returned.
    """

    match = _SIZE_HINT.search(raw_url)
    if match is None:
        return None
    return SizeHint(
        url=raw_url.replace(match.group(0), ""),
        width=_dimension(match.group(1)),
        height=_dimension(match.group(2)),
    )


def get_filename(url: httpx.URL) -> str:
    path = url.path.rstrip("/")
    return path.rsplit("/", 1)[-1]


def get_extension(url: httpx.URL) -> str:
    """Lower-case extension of the path, including the dot (``".mp4"``)."""

    filename = get_filename(url)
    if "." not in filename:
        return ""
    return "." + filename.rsplit(".", 1)[-1].lower()
