"""Rendered markup nodes with a single slot for weaker fallback markup."""

from __future__ import annotations

from dataclasses import dataclass


PLACEHOLDER = "[[MEDIAEMBED_FALLBACK]]"


@dataclass(frozen=True)
class Fragment:
    """Markup split around an optional fallback slot.

    A fragment without a slot is a leaf: ``before`` is the whole markup and
    ``after`` is empty. A fragment with a slot renders as
    ``before + <fallback> + after``.
    """

    before: str
    after: str = ""
    has_slot: bool = False

    @classmethod
    def leaf(cls, markup: str) -> "Fragment":
        return cls(before=markup)

    @classmethod
    def wrapping(cls, before: str, after: str) -> "Fragment":
        return cls(before=before, after=after, has_slot=True)

    @classmethod
    def from_markup(cls, markup: str) -> "Fragment":
        """Split markup written with the textual ``PLACEHOLDER`` token."""

        occurrences = markup.count(PLACEHOLDER)
        if occurrences == 0:
            return cls.leaf(markup)
        if occurrences > 1:
            raise ValueError(
                f"Player markup may contain at most one fallback placeholder, found {occurrences}"
            )
        before, after = markup.split(PLACEHOLDER, 1)
        return cls.wrapping(before, after)

    @classmethod
    def coerce(cls, value: "Fragment | str") -> "Fragment":
        if isinstance(value, Fragment):
            return value
        if isinstance(value, str):
            return cls.from_markup(value)
        raise TypeError(f"Player output must be a Fragment or str, got {type(value).__name__}")

    def render(self, fallback: str = "") -> str:
        if not self.has_slot:
            return self.before
        return f"{self.before}{fallback}{self.after}"
