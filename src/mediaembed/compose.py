"""Nesting of player output into a single fallback chain."""

from __future__ import annotations

from typing import List

from mediaembed.models import Fragment


class FallbackComposer:
    """Chain of fragments where each one sits in the fallback slot of the previous.

    The first fragment offered is the outermost markup. Once a fragment
    without a slot has been placed, the chain is closed and later offers are
    ignored.
    """

    def __init__(self) -> None:
        self._chain: List[Fragment] = []

    @property
    def is_empty(self) -> bool:
        return not self._chain

    @property
    def is_bare(self) -> bool:
        """True while the chain renders as nothing but its open slot."""

        return all(fragment.has_slot and not fragment.before and not fragment.after for fragment in self._chain)

    @property
    def has_open_slot(self) -> bool:
        return not self._chain or self._chain[-1].has_slot

    def offer(self, fragment: Fragment) -> bool:
        """Place ``fragment`` in the open slot; return False if there is none."""

        if not self.has_open_slot:
            return False
        self._chain.append(fragment)
        return True

    def render(self) -> str:
        """Render innermost first; an unfilled slot becomes the empty string."""

        text = ""
        for fragment in reversed(self._chain):
            text = fragment.render(text)
        return text
