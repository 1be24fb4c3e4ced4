"""Options passed through every layer of an embed request."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel
from pydantic.config import ConfigDict


OPTION_BLOCK = "block"
OPTION_FALLBACK_TO_BLANK = "fallback_to_blank"
OPTION_NO_LINK = "no_link"


class EmbedOptions(BaseModel):
    """Recognized embed options; unknown keys are kept for players to read."""

    block: bool = False
    fallback_to_blank: bool = False
    no_link: bool = False

    model_config = ConfigDict(frozen=True, extra="allow")

    @classmethod
    def coerce(cls, options: "EmbedOptions | Mapping[str, Any] | None") -> "EmbedOptions":
        if options is None:
            return cls()
        if isinstance(options, EmbedOptions):
            return options
        return cls.model_validate(dict(options))

    def get(self, key: str, default: Any = None) -> Any:
        if key in type(self).model_fields:
            return getattr(self, key)
        extra = self.model_extra or {}
        return extra.get(key, default)
