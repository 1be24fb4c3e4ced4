from __future__ import annotations

from typing import List

from pydantic import BaseModel


class PlayerResponse(BaseModel):
    name: str
    rank: int
    enabled: bool
    markers: List[str]
