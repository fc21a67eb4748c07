from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


SpanType = Literal["han", "other"]

# One candidate list per character position of a word.
PinyinMatrix = list[list[str]]


@dataclass(frozen=True)
class Span:
    type: SpanType
    start: int
    end: int
    text: str


@dataclass(frozen=True)
class Token:
    text: str
    tag: str | None = None
