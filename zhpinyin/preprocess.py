from __future__ import annotations

from .resources import PinyinResources
from .types import Span, SpanType


def split_runs(text: str, resources: PinyinResources) -> list[Span]:
    """
    Partition ``text`` into Han and non-Han spans, left to right.

    A character is Han when the character dictionary knows it. Every Han
    character becomes its own one-character span; consecutive non-Han
    characters are kept together as one span.
    """
    spans: list[Span] = []
    pending = 0  # start of the buffered non-Han run
    n = len(text)

    def push_span(span_type: SpanType, start: int, end: int) -> None:
        if start >= end:
            return
        spans.append(Span(type=span_type, start=start, end=end, text=text[start:end]))

    for i in range(n):
        if resources.is_han(text[i]):
            push_span("other", pending, i)
            push_span("han", i, i + 1)
            pending = i + 1

    push_span("other", pending, n)
    return spans
