from __future__ import annotations

import logging
from collections.abc import Callable

from .resources import PinyinResources
from .types import Token

logger = logging.getLogger(__name__)


class SegmenterError(RuntimeError):
    pass


def _segment_jieba(text: str, resources: PinyinResources) -> list[Token]:
    import jieba.posseg as psg

    return [Token(text=p.word, tag=p.flag or None) for p in psg.cut(text) if p.word]


def _segment_fmm(text: str, resources: PinyinResources) -> list[Token]:
    """Forward maximum matching over the phrase dictionary."""
    words = resources.phrase_pinyin
    max_len_by_fc = resources.max_len_by_first_char
    tokens: list[Token] = []
    other = ""
    i = 0
    n = len(text)
    while i < n:
        fc = text[i]
        if not resources.is_han(fc):
            other += fc
            i += 1
            continue
        if other:
            tokens.append(Token(text=other))
            other = ""
        max_len = max_len_by_fc.get(fc, 1)
        matched_len = 1
        for L in range(min(max_len, n - i), 1, -1):
            if text[i : i + L] in words:
                matched_len = L
                break
        tokens.append(Token(text=text[i : i + matched_len]))
        i += matched_len
    if other:
        tokens.append(Token(text=other))
    return tokens


_ENGINES: dict[str, Callable[[str, PinyinResources], list[Token]]] = {
    "jieba": _segment_jieba,
    "fmm": _segment_fmm,
}


def available_engines() -> list[str]:
    return sorted(_ENGINES)


def segment(
    text: str,
    engine: str = "jieba",
    resources: PinyinResources | None = None,
) -> list[Token]:
    """
    Split ``text`` into word tokens with the named engine.

    The token texts always concatenate back to ``text``.
    """
    fn = _ENGINES.get(engine)
    if fn is None:
        raise SegmenterError(f"unknown_segmenter_engine:{engine}")
    if not text:
        return []
    tokens = fn(text, resources or PinyinResources.default())
    logger.debug("segment(%s): %s", engine, [(t.text, t.tag) for t in tokens])
    return tokens
