from __future__ import annotations

import dataclasses
import locale
import logging
import unicodedata
from dataclasses import dataclass
from typing import Any

from .preprocess import split_runs
from .resources import PinyinResources
from .segment import segment
from .style import Style, render
from .types import PinyinMatrix
from .util import combo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PinyinOptions:
    style: Style = Style.TONE
    # Use the word segmenter so known phrases are read as a whole.
    segment: bool = False
    heteronym: bool = False
    # With segment=True, expand each phrase into whole-phrase readings.
    group: bool = False
    engine: str = "jieba"
    resources: PinyinResources | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", Style.parse(self.style))

    def merged(self, **fields: Any) -> "PinyinOptions":
        return dataclasses.replace(self, **fields) if fields else self

    def get_resources(self) -> PinyinResources:
        return self.resources if self.resources is not None else PinyinResources.default()


def resolve_char(ch: str, options: PinyinOptions) -> list[str]:
    """
    Readings of one character, rendered in ``options.style``.

    Only the first character of ``ch`` is looked at. Characters missing from
    the dictionary come back verbatim.
    """
    if not ch:
        return []
    han = ch[0]
    entry = options.get_resources().lookup_char(ord(han))
    if not entry:
        return [han]

    pys = entry.split(",")
    if not options.heteronym:
        return [render(pys[0], options.style)]

    # Distinct tone-marked readings may collapse to the same rendered string.
    seen: set[str] = set()
    pinyins: list[str] = []
    for py in pys:
        rendered = render(py, options.style)
        if rendered in seen:
            continue
        seen.add(rendered)
        pinyins.append(rendered)
    return pinyins


def resolve_phrase(phrase: str, options: PinyinOptions) -> PinyinMatrix:
    """
    One candidate list per character of ``phrase``.

    A phrase dictionary hit wins over the per-character readings, since a
    character may read differently inside a known word.
    """
    if len(phrase) <= 1:
        return [resolve_char(phrase, options)] if phrase else []

    entry = options.get_resources().lookup_phrase(phrase)
    if entry is None:
        return [resolve_char(ch, options) for ch in phrase]

    if options.heteronym:
        return [[render(py, options.style) for py in pys] for pys in entry]
    return [[render(pys[0], options.style)] for pys in entry]


def _normal_pinyin(text: str, options: PinyinOptions) -> list[list[str]]:
    spans = split_runs(text, options.get_resources())
    logger.debug("split_runs: %s", [(sp.type, sp.text) for sp in spans])
    pys: list[list[str]] = []
    for sp in spans:
        if sp.type == "han":
            pys.append(resolve_char(sp.text, options))
        else:
            pys.append([sp.text])
    return pys


def _segment_pinyin(text: str, options: PinyinOptions) -> list[list[str]]:
    resources = options.get_resources()
    tokens = segment(text, options.engine, resources)
    pys: list[list[str]] = []
    for tok in tokens:
        if not resources.is_han(tok.text[0]):
            pys.append([tok.text])
            continue

        if len(tok.text) == 1:
            pys.append(resolve_char(tok.text, options))
            continue

        matrix = resolve_phrase(tok.text, options)
        logger.debug("phrase %s (%s): %s", tok.text, tok.tag, matrix)
        if options.group:
            pys.append(combo(matrix))
        else:
            pys.extend(matrix)
    return pys


def pinyin(text: Any, options: PinyinOptions | None = None, **overrides: Any) -> list[list[str]]:
    """
    Convert ``text`` to pinyin.

    Returns one group per Han character (or per phrase when grouping) and
    one verbatim group per non-Han run, in input order. Anything that is not
    a ``str`` gives ``[]``.

        >>> pinyin("hello世界")
        [['hello'], ['shì'], ['jiè']]
    """
    opts = (options or PinyinOptions()).merged(**overrides)
    if not isinstance(text, str):
        logger.debug("pinyin() got %s, returning no groups", type(text).__name__)
        return []
    if not text:
        return []
    if opts.segment:
        return _segment_pinyin(text, opts)
    return _normal_pinyin(text, opts)


def _collation_keys(pys: list[list[str]]) -> tuple[str, str]:
    """Returns (base letters only, NFD form with tone marks kept)."""
    flat = unicodedata.normalize("NFD", ",".join(",".join(group) for group in pys))
    base = "".join(c for c in flat if unicodedata.category(c) != "Mn")
    return base, flat


def compare(han_a: str, han_b: str) -> int:
    """
    Three-way comparison of two strings by their default pinyin, usable with
    ``functools.cmp_to_key`` to sort Chinese text by pronunciation.

    Readings are ordered by their letters first; tone marks only break ties.
    """
    keys_a = _collation_keys(pinyin(han_a))
    keys_b = _collation_keys(pinyin(han_b))
    for key_a, key_b in zip(keys_a, keys_b):
        c = locale.strcoll(key_a, key_b)
        if c:
            return (c > 0) - (c < 0)
    return 0
