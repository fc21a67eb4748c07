from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from functools import cached_property, lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .types import PinyinMatrix
from .util import is_han, normalize_pinyin

logger = logging.getLogger(__name__)


def _iter_json_lines(path: Path) -> Iterator[Any]:
    # One JSON object per line, optionally wrapped in "[" / "]" with trailing commas.
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            s = line.strip()
            if not s or s == "[" or s == "]":
                continue
            if s.endswith(","):
                s = s[:-1]
            yield json.loads(s)


def _load_char_pinyin(path: Path) -> dict[int, str]:
    out: dict[int, str] = {}
    skipped = 0
    for obj in _iter_json_lines(path):
        if not isinstance(obj, dict):
            skipped += 1
            continue
        ch = obj.get("char")
        pinyin = obj.get("pinyin")
        if isinstance(pinyin, str):
            pinyin = pinyin.split(",")
        if not isinstance(ch, str) or len(ch) != 1 or not isinstance(pinyin, list):
            skipped += 1
            continue
        readings = [normalize_pinyin(x.strip()) for x in pinyin if isinstance(x, str) and x.strip()]
        if not readings:
            skipped += 1
            continue
        out[ord(ch)] = ",".join(readings)
    if skipped:
        logger.debug("skipped %d malformed entries in %s", skipped, path)
    return out


def _phrase_matrix(word: str, pinyin: Any) -> PinyinMatrix | None:
    if isinstance(pinyin, str):
        pinyin = [[s] for s in pinyin.split()]
    if not isinstance(pinyin, list) or len(pinyin) != len(word):
        return None
    matrix: PinyinMatrix = []
    for pys in pinyin:
        if isinstance(pys, str):
            pys = [pys]
        if not isinstance(pys, list) or not pys or not all(isinstance(x, str) and x for x in pys):
            return None
        matrix.append([normalize_pinyin(x) for x in pys])
    return matrix


def _load_phrase_pinyin(path: Path) -> dict[str, PinyinMatrix]:
    if not path.exists():
        return {}
    out: dict[str, PinyinMatrix] = {}
    skipped = 0
    for obj in _iter_json_lines(path):
        word = obj.get("word") if isinstance(obj, dict) else None
        if not isinstance(word, str) or len(word) < 2 or not all(is_han(ch) for ch in word):
            skipped += 1
            continue
        matrix = _phrase_matrix(word, obj.get("pinyin"))
        if matrix is None:
            skipped += 1
            continue
        out[word] = matrix
    if skipped:
        logger.debug("skipped %d malformed entries in %s", skipped, path)
    return out


@lru_cache(maxsize=None)
def _default_resources() -> "PinyinResources":
    from pypinyin.constants import PHRASES_DICT, PINYIN_DICT

    logger.info(
        "loaded pypinyin dictionaries: %d chars, %d phrases", len(PINYIN_DICT), len(PHRASES_DICT)
    )
    return PinyinResources(
        char_pinyin=MappingProxyType(PINYIN_DICT),
        phrase_pinyin=MappingProxyType(PHRASES_DICT),
    )


@dataclass(frozen=True)
class PinyinResources:
    """
    Read-only character and phrase dictionaries.

    ``char_pinyin`` maps a code point to its comma-joined tone-marked readings,
    default reading first (``0x4E2D: "zhōng,zhòng"``). ``phrase_pinyin`` maps a
    word to one candidate list per character (``"朝阳": [["zhāo", "cháo"], ["yáng"]]``).
    """

    char_pinyin: Mapping[int, str]
    phrase_pinyin: Mapping[str, PinyinMatrix]

    @staticmethod
    def default() -> "PinyinResources":
        """Dictionaries shipped with pypinyin, built once per process."""
        return _default_resources()

    @staticmethod
    def from_mappings(
        chars: Mapping[int | str, str],
        phrases: Mapping[str, PinyinMatrix] | None = None,
    ) -> "PinyinResources":
        char_pinyin = {(ord(k) if isinstance(k, str) else k): v for k, v in chars.items()}
        phrase_pinyin = {w: [list(pys) for pys in m] for w, m in (phrases or {}).items()}
        return PinyinResources(
            char_pinyin=MappingProxyType(char_pinyin),
            phrase_pinyin=MappingProxyType(phrase_pinyin),
        )

    @staticmethod
    def load_from_dir(
        data_dir: str | Path,
        *,
        chars_json: str = "chars.json",
        phrases_json: str = "phrases.json",
    ) -> "PinyinResources":
        base = Path(data_dir)
        char_pinyin = _load_char_pinyin(base / chars_json)
        phrase_pinyin = _load_phrase_pinyin(base / phrases_json)
        logger.info(
            "loaded dictionaries from %s: %d chars, %d phrases",
            base,
            len(char_pinyin),
            len(phrase_pinyin),
        )
        return PinyinResources(
            char_pinyin=MappingProxyType(char_pinyin),
            phrase_pinyin=MappingProxyType(phrase_pinyin),
        )

    @cached_property
    def max_len_by_first_char(self) -> dict[str, int]:
        out: dict[str, int] = {}
        for w in self.phrase_pinyin.keys():
            if not w:
                continue
            fc = w[0]
            out[fc] = max(out.get(fc, 0), len(w))
        return out

    def lookup_char(self, cp: int) -> str | None:
        return self.char_pinyin.get(cp)

    def lookup_phrase(self, word: str) -> PinyinMatrix | None:
        return self.phrase_pinyin.get(word)

    def is_han(self, ch: str) -> bool:
        return len(ch) == 1 and ord(ch) in self.char_pinyin
