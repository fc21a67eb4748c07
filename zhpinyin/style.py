"""
Syllable rendering: rewrite one canonical tone-marked syllable
(e.g. ``zhōng``) into the requested display style.
"""

from __future__ import annotations

import re
from enum import IntEnum


class StyleError(ValueError):
    pass


class Style(IntEnum):
    NORMAL = 0  # zhong
    TONE = 1  # zhōng
    TONE2 = 2  # zho1ng
    TONE3 = 3  # zhong1
    INITIALS = 4  # zh
    FIRST_LETTER = 5  # z

    @classmethod
    def parse(cls, value: "Style | int | str") -> "Style":
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise StyleError(f"unknown_style:{value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as e:
                raise StyleError(f"unknown_style:{value!r}") from e
        if isinstance(value, str):
            try:
                return cls[value.strip().upper().replace("-", "_")]
            except KeyError as e:
                raise StyleError(f"unknown_style:{value!r}") from e
        raise StyleError(f"unknown_style:{value!r}")


# Marked letter -> (bare letter, tone digit).
_PHONETIC_SYMBOL: dict[str, tuple[str, str]] = {
    "ā": ("a", "1"), "á": ("a", "2"), "ǎ": ("a", "3"), "à": ("a", "4"),
    "ē": ("e", "1"), "é": ("e", "2"), "ě": ("e", "3"), "è": ("e", "4"),
    "ō": ("o", "1"), "ó": ("o", "2"), "ǒ": ("o", "3"), "ò": ("o", "4"),
    "ī": ("i", "1"), "í": ("i", "2"), "ǐ": ("i", "3"), "ì": ("i", "4"),
    "ū": ("u", "1"), "ú": ("u", "2"), "ǔ": ("u", "3"), "ù": ("u", "4"),
    "ǖ": ("v", "1"), "ǘ": ("v", "2"), "ǚ": ("v", "3"), "ǜ": ("v", "4"),
    "ü": ("v", ""),
    "ê": ("ê", ""), "ê̄": ("ê", "1"), "ế": ("ê", "2"), "ê̌": ("ê", "3"), "ề": ("ê", "4"),
    "ń": ("n", "2"), "ň": ("n", "3"), "ǹ": ("n", "4"),
    "ḿ": ("m", "2"), "m̀": ("m", "4"),
}

# Longest first so "zh" wins over "z".
_INITIALS = sorted(
    "b p m f d t n l g k h j q x r zh ch sh z c s".split(),
    key=len,
    reverse=True,
)

_RE_PHONETIC_SYMBOL = re.compile(
    "|".join(sorted((re.escape(k) for k in _PHONETIC_SYMBOL if k != "ê"), key=len, reverse=True))
)


def _strip_tone(syllable: str) -> tuple[str, str]:
    """Returns (bare syllable, tone digit or "" for the neutral tone)."""
    tone = ""

    def repl(m: re.Match[str]) -> str:
        nonlocal tone
        bare, digit = _PHONETIC_SYMBOL[m.group(0)]
        if digit:
            tone = digit
        return bare

    return _RE_PHONETIC_SYMBOL.sub(repl, syllable), tone


def _to_tone2(syllable: str) -> str:
    def repl(m: re.Match[str]) -> str:
        bare, digit = _PHONETIC_SYMBOL[m.group(0)]
        return bare + digit

    return _RE_PHONETIC_SYMBOL.sub(repl, syllable)


def _initials(syllable: str) -> str:
    for ini in _INITIALS:
        if syllable.startswith(ini):
            return ini
    return ""


def render(syllable: str, style: Style | int | str) -> str:
    st = Style.parse(style)
    if st is Style.TONE:
        return syllable
    if st is Style.NORMAL:
        return _strip_tone(syllable)[0]
    if st is Style.TONE2:
        return _to_tone2(syllable)
    if st is Style.TONE3:
        bare, tone = _strip_tone(syllable)
        return bare + tone
    if st is Style.INITIALS:
        return _initials(syllable)
    if st is Style.FIRST_LETTER:
        return _strip_tone(syllable[:1])[0][:1]
    raise StyleError(f"unknown_style:{style!r}")
