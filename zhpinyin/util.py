from __future__ import annotations


def is_han(ch: str) -> bool:
    """Block-range Han check; the phrase loader runs it before a character dictionary exists."""
    if not ch:
        return False
    cp = ord(ch)
    # CJK Unified Ideographs + extensions + compatibility ideographs.
    return (
        (cp == 0x3007)
        or (0x3400 <= cp <= 0x4DBF)
        or (0x4E00 <= cp <= 0x9FFF)
        or (0xF900 <= cp <= 0xFAFF)
        or (0x20000 <= cp <= 0x2A6DF)
        or (0x2A700 <= cp <= 0x2B73F)
        or (0x2B740 <= cp <= 0x2B81F)
        or (0x2B820 <= cp <= 0x2CEAF)
        or (0x2CEB0 <= cp <= 0x2EBEF)
        or (0x30000 <= cp <= 0x3134F)
    )


def normalize_pinyin(pinyin: str) -> str:
    # Normalize IPA "ɡ" (U+0261) used in some datasets to ASCII "g".
    # Also normalize ü in case upstream uses v.
    return pinyin.replace("ɡ", "g").replace("v", "ü").replace("V", "Ü")


def combo2array(a1: list[str], a2: list[str]) -> list[str]:
    """
    Concatenate every reading of ``a1`` with every reading of ``a2``.

    ``a1`` is the outer loop: ``["zhāo", "cháo"] x ["yáng"]`` gives
    ``["zhāoyáng", "cháoyáng"]``. An empty side is an identity, not a zero.
    """
    if not a1:
        return list(a2)
    if not a2:
        return list(a1)
    return [x + y for x in a1 for y in a2]


def combo(matrix: list[list[str]]) -> list[str]:
    """Fold ``combo2array`` left to right over a per-position candidate matrix."""
    if not matrix:
        return []
    result = list(matrix[0])
    for pys in matrix[1:]:
        result = combo2array(result, pys)
    return result
