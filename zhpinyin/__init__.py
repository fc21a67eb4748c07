from .core import PinyinOptions, compare, pinyin, resolve_char, resolve_phrase
from .resources import PinyinResources
from .segment import SegmenterError, segment
from .style import Style, StyleError, render

__all__ = [
    "PinyinOptions",
    "PinyinResources",
    "SegmenterError",
    "Style",
    "StyleError",
    "compare",
    "pinyin",
    "render",
    "resolve_char",
    "resolve_phrase",
    "segment",
]
