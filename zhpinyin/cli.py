from __future__ import annotations

import argparse
import json
import logging
import sys

from .core import PinyinOptions, pinyin
from .resources import PinyinResources
from .segment import SegmenterError, available_engines
from .style import Style, StyleError


def _format_groups(groups: list[list[str]], separator: str) -> str:
    return separator.join("/".join(g) for g in groups)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="zhpinyin")
    parser.add_argument("text", nargs="?", help="Input text. If omitted, read from stdin.")
    parser.add_argument(
        "--style",
        default="tone",
        help="Output style: " + ", ".join(s.name.lower() for s in Style) + " (default: tone).",
    )
    parser.add_argument("--heteronym", action="store_true", help="Output every reading of heteronyms.")
    parser.add_argument("--segment", action="store_true", help="Segment words before conversion.")
    parser.add_argument("--group", action="store_true", help="Join the readings of each segmented word.")
    parser.add_argument(
        "--engine",
        default="jieba",
        choices=available_engines(),
        help="Word segmenter used with --segment.",
    )
    parser.add_argument("--data-dir", default=None, help="Load chars.json/phrases.json from this directory.")
    parser.add_argument("--json", action="store_true", help="Print the result groups as JSON.")
    parser.add_argument("--separator", default=" ", help="Separator between groups in text output.")
    parser.add_argument("--debug", action="store_true", help="Log intermediate processing steps to stderr.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    text = args.text
    if text is None:
        text = sys.stdin.read().rstrip("\n")

    try:
        resources = PinyinResources.load_from_dir(args.data_dir) if args.data_dir else None
    except (OSError, json.JSONDecodeError) as e:
        print(f"zhpinyin: error: cannot load {args.data_dir}: {e}", file=sys.stderr)
        return 2

    try:
        opts = PinyinOptions(
            style=args.style,
            segment=args.segment,
            heteronym=args.heteronym,
            group=args.group,
            engine=args.engine,
            resources=resources,
        )
        groups = pinyin(text, opts)
    except (StyleError, SegmenterError) as e:
        print(f"zhpinyin: error: {e}", file=sys.stderr)
        return 2

    if args.json:
        out = json.dumps(groups, ensure_ascii=False)
    else:
        out = _format_groups(groups, args.separator)
    sys.stdout.write(out)
    if not out.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
