"""Helper functions for the article_reader CLI."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

USAGE_EXAMPLES = """\
source_type: file or url
path_or_url: path to file or URL to fetch from
format: newsapi or simple (default: guessed from path_or_url, else newsapi)

Example:
  article-reader file ./data/newsapi.json newsapi
  article-reader url https://example.com/data/newsapi.json
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="article-reader",
        description="Print a summary of each valid article in a NewsAPI or simple-format JSON source.",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("source_type", help="file or url")
    parser.add_argument("path_or_url", help="Path to file or URL to fetch from")
    parser.add_argument("format", nargs="?", default=None, help="newsapi or simple")
    parser.add_argument(
        "--config",
        default=None,
        help="Config name (default/test) or path to YAML file.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="File that receives warnings and errors (overrides config).",
    )
    parser.add_argument("--verbose", action="store_true", help="Also log to the console.")
    return parser


def parse_article_reader_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    '''Parse CLI arguments for article_reader.'''
    return build_parser().parse_args(argv)


def print_usage(stream: Optional[TextIO] = None) -> None:
    parser = build_parser()
    out = stream if stream is not None else sys.stderr
    parser.print_usage(out)
    out.write(USAGE_EXAMPLES)
