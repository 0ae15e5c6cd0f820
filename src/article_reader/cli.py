"""CLI for printing articles from a NewsAPI or simple-format source."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from article_reader.article_logger import ArticleLogger
from article_reader.client import run
from article_reader.config import load_config, set_config
from article_reader.errors import ArticleReaderError, ConfigError, describe_error
from article_reader.helpers import parse_article_reader_args, print_usage
from common.cli_helpers import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_article_reader_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    set_config(config)
    log_file = args.log_file or config.log_file
    run_args = [args.source_type, args.path_or_url]
    if args.format:
        run_args.append(args.format)

    try:
        with ArticleLogger(log_file, level=config.log_level, echo=args.verbose) as article_logger:
            run(run_args, article_logger)
    except ConfigError as e:
        print_usage(sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except ArticleReaderError as e:
        logger.debug("Run failed", exc_info=True)
        print(f"Error: {describe_error(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
