# python main.py --level=B2
# python main.py --level=c1 --count 5 --seed 42

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from common.logging import setup_logging
from common.settings import Settings
from core.versions import APP_VERSION
from domain.vocabulary.errors import LoadError
from pipelines.word_pipeline import run_word_pipeline

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Pick random CEFR words and enrich them with WordsAPI data."
    )
    parser.add_argument(
        "--level", type=str, default=None, help="CEFR level filter, e.g. B2"
    )
    parser.add_argument("--count", type=int, default=None, help="Number of words")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--data", type=Path, default=None, help="Input CSV path")
    parser.add_argument("--output", type=Path, default=None, help="Output JSON path")
    args = parser.parse_args(argv)

    if args.count is not None and args.count < 0:
        parser.error("--count must be >= 0")

    return args


def _load_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    overrides = {}
    if args.data is not None:
        overrides["data_path"] = args.data
    if args.output is not None:
        overrides["output_path"] = args.output
    if overrides:
        settings = settings.model_copy(update=overrides)
    return settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging()

    logger.info("CEFR word fetcher %s", APP_VERSION)

    try:
        settings = _load_settings(args)
    except ValidationError:
        logger.exception("Invalid configuration in the environment")
        return 1

    logger.info("Level filter from command line: %s", args.level or "None")

    try:
        run_word_pipeline(settings, level=args.level, count=args.count, seed=args.seed)
    except LoadError:
        logger.exception("Could not load the CEFR dataset from %s", settings.data_path)
        return 1
    except Exception:
        logger.exception("Pipeline failed")
        return 1

    logger.info("Application completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
