"""
Command line word hunter.

Usage:
    wordhunter --dictionary words.txt [--min-length N] [--find WORD ...] [TOKEN ...]

Examples:
    wordhunter --dictionary words.txt
    wordhunter --dictionary words.txt --min-length 3 C A T S R E P O B O N E D I G S
    wordhunter --dictionary words.txt --find ALPHA --find PEACE

Board tokens are read row-major; a multi-letter tile such as QU is one token.
Without tokens the default 4x4 board is searched.
"""
import argparse
import logging
import sys

from wordhunter.errors import WordHunterError
from wordhunter.metrics import StageTimer
from wordhunter.settings import Settings, update_settings
from wordhunter.solver import WordHunter

logger = logging.getLogger("wordhunter")


def build_parser(cfg: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find and score every word on a letter grid")
    parser.add_argument("tokens", nargs="*", metavar="TOKEN",
                        help="Board tokens in row-major order (count must be a perfect square)")
    parser.add_argument("--dictionary", type=str, default=None,
                        help=f"Word list file (default: {cfg.DICTIONARY_PATH})")
    parser.add_argument("--min-length", type=int, default=None,
                        help=f"Minimum word length (default: {cfg.MIN_WORD_LENGTH})")
    parser.add_argument("--max-results", type=int, default=None,
                        help=f"Max words to print, 0 for all (default: {cfg.MAX_RESULTS})")
    parser.add_argument("--find", action="append", default=[], metavar="WORD",
                        help="Print the board path for WORD (repeatable)")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser


def main(argv=None) -> int:
    cfg = Settings()
    parser = build_parser(cfg)
    args = parser.parse_args(argv)

    overrides = {}
    if args.dictionary is not None:
        overrides["DICTIONARY_PATH"] = args.dictionary
    if args.min_length is not None:
        overrides["MIN_WORD_LENGTH"] = args.min_length
    if args.max_results is not None:
        overrides["MAX_RESULTS"] = args.max_results
    if args.debug:
        overrides["DEBUG"] = True
    errors = update_settings(cfg, **overrides)
    if errors:
        parser.error("; ".join(f"{k}: {v}" for k, v in errors.items()))

    level = logging.DEBUG if cfg.DEBUG else cfg.LOG_LEVEL.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    hunter = WordHunter()
    timer = StageTimer()
    try:
        with timer.stage("load"):
            hunter.load_lexicon(cfg.DICTIONARY_PATH)
        if args.tokens:
            with timer.stage("board"):
                hunter.set_board(args.tokens)
        with timer.stage("solve"):
            words = hunter.find_all_words(cfg.MIN_WORD_LENGTH)
        paths = {}
        with timer.stage("locate"):
            for word in args.find:
                paths[word.upper()] = hunter.find_path(word)
        total = hunter.score(words, cfg.MIN_WORD_LENGTH)
    except WordHunterError as e:
        logger.error("%s", e)
        return 1

    # Longest first, then alphabetical
    ranked = sorted(words, key=lambda w: (-len(w), w))
    if cfg.MAX_RESULTS > 0:
        ranked = ranked[:cfg.MAX_RESULTS]
    for word in ranked:
        print(word)
    print(f"score: {total}")
    for word, path in paths.items():
        if path:
            print(f"{word}: {' '.join(str(i) for i in path)}")
        else:
            print(f"{word}: not on board")

    logger.info("Found %d words (printed %d), timings %s", len(words), len(ranked), timer.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
