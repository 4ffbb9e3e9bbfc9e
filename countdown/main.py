"""CLI entry point for the Countdown letters solver."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from countdown.dictionary import (
    DEFAULT_DICTIONARIES,
    DuplicateWordError,
    default_dictionary_path,
    load_words_from_file,
)
from countdown.display import print_results
from countdown.solver import InvalidLettersError, find_words, validate_letters


def _letters_arg(text: str) -> str:
    try:
        return validate_letters(text)
    except InvalidLettersError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _min_len_arg(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("Minimum word length must be at least 1")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="countdown",
        description="Countdown letters game solver: find every word in a bag of letters",
    )
    parser.add_argument(
        "letters",
        type=_letters_arg,
        help="Letters to use, e.g. GNEIRTASO",
    )
    parser.add_argument(
        "--dictionary", "-d",
        default=None,
        help="Word list file, optionally gzipped (default: first of "
             + ", ".join(DEFAULT_DICTIONARIES) + ")",
    )
    parser.add_argument(
        "--min-len", "-m",
        type=_min_len_arg,
        default=3,
        help="Minimum word length to find (default: 3)",
    )
    parser.add_argument(
        "--reuse", "-r",
        action="store_true",
        help="Allow letters to be used more than once",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show dictionary statistics and timings",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Trace every dictionary lookup made by the search",
    )
    parser.add_argument(
        "--skip-duplicates",
        action="store_true",
        help="Keep the first copy of a repeated word instead of failing",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    dict_path = args.dictionary or default_dictionary_path()
    if not dict_path:
        print("No dictionary file given and none of the default dictionaries could be found.",
              file=sys.stderr)
        print("Default dictionaries are:", file=sys.stderr)
        for path in DEFAULT_DICTIONARIES:
            print(f"  {path}", file=sys.stderr)
        return 1

    letters: str = args.letters

    if args.verbose:
        print(f"{len(letters)} letters: {' '.join(letters)}")

    # Without reuse no word can be longer than the bag.
    max_len = None if args.reuse else len(letters)

    try:
        dictionary = load_words_from_file(
            dict_path, max_len,
            on_duplicate="ignore" if args.skip_duplicates else "error",
        )
    except DuplicateWordError as e:
        print(f"Error: {e} in {dict_path} (use --skip-duplicates to ignore)", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot read dictionary {dict_path}: {e}", file=sys.stderr)
        return 1

    t0 = time.perf_counter()
    words = find_words(
        letters, dictionary,
        min_length=args.min_len,
        reuse_letters=args.reuse,
        debug=args.debug,
    )
    elapsed = time.perf_counter() - t0

    if args.verbose:
        print(f"Search took {elapsed:.2g} seconds")

    print_results(words)
    return 0


if __name__ == "__main__":
    sys.exit(main())
