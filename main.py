# main.py

"""Command-line interface for the text sanitizer.

Reads text from a file or stdin, prints the cleaned text, or with
``--report`` prints a JSON breakdown of what was found.
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from sanitizer.core.domain import CleaningOptions, VarianceSettings, WordExchange
from sanitizer.logging_config import configure_logging
from sanitizer.service.config import settings
from sanitizer.service.pipeline import process_text

logger = logging.getLogger(__name__)

_OPTION_FLAGS = (
    ("invisible_chars", "--invisible", "remove invisible characters"),
    ("markdown_headers", "--headers", "remove markdown header markers"),
    ("markdown_bold", "--bold", "unwrap markdown bold"),
    ("repeating_chars", "--repeating", "collapse runs of 3+ identical characters"),
    ("formatting_lines", "--lines", "delete divider lines such as ---"),
    ("extra_whitespace", "--whitespace", "collapse runs of whitespace"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sanitize-text",
        description="Remove invisible characters and formatting artifacts from text.",
    )
    parser.add_argument("path", nargs="?", help="input file (default: stdin)")
    parser.add_argument("--all", action="store_true", help="enable every cleaning option")

    for dest, flag, help_text in _OPTION_FLAGS:
        parser.add_argument(
            flag,
            dest=dest,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=help_text,
        )

    parser.add_argument(
        "--exchange",
        action="append",
        default=[],
        metavar="BAD=GOOD",
        help="replace a whole word (repeatable)",
    )
    parser.add_argument(
        "--variance",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="also replace case and plural forms of exchanged words",
    )
    parser.add_argument("--no-case", action="store_true", help="skip case forms")
    parser.add_argument("--no-plural", action="store_true", help="skip plural forms")
    parser.add_argument("--report", action="store_true", help="print a JSON report")
    parser.add_argument("--log-level", default=None, help="override SANITIZER_LOG_LEVEL")
    return parser


def parse_exchanges(values: List[str]) -> List[WordExchange]:
    """Parses ``BAD=GOOD`` arguments into exchanges."""
    exchanges = []
    for index, value in enumerate(values, start=1):
        bad, sep, good = value.partition("=")
        if not sep:
            raise ValueError(f"Exchange must look like BAD=GOOD: {value!r}")
        exchanges.append(WordExchange(id=str(index), bad_word=bad, good_word=good))
    return exchanges


def build_options(args: argparse.Namespace, has_exchanges: bool) -> CleaningOptions:
    base = CleaningOptions.all_enabled() if args.all else settings.cleaning_options()
    overrides = {
        dest: getattr(args, dest)
        for dest, _, _ in _OPTION_FLAGS
        if getattr(args, dest) is not None
    }
    overrides["word_exchanges"] = has_exchanges
    return replace(base, **overrides)


def build_variance(args: argparse.Namespace) -> VarianceSettings:
    defaults = settings.variance_settings()
    return VarianceSettings(
        enabled=defaults.enabled if args.variance is None else args.variance,
        synonym_variation=defaults.synonym_variation,
        case_variation=defaults.case_variation and not args.no_case,
        plural_variation=defaults.plural_variation and not args.no_plural,
    )


def read_input(path: Optional[str]) -> str:
    if path:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command-line interface.

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level or settings.log_level)

    try:
        exchanges = parse_exchanges(args.exchange)
    except ValueError as e:
        parser.error(str(e))

    try:
        text = read_input(args.path)
    except OSError as e:
        logger.error("Failed to read input", extra={"path": args.path})
        print(f"sanitize-text: {e}", file=sys.stderr)
        return 1

    result = process_text(
        text,
        options=build_options(args, bool(exchanges)),
        word_exchanges=exchanges,
        variance=build_variance(args),
    )

    if "error" in result.metadata:
        print(f"sanitize-text: {result.metadata['error']}", file=sys.stderr)
        return 1

    if args.report:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        sys.stdout.write(result.cleaned_text)
        if result.cleaned_text:
            sys.stdout.write("\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
