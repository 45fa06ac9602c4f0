"""Command-line entry point spelling text with a phonetic alphabet."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, Sequence, TextIO

from spellword.alphabets import (
    Catalog,
    InvalidAlphabetError,
    UnknownAlphabetError,
    default_catalog,
)
from spellword.services import (
    TranslationResult,
    render_alphabet,
    render_alphabet_list,
    render_translation,
    translate,
)
from spellword.settings import ALPHABET_ENV, load_settings
from spellword.version import get_project_version

logger = logging.getLogger(__name__)

EXIT_INVALID_DATA = 1
EXIT_UNKNOWN_ALPHABET = 2


def _build_argument_parser(default_alphabet: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spellword",
        description="Spell out text using a phonetic spelling alphabet.",
    )
    parser.add_argument(
        "sentence",
        nargs="*",
        help="Words to spell (read from standard input when omitted)",
    )
    parser.add_argument(
        "-a",
        "--alphabet",
        default=default_alphabet,
        help=f"Alphabet to use (default: {default_alphabet}, env: {ALPHABET_ENV})",
    )
    parser.add_argument(
        "-l",
        "--list-alphabets",
        action="store_true",
        help="List available alphabets",
    )
    parser.add_argument(
        "-s",
        "--show-alphabet",
        metavar="NAME",
        help="Show the contents of an alphabet",
    )
    parser.add_argument(
        "-S",
        "--separator",
        default=" ",
        help="Separator placed between codewords (default: a single space)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the translation as JSON",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {get_project_version()}",
    )
    return parser


def _read_lines(stream: TextIO) -> Iterable[str]:
    for line in stream:
        if line.strip():
            yield line


def _emit(results: Sequence[TranslationResult], args: argparse.Namespace, out: TextIO) -> None:
    if args.json:
        for result in results:
            out.write(json.dumps(result.as_dict(), ensure_ascii=False) + "\n")
        return

    for result in results:
        out.write(render_translation(result, separator=args.separator))


def main(
    argv: Sequence[str] | None = None,
    *,
    catalog: Catalog | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the command line interface and return the process exit code."""

    settings = load_settings()
    parser = _build_argument_parser(settings.default_alphabet)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    try:
        catalog = catalog if catalog is not None else default_catalog()
    except InvalidAlphabetError as error:
        print(f"error: built-in alphabet data is invalid: {error}", file=sys.stderr)
        return EXIT_INVALID_DATA

    try:
        if args.list_alphabets:
            stdout.write(render_alphabet_list(catalog.summaries()))
            return 0

        if args.show_alphabet:
            stdout.write(render_alphabet(catalog.describe(args.show_alphabet)))
            return 0

        alphabet = catalog.resolve(args.alphabet)
    except UnknownAlphabetError as error:
        available = ", ".join(catalog.list_names())
        print(f"error: {error} (available: {available})", file=sys.stderr)
        return EXIT_UNKNOWN_ALPHABET

    if args.sentence:
        texts: Iterable[str] = [" ".join(args.sentence)]
    else:
        texts = _read_lines(stdin)

    results = [translate(alphabet, text) for text in texts]
    logger.debug("Translated %d line(s) with alphabet %s", len(results), alphabet.key)
    _emit(results, args, stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
