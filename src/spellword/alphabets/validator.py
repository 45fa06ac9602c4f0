"""Utilities for validating alphabet definitions and surfacing issues."""

from __future__ import annotations

import argparse
from collections import Counter
from typing import Sequence

from .models import DIGITS, LATIN_LETTERS, Alphabet, fold_character
from .schema import InvalidAlphabetError


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_name(alphabet: Alphabet) -> list[str]:
    errors: list[str] = []
    name = alphabet.name.strip()

    if not name:
        errors.append(_format_scope("<unnamed>", "alphabet name must be non-empty"))
    elif any(character.isspace() for character in name):
        errors.append(
            _format_scope(name, "alphabet name must not contain whitespace")
        )

    return errors


def _validate_keys(scope: str, alphabet: Alphabet) -> list[str]:
    errors: list[str] = []

    for entry in alphabet.entries:
        character = entry.character
        if len(character) != 1:
            errors.append(
                _format_scope(
                    scope,
                    f"key '{character}' must be exactly one character",
                )
            )
            continue

        if not (character.isalpha() or character in DIGITS):
            errors.append(
                _format_scope(
                    scope,
                    f"key '{character}' must be a letter or a decimal digit",
                )
            )

        if not entry.codeword.strip():
            errors.append(
                _format_scope(scope, f"codeword for '{character}' must be non-empty")
            )

    folded = [fold_character(entry.character) for entry in alphabet.entries]
    duplicates = [key for key, count in Counter(folded).items() if count > 1]
    if duplicates:
        errors.append(
            _format_scope(
                scope,
                f"duplicate entries detected: {sorted(duplicates)}",
            )
        )

    return errors


def _validate_coverage(scope: str, alphabet: Alphabet) -> list[str]:
    missing = [letter for letter in LATIN_LETTERS if letter not in alphabet.mapping]
    if not missing:
        return []
    return [
        _format_scope(scope, f"missing required letters: {''.join(missing)}"),
    ]


def validate_alphabet(alphabet: Alphabet) -> list[str]:
    """Return a list of validation issues for the provided alphabet."""

    scope = f"{alphabet.key or '<unnamed>'}.entries"
    errors: list[str] = []

    errors.extend(_validate_name(alphabet))
    errors.extend(_validate_keys(scope, alphabet))
    errors.extend(_validate_coverage(scope, alphabet))

    return errors


def ensure_valid(alphabet: Alphabet) -> Alphabet:
    """Raise :class:`InvalidAlphabetError` when ``alphabet`` has issues."""

    issues = validate_alphabet(alphabet)
    if issues:
        raise InvalidAlphabetError(
            f"Alphabet '{alphabet.name}' is invalid: " + "; ".join(issues),
            issues,
        )
    return alphabet


def validate_all_alphabets(names: Sequence[str] | None = None) -> dict[str, list[str]]:
    """Validate the built-in alphabets and return issues keyed by name."""

    from .loader import available_alphabets, load_alphabet

    targets = names or available_alphabets()
    results: dict[str, list[str]] = {}

    for name in targets:
        results[name] = validate_alphabet(load_alphabet(name))

    return results


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Validate the built-in spelling alphabets and report issues helpful to contributors."
        )
    )
    parser.add_argument(
        "names",
        nargs="*",
        help="Specific alphabets to validate (defaults to all built-in alphabets)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    from .loader import available_alphabets, load_alphabet

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    names = args.names or available_alphabets()

    if not names:
        parser.print_help()
        return 1

    exit_code = 0

    for name in names:
        try:
            alphabet = load_alphabet(name)
        except (FileNotFoundError, InvalidAlphabetError) as error:
            print(f"[{name}] failed to load alphabet: {error}")
            exit_code = 1
            continue

        issues = validate_alphabet(alphabet)
        if issues:
            exit_code = 1
            print(f"[{name}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{name}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
