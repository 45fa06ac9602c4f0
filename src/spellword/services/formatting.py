"""Plain-text rendering of translations and alphabet listings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .translator import TranslationResult

COLUMN_GAP = "  "


def render_rows(rows: Sequence[tuple[str, str]]) -> str:
    """Render two-column rows with the first column left-aligned."""

    if not rows:
        return ""

    width = max(len(left) for left, _ in rows)
    lines = [f"{left.ljust(width)}{COLUMN_GAP}{right}".rstrip() for left, right in rows]
    return "\n".join(lines) + "\n"


def render_translation(result: TranslationResult, separator: str = " ") -> str:
    """Render one row per word: the original word, then its codewords."""

    rows = [(word.original, separator.join(word.spelled)) for word in result]
    return render_rows(rows)


def render_alphabet(entries: Iterable[tuple[str, str]]) -> str:
    """Render ``describe`` output as ``"<character> <codeword>"`` lines."""

    return "".join(f"{character} {codeword}\n" for character, codeword in entries)


def render_alphabet_list(summaries: Iterable[tuple[str, str]]) -> str:
    lines = ["Available alphabets:"]
    lines.extend(f"  - {name}: {title}" for name, title in summaries)
    return "\n".join(lines) + "\n"


__all__ = [
    "render_alphabet",
    "render_alphabet_list",
    "render_rows",
    "render_translation",
]
