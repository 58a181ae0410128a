"""Pattern registry — whole-string validators and sentence detectors.

Two families of regexes per data class:

  * whole-string patterns, anchored, used by ``validate`` for QA scoring
  * sentence patterns, unanchored and looser, scanned with ``finditer``
    by the extractor

Both tables are built once at import time and never mutated.
"""

from __future__ import annotations
import re
from types import MappingProxyType
from typing import Any, Mapping

from .types import DataClass, ExtractedSpan, PatternSpec

_SPECS: dict[DataClass, PatternSpec] = {
    # Letters, spaces, apostrophes, hyphens and dots, 2-50 chars
    DataClass.NAME: PatternSpec(
        data_class=DataClass.NAME,
        matcher=re.compile(r"^[A-Za-z\s'.-]{2,50}$"),
        description=(
            "Malaysian names (Malay, Chinese, Indian) - supports letters, "
            "spaces, apostrophes, hyphens, and dots"
        ),
        examples=(
            "Ahmad bin Abdullah",
            "Siti Nurhaliza",
            "Lim Wei Ming",
            "Tan Ah Kow",
            "Muhammad Al-Fatih",
            "Fatimah Az-Zahra",
            "Lee Chong Wei",
        ),
    ),

    # Mobile 01x or landline 03-09, optional 0 prefix, optionally preceded
    # by 6 or +6
    DataClass.PHONE: PatternSpec(
        data_class=DataClass.PHONE,
        matcher=re.compile(
            r"^((?:\+?6)?0?1[0-9]-?[0-9]{7,8}|((?:\+?6)?0?[3-9])-?[0-9]{7,8})$"
        ),
        description=(
            "Malaysian phone numbers - supports +60, 60, 0 prefixes with "
            "mobile (01x) and landline formats"
        ),
        examples=(
            "+60123456789",
            "60123456789",
            "0123456789",
            "012-3456789",
            "+603-12345678",
            "03-12345678",
            "07-3456789",
            "019-1234567",
        ),
    ),

    DataClass.EMAIL: PatternSpec(
        data_class=DataClass.EMAIL,
        matcher=re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"),
        description="Standard email address format",
        examples=(
            "user@example.com",
            "ahmad.ibrahim@gmail.com",
            "siti123@yahoo.com.my",
            "lim.wei@company.my",
            "test.email+tag@domain.co.uk",
        ),
    ),
}

REGISTRY: Mapping[DataClass, PatternSpec] = MappingProxyType(_SPECS)


# Sentence detectors, in scan order
SENTENCE_PATTERNS: tuple[tuple[DataClass, re.Pattern], ...] = (
    # Capitalised word followed by 1-4 capitalised words, optionally
    # joined by a connective (bin, binti, s/o, d/o, Al-, Ah)
    # \b is ASCII-only so names next to CJK or accented text still match
    (DataClass.NAME, re.compile(
        r"\b[A-Z][a-z]+"
        r"(?:\s+(?:bin|binti|s/o|d/o|Al-|Ah)\s+[A-Z][a-z]+|\s+[A-Z][a-z]+){1,4}\b",
        re.ASCII,
    )),

    # Same shapes as the validator, space allowed as separator
    (DataClass.PHONE, re.compile(
        r"(?:\+?6?0?1[0-9][-\s]?[0-9]{7,8}|\+?6?0?[3-9][-\s]?[0-9]{7,8})"
    )),

    (DataClass.EMAIL, re.compile(
        r"\b[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}\b",
        re.ASCII,
    )),
)


def get_spec(data_class: DataClass | str) -> PatternSpec:
    """Look up the whole-string PatternSpec for a data class."""
    return REGISTRY[DataClass.parse(data_class)]


def validate(data_class: DataClass | str, candidate: Any) -> bool:
    """Whole-string test of candidate, ignoring surrounding whitespace."""
    spec = get_spec(data_class)
    return spec.matcher.fullmatch(str(candidate).strip()) is not None


def describe(data_class: DataClass | str) -> dict[str, Any]:
    """Pattern source, description and examples for display."""
    spec = get_spec(data_class)
    return {
        "pattern_source": spec.pattern_source,
        "description": spec.description,
        "examples": list(spec.examples),
    }


def scan_sentence(text: str) -> list[ExtractedSpan]:
    """Run every sentence detector over text, in scan order.

    Matches of one detector never overlap each other; matches of
    different detectors may.  The result is NOT sorted.
    """
    spans: list[ExtractedSpan] = []
    for data_class, pattern in SENTENCE_PATTERNS:
        for m in pattern.finditer(text):
            spans.append(ExtractedSpan(
                data_class=data_class,
                value=m.group(),
                start=m.start(),
                end=m.end(),
            ))
    return spans
