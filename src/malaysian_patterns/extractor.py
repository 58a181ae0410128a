"""Extractor — the sentence-scanning API.

Usage:
    from malaysian_patterns import extract

    result = extract("Call Ahmad bin Abdullah at 012-3456789")
    [s.value for s in result.spans]   # ["Ahmad bin Abdullah", "012-3456789"]
    result.annotated_text             # "Call «NAME:Ahmad bin Abdullah» at «PHONE:012-3456789»"

Spans from different detectors can overlap.  They are resolved before
the text is rebuilt, so every segment is a slice of the original text
and joining the segments gives the original text back.
"""

from __future__ import annotations
import html
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from .patterns import scan_sentence
from .types import DataClass, ExtractedSpan, ExtractionResult, Segment

logger = logging.getLogger(__name__)

OVERLAP_POLICIES = ("first", "longest")

Marker = Callable[[Segment], str]


def default_marker(segment: Segment) -> str:
    """«CLASS:value» for highlighted segments, plain text otherwise."""
    if segment.data_class is None:
        return segment.text
    return f"«{segment.data_class.name}:{segment.text}»"


def html_marker(segment: Segment) -> str:
    """Escaped HTML, highlighted segments wrapped in <mark class="...">."""
    text = html.escape(segment.text)
    if segment.data_class is None:
        return text
    return f'<mark class="{segment.data_class.value}">{text}</mark>'


@dataclass
class ExtractorConfig:
    """Configuration for the Extractor."""
    overlap: str = "first"            # "first" | "longest"
    # Data classes never reported
    skip_classes: set[DataClass] = field(default_factory=set)
    # Values that are never reported, even when a detector matches
    allow_list: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        if self.overlap not in OVERLAP_POLICIES:
            raise ValueError(
                f"unknown overlap policy {self.overlap!r} "
                f"(expected one of: {', '.join(OVERLAP_POLICIES)})"
            )
        self.skip_classes = {DataClass.parse(c) for c in self.skip_classes}


class Extractor:
    """Finds names, phones and emails in free text.

    Stateless apart from its config: safe to share between threads.
    """

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self.config = config or ExtractorConfig()

    def extract(self, text: str) -> ExtractionResult:
        """Scan text and rebuild it with the found spans marked."""
        candidates = [
            s for s in scan_sentence(text)
            if s.data_class not in self.config.skip_classes
            and s.value not in self.config.allow_list
        ]

        # Stable: equal starts keep scan order (name, phone, email)
        candidates.sort(key=lambda s: s.start)

        if self.config.overlap == "longest":
            spans, dropped = _resolve_longest(candidates)
        else:
            spans, dropped = _resolve_first(candidates)

        if dropped:
            logger.debug(
                "dropped %d overlapping span(s): %s",
                len(dropped), [(s.data_class.value, s.start, s.end) for s in dropped],
            )
        logger.debug("extracted %d span(s) from %d chars", len(spans), len(text))

        segments = annotate_spans(text, spans)
        return ExtractionResult(
            original_text=text,
            spans=spans,
            segments=segments,
            annotated_text=render(segments),
            dropped=dropped,
        )


def _resolve_first(
    spans: list[ExtractedSpan],
) -> tuple[list[ExtractedSpan], list[ExtractedSpan]]:
    """Keep a span unless it starts inside the last kept one."""
    kept: list[ExtractedSpan] = []
    dropped: list[ExtractedSpan] = []
    for s in spans:
        if kept and s.start < kept[-1].end:
            dropped.append(s)
        else:
            kept.append(s)
    return kept, dropped


def _resolve_longest(
    spans: list[ExtractedSpan],
) -> tuple[list[ExtractedSpan], list[ExtractedSpan]]:
    """Keep longer spans first; ties go to the earlier start, then scan order."""
    ranked = sorted(enumerate(spans), key=lambda p: (-(p[1].end - p[1].start), p[1].start, p[0]))
    taken: list[tuple[int, ExtractedSpan]] = []
    dropped: list[tuple[int, ExtractedSpan]] = []
    for idx, s in ranked:
        if any(s.overlaps(t) for _, t in taken):
            dropped.append((idx, s))
        else:
            taken.append((idx, s))
    return [s for _, s in sorted(taken)], [s for _, s in sorted(dropped)]


def annotate_spans(text: str, spans: Iterable[ExtractedSpan]) -> list[Segment]:
    """Split text into plain and highlighted segments.

    spans must be sorted by start and must not overlap.
    """
    segments: list[Segment] = []
    last = 0
    for s in spans:
        if s.start > last:
            segments.append(Segment(text[last:s.start]))
        segments.append(Segment(text[s.start:s.end], s.data_class))
        last = s.end
    if last < len(text):
        segments.append(Segment(text[last:]))
    return segments


def render(segments: Iterable[Segment], marker: Marker = default_marker) -> str:
    """Join segments into one string, marking highlighted ones."""
    return "".join(marker(seg) for seg in segments)


_default_extractor = Extractor()


def extract(text: str) -> ExtractionResult:
    """Extract with the default configuration."""
    return _default_extractor.extract(text)
