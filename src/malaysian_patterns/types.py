"""Core types."""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from enum import Enum


class DataClass(str, Enum):
    """The three recognised data categories."""
    NAME = "name"
    PHONE = "phone"
    EMAIL = "email"

    @classmethod
    def parse(cls, value: "str | DataClass") -> "DataClass":
        """Accept a DataClass or its value/name in any case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"unknown data class {value!r} (expected one of: "
                f"{', '.join(c.value for c in cls)})"
            ) from None


@dataclass(frozen=True, slots=True)
class PatternSpec:
    """Whole-string pattern plus the metadata shown alongside it."""
    data_class: DataClass
    matcher: re.Pattern
    description: str
    examples: tuple[str, ...] = ()

    @property
    def pattern_source(self) -> str:
        return self.matcher.pattern


@dataclass(frozen=True, slots=True)
class LabeledCase:
    """A test input with the outcome a human expects."""
    id: str
    value: str
    data_class: DataClass
    expected_match: bool
    category: str


@dataclass(slots=True)
class Annotation:
    """Human verdict on a LabeledCase.  match is None until a verdict is given."""
    match: bool | None = None
    comment: str = ""


@dataclass(slots=True)
class AccuracyMetrics:
    """Confusion counts over annotated cases, with derived ratios."""
    true_positives: int = 0
    true_negatives: int = 0
    false_positives: int = 0
    false_negatives: int = 0

    @property
    def total_cases(self) -> int:
        return (self.true_positives + self.true_negatives
                + self.false_positives + self.false_negatives)

    @property
    def correct_predictions(self) -> int:
        return self.true_positives + self.true_negatives

    @property
    def accuracy(self) -> float:
        total = self.total_cases
        return self.correct_predictions / total if total > 0 else 0.0

    @property
    def precision(self) -> float:
        denom = self.true_positives + self.false_positives
        return self.true_positives / denom if denom > 0 else 0.0

    @property
    def recall(self) -> float:
        denom = self.true_positives + self.false_negatives
        return self.true_positives / denom if denom > 0 else 0.0

    @property
    def f1_score(self) -> float:
        p, r = self.precision, self.recall
        return 2 * p * r / (p + r) if (p + r) > 0 else 0.0

    def to_dict(self) -> dict:
        return {
            "total_cases": self.total_cases,
            "correct_predictions": self.correct_predictions,
            "accuracy": self.accuracy,
            "true_positives": self.true_positives,
            "true_negatives": self.true_negatives,
            "false_positives": self.false_positives,
            "false_negatives": self.false_negatives,
            "precision": self.precision,
            "recall": self.recall,
            "f1_score": self.f1_score,
        }


@dataclass(frozen=True, slots=True)
class ExtractedSpan:
    """A substring of the source text tagged with its data class."""
    data_class: DataClass
    value: str
    start: int
    end: int               # exclusive

    def overlaps(self, other: ExtractedSpan) -> bool:
        return self.start < other.end and other.start < self.end

    def to_dict(self) -> dict:
        return {
            "class": self.data_class.value,
            "value": self.value,
            "start": self.start,
            "end": self.end,
        }


@dataclass(frozen=True, slots=True)
class Segment:
    """A piece of reconstructed text; highlighted when data_class is set."""
    text: str
    data_class: DataClass | None = None

    @property
    def highlighted(self) -> bool:
        return self.data_class is not None


@dataclass(slots=True)
class ExtractionResult:
    """Result of scanning one piece of text."""
    original_text: str
    spans: list[ExtractedSpan] = field(default_factory=list)
    segments: list[Segment] = field(default_factory=list)
    annotated_text: str = ""
    dropped: list[ExtractedSpan] = field(default_factory=list)   # lost to overlap

    def by_class(self, data_class: DataClass) -> list[ExtractedSpan]:
        return [s for s in self.spans if s.data_class is data_class]

    def to_dict(self) -> dict:
        return {
            "original_text": self.original_text,
            "spans": [s.to_dict() for s in self.spans],
            "annotated_text": self.annotated_text,
            "dropped": [s.to_dict() for s in self.dropped],
        }
