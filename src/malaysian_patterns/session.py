"""AnnotationSession — owns the human verdicts for one QA run.

Design goals:
  - One Annotation per case, created or overwritten on input, never
    removed implicitly
  - Metrics are recomputed from a snapshot on every call
  - Verdict and comment are independent: a comment alone leaves the
    case unannotated for scoring
"""

from __future__ import annotations
from typing import Iterable

from .metrics import compute_metrics
from .types import AccuracyMetrics, Annotation, DataClass, LabeledCase


class AnnotationSession:
    """Annotation map scoped to a set of labelled cases."""

    __slots__ = ("_cases", "_annotations")

    def __init__(
        self,
        cases: Iterable[LabeledCase],
        data_class: DataClass | str | None = None,
    ) -> None:
        if data_class is not None:
            data_class = DataClass.parse(data_class)
            cases = (c for c in cases if c.data_class is data_class)
        self._cases: dict[str, LabeledCase] = {c.id: c for c in cases}
        self._annotations: dict[str, Annotation] = {}

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def _entry(self, case_id: str) -> Annotation:
        if case_id not in self._cases:
            raise KeyError(case_id)
        return self._annotations.setdefault(case_id, Annotation())

    def annotate(self, case_id: str, match: bool) -> None:
        """Record whether the human judged the case a match."""
        self._entry(case_id).match = bool(match)

    def comment(self, case_id: str, text: str) -> None:
        self._entry(case_id).comment = text

    def clear(self) -> None:
        self._annotations.clear()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def cases(self) -> list[LabeledCase]:
        return list(self._cases.values())

    def get(self, case_id: str) -> Annotation | None:
        return self._annotations.get(case_id)

    @property
    def annotations(self) -> dict[str, bool]:
        """Snapshot of id → verdict, for cases with a verdict."""
        return {
            cid: a.match for cid, a in self._annotations.items()
            if a.match is not None
        }

    @property
    def annotated_count(self) -> int:
        return len(self._annotations)

    @property
    def progress(self) -> float:
        """Percentage of cases with an annotation entry (0-100)."""
        if not self._cases:
            return 0.0
        return self.annotated_count / len(self._cases) * 100

    def metrics(self) -> AccuracyMetrics:
        return compute_metrics(self._cases.values(), self.annotations)

    def results(self) -> list[dict]:
        """One row per case: expected label next to the human verdict."""
        rows: list[dict] = []
        for case in self._cases.values():
            a = self._annotations.get(case.id)
            rows.append({
                "id": case.id,
                "value": case.value,
                "expected": case.expected_match,
                "annotated": a.match if a else None,
                "comment": a.comment if a else "",
                "category": case.category,
            })
        return rows
