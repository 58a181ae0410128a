"""Accuracy metrics for human (or pattern) annotations of labelled cases.

A case's ``expected_match`` is the actual label; the annotation is the
prediction.  Unannotated cases are left out of every count, so partial
progress never distorts the ratios.
"""

from __future__ import annotations
from typing import Iterable, Mapping

from .patterns import validate
from .types import AccuracyMetrics, Annotation, DataClass, LabeledCase


def parse_annotations(data: object) -> dict[str, bool | None]:
    """Check a decoded JSON annotation map: object of id to true, false or null."""
    if not isinstance(data, dict):
        raise ValueError(
            f"annotations must be a JSON object, got {type(data).__name__}"
        )
    for case_id, verdict in data.items():
        if verdict is not None and not isinstance(verdict, bool):
            raise ValueError(
                f"annotation for {case_id!r} must be true, false or null, "
                f"got {verdict!r}"
            )
    return data


def _verdict(value: bool | Annotation | None) -> bool | None:
    if isinstance(value, Annotation):
        return value.match
    return value


def compute_metrics(
    cases: Iterable[LabeledCase],
    annotations: Mapping[str, bool | Annotation],
) -> AccuracyMetrics:
    """Confusion counts over the annotated subset of cases."""
    metrics = AccuracyMetrics()
    for case in cases:
        predicted = _verdict(annotations.get(case.id))
        if predicted is None:
            continue
        actual = case.expected_match
        if predicted and actual:
            metrics.true_positives += 1
        elif not predicted and not actual:
            metrics.true_negatives += 1
        elif predicted:
            metrics.false_positives += 1
        else:
            metrics.false_negatives += 1
    return metrics


def pattern_annotations(cases: Iterable[LabeledCase]) -> dict[str, bool]:
    """The validators' verdict on every case, shaped as an annotation map."""
    return {case.id: validate(case.data_class, case.value) for case in cases}


def metrics_by_class(
    cases: Iterable[LabeledCase],
    annotations: Mapping[str, bool | Annotation],
) -> dict[DataClass, AccuracyMetrics]:
    """One AccuracyMetrics per data class present in cases."""
    grouped: dict[DataClass, list[LabeledCase]] = {}
    for case in cases:
        grouped.setdefault(case.data_class, []).append(case)
    return {dc: compute_metrics(group, annotations) for dc, group in grouped.items()}
