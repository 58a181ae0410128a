"""malaysian-patterns — validate and extract Malaysian names, phones and emails."""

from .types import (
    DataClass, PatternSpec, LabeledCase, Annotation, AccuracyMetrics,
    ExtractedSpan, Segment, ExtractionResult,
)
from .patterns import validate, describe, get_spec, REGISTRY
from .extractor import (
    Extractor, ExtractorConfig, extract, annotate_spans, render,
    default_marker, html_marker,
)
from .metrics import compute_metrics, pattern_annotations, metrics_by_class, parse_annotations
from .dataset import generate_test_dataset, SAMPLE_SENTENCES
from .session import AnnotationSession
from .config import create_extractor, load_config, load_from_yaml

__all__ = [
    "DataClass", "PatternSpec", "LabeledCase", "Annotation", "AccuracyMetrics",
    "ExtractedSpan", "Segment", "ExtractionResult",
    "validate", "describe", "get_spec", "REGISTRY",
    "Extractor", "ExtractorConfig", "extract", "annotate_spans", "render",
    "default_marker", "html_marker",
    "compute_metrics", "pattern_annotations", "metrics_by_class", "parse_annotations",
    "generate_test_dataset", "SAMPLE_SENTENCES",
    "AnnotationSession",
    "create_extractor", "load_config", "load_from_yaml",
]
__version__ = "0.1.0"
