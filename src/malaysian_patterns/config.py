"""YAML/dict config loader for malaysian-patterns.

Supports loading from a YAML file or a plain dict (for embedding in a
larger application config).

Example YAML:

    malaysian_patterns:
      enabled: true
      overlap: first            # "first" or "longest"
      skip_classes:
        - email
      allow_list:
        - Kuala Lumpur
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

from .extractor import Extractor, ExtractorConfig, annotate_spans, render
from .types import DataClass, ExtractionResult


class _NoopExtractor:
    """Pass-through extractor when extraction is disabled."""
    config = None

    def extract(self, text: str) -> ExtractionResult:
        segments = annotate_spans(text, [])
        return ExtractionResult(
            original_text=text,
            segments=segments,
            annotated_text=render(segments),
        )


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    # Support nested under "malaysian_patterns" key or flat
    if "malaysian_patterns" in data:
        data = data["malaysian_patterns"] or {}

    return {
        "enabled": data.get("enabled", True),
        "overlap": data.get("overlap", "first"),
        "skip_classes": {DataClass.parse(c) for c in data.get("skip_classes") or []},
        "allow_list": set(data.get("allow_list") or []),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    with open(Path(path).expanduser(), encoding="utf-8") as f:
        return load_config(yaml.safe_load(f))


def create_extractor(config: dict[str, Any] | None = None) -> Extractor | _NoopExtractor:
    """Create a configured extractor from a (raw or normalized) config dict."""
    cfg = load_config(config)

    if not cfg["enabled"]:
        return _NoopExtractor()

    return Extractor(ExtractorConfig(
        overlap=cfg["overlap"],
        skip_classes=cfg["skip_classes"],
        allow_list=cfg["allow_list"],
    ))
