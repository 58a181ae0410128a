"""CLI interface for malaysian-patterns.

Usage:
    # Whole-string validation (exit status 1 if any value fails)
    malaysian-patterns validate phone 012-3456789 "+60123456789"

    # Pattern source, description and examples
    malaysian-patterns describe email

    # Extract spans from text on stdin
    echo 'Call Ahmad bin Abdullah at 012-3456789' | malaysian-patterns extract

    # Labelled dataset as JSON
    malaysian-patterns dataset --class name

    # Score an annotation map (stdin: {"name-1": true, ...})
    malaysian-patterns score --class name < annotations.json

    # Score the validators themselves against the dataset
    malaysian-patterns score --patterns
"""

from __future__ import annotations
import argparse
import json
import logging
import sys

from .config import create_extractor, load_config, load_from_yaml
from .dataset import generate_test_dataset
from .extractor import html_marker, render
from .metrics import (
    compute_metrics, metrics_by_class, parse_annotations, pattern_annotations,
)
from .patterns import describe, validate
from .types import DataClass

logger = logging.getLogger(__name__)


def _data_class(value: str) -> DataClass:
    try:
        return DataClass.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _dump(data) -> None:
    json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


def _cases(args: argparse.Namespace):
    cases = generate_test_dataset()
    if args.data_class is not None:
        cases = [c for c in cases if c.data_class is args.data_class]
    return cases


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate each value as a whole string."""
    ok = True
    for value in args.values:
        matched = validate(args.data_class, value)
        ok = ok and matched
        sys.stdout.write(f"{'MATCH' if matched else 'NO MATCH'}\t{value}\n")
    return 0 if ok else 1


def cmd_describe(args: argparse.Namespace) -> int:
    _dump(describe(args.data_class))
    return 0


def cmd_extract(args: argparse.Namespace) -> int:
    """Extract spans from stdin text."""
    if args.config:
        cfg = load_from_yaml(args.config)
    else:
        cfg = load_config({})
    if args.overlap:
        cfg["overlap"] = args.overlap
    extractor = create_extractor(cfg)

    text = sys.stdin.read()
    if text.endswith("\n"):
        text = text[:-1]
    result = extractor.extract(text)

    output = result.to_dict()
    if args.html:
        output["annotated_text"] = render(result.segments, html_marker)
    _dump(output)
    return 0


def cmd_dataset(args: argparse.Namespace) -> int:
    _dump([
        {
            "id": c.id,
            "value": c.value,
            "class": c.data_class.value,
            "expected_match": c.expected_match,
            "category": c.category,
        }
        for c in _cases(args)
    ])
    return 0


def cmd_score(args: argparse.Namespace) -> int:
    """Score annotations from stdin, or the validators themselves."""
    cases = _cases(args)
    if args.patterns:
        annotations = pattern_annotations(cases)
    else:
        try:
            annotations = parse_annotations(json.loads(sys.stdin.read() or "{}"))
        except ValueError as e:
            sys.stderr.write(f"malaysian-patterns score: error: {e}\n")
            return 2

    output = {"overall": compute_metrics(cases, annotations).to_dict()}
    if args.by_class:
        output["by_class"] = {
            dc.value: m.to_dict()
            for dc, m in metrics_by_class(cases, annotations).items()
        }
    _dump(output)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="malaysian-patterns",
        description="Malaysian name, phone and email pattern matching",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("validate", help="Whole-string validation")
    p.add_argument("data_class", type=_data_class, help="name, phone or email")
    p.add_argument("values", nargs="+")
    p.set_defaults(func=cmd_validate)

    p = sub.add_parser("describe", help="Show a pattern and its examples")
    p.add_argument("data_class", type=_data_class)
    p.set_defaults(func=cmd_describe)

    p = sub.add_parser("extract", help="Extract spans from text (stdin)")
    p.add_argument("--config", default="", help="YAML config file")
    p.add_argument("--overlap", choices=["first", "longest"], default=None,
                   help="Overlap policy (overrides config)")
    p.add_argument("--html", action="store_true", help="Render annotated text as HTML")
    p.set_defaults(func=cmd_extract)

    p = sub.add_parser("dataset", help="Dump the labelled dataset (JSON)")
    p.add_argument("--class", dest="data_class", type=_data_class, default=None)
    p.set_defaults(func=cmd_dataset)

    p = sub.add_parser("score", help="Accuracy metrics for an annotation map")
    p.add_argument("--class", dest="data_class", type=_data_class, default=None)
    p.add_argument("--patterns", action="store_true",
                   help="Use the validators' verdicts instead of stdin")
    p.add_argument("--by-class", action="store_true", help="Add per-class metrics")
    p.set_defaults(func=cmd_score)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("running %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
