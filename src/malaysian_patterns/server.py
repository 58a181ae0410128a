"""HTTP sidecar server for malaysian-patterns.

A small stdlib HTTP server on localhost so non-Python callers can use
the validators and the extractor without spawning a process per call.

Endpoints:
    GET  /health          — Health check
    GET  /patterns        — Pattern source, description and examples per class
    POST /validate        — {"class": "phone", "value": "012-3456789"}
    POST /extract         — {"text": "...", "html": false}
    POST /metrics         — {"annotations": {"name-1": true}, "class": "name"}
                            or {"patterns": true} to score the validators

All endpoints expect/return JSON.
"""

from __future__ import annotations
import json
import logging
import os
from http.server import HTTPServer, BaseHTTPRequestHandler
from typing import Any

from .config import create_extractor
from .dataset import generate_test_dataset
from .extractor import html_marker, render
from .metrics import compute_metrics, parse_annotations, pattern_annotations
from .patterns import describe, validate
from .types import DataClass

logger = logging.getLogger(__name__)

DEFAULT_PORT = int(os.environ.get("MALAYSIAN_PATTERNS_PORT", "18792"))

# Shared state
_extractor = None


def _build_extractor():
    return create_extractor({
        "overlap": os.environ.get("MALAYSIAN_PATTERNS_OVERLAP", "first"),
    })


def _get_extractor():
    global _extractor
    if _extractor is None:
        _extractor = _build_extractor()
    return _extractor


class PatternHandler(BaseHTTPRequestHandler):
    """HTTP request handler for the pattern sidecar."""

    def _read_json(self) -> dict[str, Any]:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length).decode("utf-8")
        return json.loads(body) if body else {}

    def _respond(self, status: int, data: Any) -> None:
        body = json.dumps(data, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        logger.debug("%s " + format, self.address_string(), *args)

    def do_GET(self) -> None:
        if self.path == "/health":
            self._respond(200, {"status": "ok"})
        elif self.path == "/patterns":
            self._respond(200, {dc.value: describe(dc) for dc in DataClass})
        else:
            self._respond(404, {"error": "not found"})

    def do_POST(self) -> None:
        try:
            body = self._read_json()

            if self.path == "/validate":
                data_class = DataClass.parse(body.get("class", ""))
                value = body.get("value", "")
                self._respond(200, {
                    "class": data_class.value,
                    "value": value,
                    "match": validate(data_class, value),
                })

            elif self.path == "/extract":
                result = _get_extractor().extract(body.get("text", ""))
                output = result.to_dict()
                if body.get("html"):
                    output["annotated_text"] = render(result.segments, html_marker)
                self._respond(200, output)

            elif self.path == "/metrics":
                cases = generate_test_dataset()
                if body.get("class"):
                    data_class = DataClass.parse(body["class"])
                    cases = [c for c in cases if c.data_class is data_class]
                if body.get("patterns"):
                    annotations = pattern_annotations(cases)
                else:
                    annotations = parse_annotations(body.get("annotations") or {})
                self._respond(200, compute_metrics(cases, annotations).to_dict())

            else:
                self._respond(404, {"error": "not found"})

        except (ValueError, TypeError, AttributeError) as e:
            self._respond(400, {"error": str(e)})
        except Exception as e:
            logger.exception("request to %s failed", self.path)
            self._respond(500, {"error": str(e)})


def make_server(host: str = "127.0.0.1", port: int = DEFAULT_PORT) -> HTTPServer:
    """Bind the sidecar.  Raises ValueError on a bad environment config."""
    global _extractor
    _extractor = _build_extractor()
    return HTTPServer((host, port), PatternHandler)


def serve(port: int = DEFAULT_PORT) -> None:
    """Start the pattern HTTP sidecar."""
    server = make_server(port=port)
    logger.info("malaysian-patterns sidecar listening on http://127.0.0.1:%d", server.server_port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("shutting down")
    finally:
        server.server_close()


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="malaysian-patterns HTTP sidecar")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper())
    serve(port=args.port)
