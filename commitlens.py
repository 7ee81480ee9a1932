#!/usr/bin/env python3
"""
CommitLens — Pre-commit Secret Guard
Single entry point: git hook / command line scanner + HTTP check API.

Usage:
    python commitlens.py                  # scan staged changes (pre-commit hook)
    python commitlens.py --path ./src     # scan a directory tree
    python commitlens.py --serve          # HTTP API

Serves at http://localhost:3000 (or COMMITLENS_PORT / COMMITLENS_HOST env vars)
"""

import argparse
import base64
import binascii
import json
import logging
import os
import sys

__version__ = "1.0.0"

from flask import Flask, jsonify, request

from detector.additions import (
    Addition,
    AdditionError,
    additions_from_path,
    repository_root,
    staged_additions,
)
from detector.chain import DetectorChain
from detector.config import ConfigError, DetectorConfig
from detector.ignores import Ignores, load_ignores


def _log_level(value) -> str:
    """Upper-cased level name, or WARNING when value names no logging level."""
    name = (value or "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        return "WARNING"
    return name


logging.basicConfig(
    level=_log_level(os.environ.get("COMMITLENS_LOG_LEVEL")),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
_log = logging.getLogger("commitlens")

app = Flask(__name__)


# ─── Helpers ──────────────────────────────────────────────────────────────────

def _parse_additions(items) -> list:
    """
    Turn request items into Additions.
    Each item needs "path" and either "content" (text) or "data" (base64).
    Raises ValueError with a client-facing message.
    """
    if not isinstance(items, list) or not items:
        raise ValueError("additions must be a non-empty list.")
    additions = []
    for item in items:
        if not isinstance(item, dict):
            raise ValueError("each addition must be an object.")
        path = item.get("path")
        if not isinstance(path, str) or not path.strip():
            raise ValueError("each addition needs a path.")
        if isinstance(item.get("content"), str):
            data = item["content"].encode("utf-8")
        elif isinstance(item.get("data"), str):
            try:
                data = base64.b64decode(item["data"], validate=True)
            except (binascii.Error, ValueError):
                raise ValueError(f"data for {path} is not valid base64.")
        else:
            raise ValueError(f"addition {path} needs content or data.")
        additions.append(Addition(path, data))
    return additions


# ─── GET /api/status ──────────────────────────────────────────────────────────

@app.route("/api/status", methods=["GET"])
def status():
    config = app.config.get("DETECTOR_CONFIG") or DetectorConfig()
    return jsonify({
        "version": __version__,
        "minSecretLength": config.min_secret_length,
        "entropyThreshold": config.entropy_threshold,
        "aggressive": config.aggressive,
    })


# ─── POST /api/check ──────────────────────────────────────────────────────────

@app.route("/api/check", methods=["POST"])
def check():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "A JSON object body is required."}), 400

    try:
        additions = _parse_additions(data.get("additions"))
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    patterns = data.get("ignore", [])
    if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
        return jsonify({"error": "ignore must be a list of patterns."}), 400

    base = app.config.get("DETECTOR_CONFIG") or DetectorConfig()
    try:
        config = base.with_overrides(
            min_secret_length=data.get("minSecretLength"),
            entropy_threshold=data.get("entropyThreshold"),
            aggressive=data.get("aggressive"),
        )
    except ConfigError as e:
        return jsonify({"error": str(e)}), 400

    try:
        results = DetectorChain.default(config).test(additions, Ignores.from_patterns(patterns))
    except Exception:
        _log.exception("Unhandled error while checking %d additions", len(additions))
        return jsonify({"error": "Check failed due to an internal error."}), 500

    return jsonify(results.to_dict())


# ─── Command line ─────────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commitlens",
        description="Block commits that contain high-entropy secrets.",
    )
    parser.add_argument("--path", help="Scan this directory tree instead of staged git changes.")
    parser.add_argument("--aggressive", action="store_true", default=None,
                        help="Also apply credential patterns to words that pass the entropy check.")
    parser.add_argument("--min-length", type=int, default=None,
                        help="Minimum candidate length (exclusive).")
    parser.add_argument("--threshold", type=float, default=None,
                        help="Entropy threshold in bits per symbol (exclusive).")
    parser.add_argument("--json", action="store_true", help="Print results as JSON.")
    parser.add_argument("--serve", action="store_true", help="Run the HTTP API.")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = DetectorConfig.from_env().with_overrides(
            min_secret_length=args.min_length,
            entropy_threshold=args.threshold,
            aggressive=args.aggressive,
        )
    except ConfigError as e:
        print(f"commitlens: configuration error: {e}", file=sys.stderr)
        return 2

    if args.serve:
        host = os.environ.get("COMMITLENS_HOST", "127.0.0.1")
        port = int(os.environ.get("COMMITLENS_PORT", 3000))
        app.config["DETECTOR_CONFIG"] = config
        print(f"\n  CommitLens running at http://{host}:{port}\n")
        app.run(host=host, port=port, threaded=True, debug=False)
        return 0

    try:
        if args.path:
            root = args.path
            additions = additions_from_path(root)
        else:
            root = repository_root()
            additions = staged_additions(root)
    except AdditionError as e:
        print(f"commitlens: {e}", file=sys.stderr)
        return 2

    results = DetectorChain.default(config).test(additions, load_ignores(root))

    if args.json:
        print(json.dumps(results.to_dict(), indent=2))
    else:
        print(results.report())
    return 1 if results.has_failures() else 0


# ─── Entry point ──────────────────────────────────────────────────────────────

if __name__ == "__main__":
    sys.exit(main())
