#!/usr/bin/env python3
"""
Sweep title-similarity thresholds over a labeled set of title pairs.

Input is a JSON list of objects: {"a": "...", "b": "...", "same": true}.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
sys.path.append(str(ROOT_DIR))

from backend.resolver.calibration import DEFAULT_THRESHOLDS, best_threshold, sweep_thresholds  # noqa: E402


def load_pairs(path: Path) -> list[tuple[str, str, bool]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    pairs: list[tuple[str, str, bool]] = []
    for entry in data:
        if not isinstance(entry, dict):
            continue
        left = entry.get("a")
        right = entry.get("b")
        if not isinstance(left, str) or not isinstance(right, str):
            continue
        pairs.append((left, right, bool(entry.get("same"))))
    return pairs


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calibrate title match thresholds.")
    parser.add_argument("labels", type=Path, help="JSON file of labeled title pairs")
    parser.add_argument(
        "--threshold",
        type=float,
        action="append",
        dest="thresholds",
        help="Threshold to evaluate (repeatable, defaults to 0.50-0.95)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    pairs = load_pairs(args.labels)
    if not pairs:
        print(f"[calibrate] no usable pairs in {args.labels}", file=sys.stderr)
        sys.exit(1)

    reports = sweep_thresholds(pairs, args.thresholds or DEFAULT_THRESHOLDS)
    for report in reports:
        print(json.dumps(report.as_dict(), ensure_ascii=False))

    best = best_threshold(reports)
    if best is not None:
        print(f"[calibrate] best threshold {best.threshold:.2f} (f1={best.f1:.3f}) over {len(pairs)} pairs")


if __name__ == "__main__":
    main()
