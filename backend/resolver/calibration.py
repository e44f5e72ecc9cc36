"""
Threshold calibration over labeled title pairs.

The acceptance and same-work thresholds are configuration, not derived
constants; this sweeps candidate thresholds over a labeled set so they can
be tuned.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .similarity import similarity

LabeledPair = Tuple[str, str, bool]

DEFAULT_THRESHOLDS = (0.5, 0.55, 0.6, 0.65, 0.7, 0.75, 0.8, 0.85, 0.9, 0.95)


@dataclass(slots=True)
class ThresholdReport:
    threshold: float
    true_positives: int
    false_positives: int
    false_negatives: int
    true_negatives: int

    @property
    def precision(self) -> float:
        predicted = self.true_positives + self.false_positives
        return self.true_positives / predicted if predicted else 0.0

    @property
    def recall(self) -> float:
        actual = self.true_positives + self.false_negatives
        return self.true_positives / actual if actual else 0.0

    @property
    def f1(self) -> float:
        total = self.precision + self.recall
        return 2 * self.precision * self.recall / total if total else 0.0

    def as_dict(self) -> dict[str, float | int]:
        return {
            "threshold": self.threshold,
            "true_positives": self.true_positives,
            "false_positives": self.false_positives,
            "false_negatives": self.false_negatives,
            "true_negatives": self.true_negatives,
            "precision": round(self.precision, 4),
            "recall": round(self.recall, 4),
            "f1": round(self.f1, 4),
        }


def sweep_thresholds(
    pairs: Iterable[LabeledPair],
    thresholds: Sequence[float] = DEFAULT_THRESHOLDS,
) -> List[ThresholdReport]:
    """Score every pair once and tally the confusion matrix per threshold."""

    scored = [(similarity(left, right), bool(label)) for left, right, label in pairs]
    reports: List[ThresholdReport] = []
    for threshold in thresholds:
        tp = fp = fn = tn = 0
        for score, label in scored:
            predicted = score >= threshold
            if predicted and label:
                tp += 1
            elif predicted:
                fp += 1
            elif label:
                fn += 1
            else:
                tn += 1
        reports.append(ThresholdReport(threshold, tp, fp, fn, tn))
    return reports


def best_threshold(reports: Sequence[ThresholdReport]) -> ThresholdReport | None:
    """Highest F1, lower threshold first on ties."""

    best: ThresholdReport | None = None
    for report in sorted(reports, key=lambda item: item.threshold):
        if best is None or report.f1 > best.f1:
            best = report
    return best
