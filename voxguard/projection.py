"""Pure projection of a detection verdict into chart- and display-ready values."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from voxguard.domain.models import Classification, DetectionResult, Language

TRACK_COLOR = "#1e293b"


class Band(str, Enum):
    """Semantic color band of the verdict."""

    NEGATIVE = "negative"
    POSITIVE = "positive"

    @property
    def palette(self) -> tuple[str, str]:
        accent = "#ef4444" if self is Band.NEGATIVE else "#22c55e"
        return accent, TRACK_COLOR


def _format_percent(percent: float, places: str) -> str:
    """Round halves away from zero on the exact float value, as browsers do."""

    return f"{Decimal(percent).quantize(Decimal(places), rounding=ROUND_HALF_UP)}%"


_VERDICT_LABELS = {
    Classification.AI_GENERATED: "Synthetic AI Voice",
    Classification.HUMAN: "Authentic Human Voice",
}


@dataclass(frozen=True)
class DetectionProjection:
    classification: Classification
    language: Language
    confidence: float
    slices: tuple[float, float]
    band: Band
    verdict_label: str
    percent_one_decimal: str
    percent_integer: str
    bar_width: str

    @property
    def palette(self) -> tuple[str, str]:
        return self.band.palette


def project_result(result: DetectionResult) -> DetectionProjection:
    """Derive every display value from the one stored confidence float."""

    if not result.is_success:
        raise ValueError("cannot project a failed detection result")

    confidence = max(0.0, min(1.0, result.confidence_score))
    percent = confidence * 100
    remainder = max(0.0, (1 - confidence) * 100)
    band = Band.NEGATIVE if result.classification is Classification.AI_GENERATED else Band.POSITIVE

    return DetectionProjection(
        classification=result.classification,
        language=result.language,
        confidence=confidence,
        slices=(round(percent, 1), round(remainder, 1)),
        band=band,
        verdict_label=_VERDICT_LABELS[result.classification],
        percent_one_decimal=_format_percent(percent, "0.1"),
        percent_integer=_format_percent(percent, "1"),
        bar_width=f"{percent:g}%",
    )


__all__ = ["Band", "DetectionProjection", "TRACK_COLOR", "project_result"]
