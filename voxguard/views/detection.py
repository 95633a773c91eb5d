"""Pydantic schemas for the detector session."""

from typing import List, Optional

from pydantic import BaseModel, Field

from voxguard.domain.models import DetectionResult
from voxguard.projection import project_result
from voxguard.sessions import SessionState


class DetectionResultView(BaseModel):
    """Settled verdict as returned by the classifier service."""

    status: str = Field(..., description="Always 'success' for a settled result")
    language: str = Field(..., description="Language detected by the service")
    languageLabel: str = Field(..., description="Native-script display label")
    classification: str = Field(..., description="AI_GENERATED or HUMAN")
    confidenceScore: float = Field(..., ge=0.0, le=1.0)
    explanation: str = Field(..., description="Forensic rationale for the verdict")
    transcription: str = Field(..., description="Full transcript of the audio")


class ProjectionView(BaseModel):
    """Chart- and display-ready values derived from the confidence score."""

    slices: List[float] = Field(..., description="[confidence, remainder] in percent")
    band: str = Field(..., description="negative (AI) or positive (human) band")
    palette: List[str] = Field(..., description="Accent and track colors")
    verdictLabel: str
    percentOneDecimal: str
    percentInteger: str
    barWidth: str


class DetectorStateView(BaseModel):
    """Public shape of the detection session."""

    phase: str = Field(..., description="idle, file_selected, analyzing, result or error")
    attempt: int
    filename: Optional[str] = None
    result: Optional[DetectionResultView] = None
    projection: Optional[ProjectionView] = None
    error: Optional[str] = None

    @classmethod
    def from_state(cls, state: SessionState) -> "DetectorStateView":
        result_view = None
        projection_view = None
        result: DetectionResult | None = state.result
        if result is not None and result.is_success:
            result_view = DetectionResultView(
                status=result.status.value,
                language=result.language.value,
                languageLabel=result.language.label,
                classification=result.classification.value,
                confidenceScore=result.confidence_score,
                explanation=result.explanation,
                transcription=result.transcription,
            )
            projection = project_result(result)
            projection_view = ProjectionView(
                slices=list(projection.slices),
                band=projection.band.value,
                palette=list(projection.palette),
                verdictLabel=projection.verdict_label,
                percentOneDecimal=projection.percent_one_decimal,
                percentInteger=projection.percent_integer,
                barWidth=projection.bar_width,
            )

        return cls(
            phase=state.phase.value,
            attempt=state.attempt,
            filename=state.filename,
            result=result_view,
            projection=projection_view,
            error=state.error,
        )
