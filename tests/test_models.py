"""DetectionResult invariants and language parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from voxguard.domain.models import DetectionResult, DetectionStatus, Language
from voxguard.services import MalformedResponseError
from voxguard.services.response_contract import parse_detection

from .conftest import HINDI_AI_PAYLOAD


def test_success_result_requires_every_field():
    payload = {key: value for key, value in HINDI_AI_PAYLOAD.items() if key != "transcription"}

    with pytest.raises(ValidationError):
        DetectionResult.model_validate(payload)


def test_error_result_carries_no_data():
    with pytest.raises(ValidationError):
        DetectionResult(status=DetectionStatus.ERROR, confidence_score=0.5)

    failed = DetectionResult.failed()
    assert failed.is_success is False
    assert failed.language is None


def test_result_is_immutable():
    result = DetectionResult.model_validate(HINDI_AI_PAYLOAD)

    with pytest.raises(ValidationError):
        result.confidence_score = 0.1


def test_confidence_is_clamped():
    assert DetectionResult.model_validate({**HINDI_AI_PAYLOAD, "confidenceScore": -0.2}).confidence_score == 0.0


@pytest.mark.parametrize("raw", ["malayalam", "MALAYALAM", " Malayalam "])
def test_language_parse_ignores_case(raw):
    assert Language.parse(raw) is Language.MALAYALAM


def test_language_is_closed_set():
    with pytest.raises(ValueError):
        Language.parse("French")
    assert len(list(Language)) == 5


@pytest.mark.parametrize("confidence", [float("nan"), float("inf"), float("-inf"), True, False])
def test_confidence_must_be_a_finite_number(confidence):
    with pytest.raises(ValidationError):
        DetectionResult.model_validate({**HINDI_AI_PAYLOAD, "confidenceScore": confidence})


def test_parse_detection_rejects_incomplete_success_payload():
    payload = {key: value for key, value in HINDI_AI_PAYLOAD.items() if key != "language"}

    with pytest.raises(MalformedResponseError):
        parse_detection(payload)


def test_parse_detection_maps_error_status_to_failed_result():
    assert parse_detection({"status": "error"}) == DetectionResult.failed()
