from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from featherweight.apps.api.schemas.harmonics import (
    ReportRequest,
    SynchronicityRequest,
    TextHistoryRequest,
    TextRequest,
)
from featherweight.core.harmonics.harmonic_pattern_engine import (
    analyze_sacred_numbers,
    compose_harmonic_report,
    detect_synchronicities,
)
from featherweight.core.harmonics.quantum_perception_engine import analyze_quantum_field, detect_energetic_state
from featherweight.libs.schemas.harmonics import (
    EnergeticState,
    HarmonicReport,
    NumberPattern,
    QuantumFieldAnalysis,
    SynchronicityPattern,
)
from featherweight.libs.schemas.settings import AppSettings, get_settings

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/harmonics", tags=["harmonics"])


def _enforce_history_limit(record_count: int, settings: AppSettings) -> None:
    if record_count > settings.max_history_records:
        LOGGER.warning(
            "history too large for analysis",
            extra={"record_count": record_count, "limit": settings.max_history_records},
        )
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"History exceeds {settings.max_history_records} records",
        )


# Plain ``def`` handlers: the scans are CPU-bound and run on the threadpool.


@router.post("/field", response_model=QuantumFieldAnalysis)
def quantum_field(payload: TextRequest):
    return analyze_quantum_field(payload.text)


@router.post("/energetic-state", response_model=EnergeticState)
def energetic_state(payload: TextHistoryRequest, settings: AppSettings = Depends(get_settings)):
    if payload.history is not None:
        _enforce_history_limit(payload.history.record_count(), settings)
    return detect_energetic_state(payload.text, payload.history)


@router.post("/sacred-numbers", response_model=List[NumberPattern])
def sacred_numbers(payload: TextHistoryRequest, settings: AppSettings = Depends(get_settings)):
    if payload.history is not None:
        _enforce_history_limit(payload.history.record_count(), settings)
    return analyze_sacred_numbers(payload.text, payload.history)


@router.post("/synchronicities", response_model=List[SynchronicityPattern])
def synchronicities(payload: SynchronicityRequest, settings: AppSettings = Depends(get_settings)):
    _enforce_history_limit(payload.record_count(), settings)
    return detect_synchronicities(payload.events, payload.conversations)


@router.post("/report", response_model=HarmonicReport)
def report(payload: ReportRequest, settings: AppSettings = Depends(get_settings)):
    _enforce_history_limit(payload.history.record_count(), settings)
    result = compose_harmonic_report(payload.history, payload.text)
    LOGGER.info(
        "harmonic report composed",
        extra={
            "user_id": result.user_id,
            "karmic_themes": len(result.karmic_themes),
            "temporal_patterns": len(result.temporal_patterns),
        },
    )
    return result


__all__ = ["router"]
