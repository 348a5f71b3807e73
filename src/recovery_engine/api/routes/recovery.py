"""Recovery API routes: baselines and daily readiness scores."""

import logging

from fastapi import APIRouter, Depends

from ...config import Settings
from ...metrics.baselines import filter_finite, resolve_baseline
from ...models import RecoveryData
from ...services.baseline_service import score_day
from ..deps import get_app_settings
from ..schemas import BaselineRequest, BaselineResponse, RecoveryScoreRequest


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/baseline", response_model=BaselineResponse)
def compute_baseline(
    request: BaselineRequest,
    settings: Settings = Depends(get_app_settings),
) -> BaselineResponse:
    """Resolve a baseline from the readings in the lookback window."""
    hrv = filter_finite(request.hrv)
    rhr = filter_finite(request.rhr)
    min_readings = (
        request.min_readings
        if request.min_readings is not None
        else settings.baseline_min_readings
    )
    used_default = len(hrv) < min_readings or len(rhr) < min_readings

    return BaselineResponse(
        baseline=resolve_baseline(hrv, rhr, min_readings=min_readings),
        used_default=used_default,
        hrv_count=len(hrv),
        rhr_count=len(rhr),
    )


@router.post("/score", response_model=RecoveryData)
def compute_score(
    request: RecoveryScoreRequest,
    settings: Settings = Depends(get_app_settings),
) -> RecoveryData:
    """Score one day. Uses the explicit baseline if given, else resolves one from history."""
    baseline = request.baseline
    if baseline is None:
        baseline = resolve_baseline(
            filter_finite(request.hrv_history),
            filter_finite(request.rhr_history),
            min_readings=settings.baseline_min_readings,
        )

    recovery = score_day(
        request.date,
        request.hrv_ms,
        request.rhr_bpm,
        request.sleep,
        baseline,
    )
    logger.info(f"Recovery for {request.date.date()}: {recovery.score} ({recovery.state.value})")
    return recovery
