"""Training API routes: fitness-fatigue load and progressive overload targets."""

from fastapi import APIRouter, Depends

from ...config import Settings
from ...metrics.load import calculate_training_load_metrics
from ...models import ProgressionResult, TrainingLoadMetrics
from ...services.progression import ProgressionService
from ..deps import get_app_settings, get_progression_service
from ..schemas import ProgressionRequest, TrainingLoadRequest


router = APIRouter()


@router.post("/training-load/metrics", response_model=TrainingLoadMetrics)
def compute_training_load(
    request: TrainingLoadRequest,
    settings: Settings = Depends(get_app_settings),
) -> TrainingLoadMetrics:
    """ATL, CTL and TSB over the lookback window."""
    return calculate_training_load_metrics(
        request.activities,
        lookback_days=request.lookback_days or settings.training_load_lookback_days,
        today=request.today,
    )


@router.post("/progression/next-week", response_model=ProgressionResult)
def compute_next_week(
    request: ProgressionRequest,
    service: ProgressionService = Depends(get_progression_service),
) -> ProgressionResult:
    """Next week's weight, reps and sets for one exercise."""
    return service.calculate_next_week_targets(
        request.exercise,
        request.previous,
        is_deload_week=request.is_deload_week,
    )
