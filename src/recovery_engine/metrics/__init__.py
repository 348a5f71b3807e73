"""Recovery, baseline and training load calculations."""

from .statistics import (
    linear_regression_slope,
    median,
    simple_moving_average,
    standard_deviation,
)
from .baselines import calculate_baseline, filter_finite, resolve_baseline
from .recovery import (
    calculate_recovery,
    determine_recovery_state,
    hrv_component,
    rhr_component,
    sleep_component,
)
from .sleep import (
    accumulate_sleep_sample,
    group_samples_into_nights,
    summarize_sleep,
)
from .load import (
    build_daily_tss_array,
    calculate_atl,
    calculate_ctl,
    calculate_ema,
    calculate_intensity_factor,
    calculate_training_load_metrics,
    calculate_tsb,
    calculate_tss,
)

__all__ = [
    # Statistics
    "median",
    "standard_deviation",
    "simple_moving_average",
    "linear_regression_slope",
    # Baselines
    "calculate_baseline",
    "filter_finite",
    "resolve_baseline",
    # Recovery score
    "calculate_recovery",
    "determine_recovery_state",
    "hrv_component",
    "rhr_component",
    "sleep_component",
    # Sleep aggregation
    "accumulate_sleep_sample",
    "group_samples_into_nights",
    "summarize_sleep",
    # Training load
    "build_daily_tss_array",
    "calculate_atl",
    "calculate_ctl",
    "calculate_ema",
    "calculate_intensity_factor",
    "calculate_training_load_metrics",
    "calculate_tsb",
    "calculate_tss",
]
