"""
Progressive overload targets for rep-range training.

Algorithm (e.g. an 8-12 rep range):
- Hit max reps: add weight, drop to min reps
- Hit target reps: add one rep (up to max reps)
- Missed target but reached min reps: hold
- Missed min reps for 2 consecutive weeks at the same weight: regress
- Deload week: 85% weight, half the sets, min reps
"""

from typing import List, Optional
import math

from ..models.training import (
    CompletedSet,
    ExerciseProgression,
    PreviousWeekPerformance,
    ProgressionReason,
    ProgressionResult,
)
from .base import BaseService


class ProgressionService(BaseService):
    """Calculates next week's targets from last week's actual performance."""

    DELOAD_WEIGHT_FACTOR = 0.85
    DELOAD_VOLUME_FACTOR = 0.5
    WEIGHT_ROUNDING_INCREMENT = 2.5
    CONSECUTIVE_FAILURE_THRESHOLD = 2

    def calculate_next_week_targets(
        self,
        exercise: ExerciseProgression,
        previous: Optional[PreviousWeekPerformance],
        is_deload_week: bool = False,
    ) -> ProgressionResult:
        """
        Calculate next week's targets.

        Args:
            exercise: Rep-range configuration
            previous: Last week's best set, None for the first week
            is_deload_week: Whether the upcoming week is a deload

        Returns:
            ProgressionResult with weight, reps, sets and the reason
        """
        if previous is None:
            return ProgressionResult(
                target_weight=exercise.base_weight,
                target_reps=exercise.base_reps,
                target_sets=exercise.base_sets,
                is_deload=False,
                reason=ProgressionReason.FIRST_WEEK,
            )

        if is_deload_week:
            return ProgressionResult(
                target_weight=self._round_to_nearest(
                    previous.actual_weight * self.DELOAD_WEIGHT_FACTOR,
                    self.WEIGHT_ROUNDING_INCREMENT,
                ),
                target_reps=exercise.min_reps,
                target_sets=max(1, math.ceil(exercise.base_sets * self.DELOAD_VOLUME_FACTOR)),
                is_deload=True,
                reason=ProgressionReason.DELOAD,
            )

        def result(weight: float, reps: int, reason: ProgressionReason) -> ProgressionResult:
            return ProgressionResult(
                target_weight=weight,
                target_reps=reps,
                target_sets=exercise.base_sets,
                is_deload=False,
                reason=reason,
            )

        if (
            previous.actual_reps < exercise.min_reps
            and previous.consecutive_failures >= self.CONSECUTIVE_FAILURE_THRESHOLD
        ):
            regressed = max(exercise.base_weight, previous.actual_weight - exercise.weight_increment)
            self.logger.debug(
                f"{exercise.exercise_id}: regressing to {regressed} after "
                f"{previous.consecutive_failures} failed weeks"
            )
            return result(regressed, exercise.min_reps, ProgressionReason.REGRESS)

        if previous.actual_reps >= exercise.max_reps:
            return result(
                previous.actual_weight + exercise.weight_increment,
                exercise.min_reps,
                ProgressionReason.HIT_MAX_REPS,
            )

        if previous.actual_reps >= previous.target_reps:
            return result(
                previous.actual_weight,
                min(previous.target_reps + 1, exercise.max_reps),
                ProgressionReason.HIT_TARGET,
            )

        if previous.actual_reps >= exercise.min_reps:
            return result(previous.actual_weight, previous.target_reps, ProgressionReason.HOLD)

        # Below min reps but not enough failures to regress yet
        return result(previous.actual_weight, exercise.min_reps, ProgressionReason.HOLD)

    def calculate_consecutive_failures(
        self,
        history: List[PreviousWeekPerformance],
        current_weight: float,
        min_reps: int,
    ) -> int:
        """Count consecutive weeks (newest first) below min reps at the same weight."""
        failures = 0
        for perf in history:
            if perf.actual_weight != current_weight:
                break
            if perf.actual_reps < min_reps:
                failures += 1
            else:
                break
        return failures

    def build_previous_week_performance(
        self,
        exercise_id: str,
        week_number: int,
        target_weight: float,
        target_reps: int,
        completed_sets: List[CompletedSet],
        min_reps: int,
        history: List[PreviousWeekPerformance],
    ) -> Optional[PreviousWeekPerformance]:
        """
        Summarize a week's sets into its best performance.

        The best set is the heaviest one, ties broken by reps. Returns None
        when no sets were completed.
        """
        if not completed_sets:
            return None

        best = completed_sets[0]
        for s in completed_sets:
            if s.actual_weight > best.actual_weight or (
                s.actual_weight == best.actual_weight and s.actual_reps > best.actual_reps
            ):
                best = s

        prior_failures = self.calculate_consecutive_failures(history, best.actual_weight, min_reps)
        total_failures = prior_failures + 1 if best.actual_reps < min_reps else 0

        return PreviousWeekPerformance(
            exercise_id=exercise_id,
            week_number=week_number,
            target_weight=target_weight,
            target_reps=target_reps,
            actual_weight=best.actual_weight,
            actual_reps=best.actual_reps,
            hit_target=best.actual_reps >= target_reps,
            consecutive_failures=total_failures,
        )

    @staticmethod
    def _round_to_nearest(value: float, increment: float) -> float:
        # Half rounds up (Python's round() would round half to even)
        return math.floor(value / increment + 0.5) * increment
