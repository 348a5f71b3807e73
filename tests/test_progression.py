"""Tests for progressive overload targets."""

import pytest

from recovery_engine.models import (
    CompletedSet,
    ExerciseProgression,
    PreviousWeekPerformance,
    ProgressionReason,
)
from recovery_engine.services.progression import ProgressionService


@pytest.fixture
def service():
    return ProgressionService()


@pytest.fixture
def squat():
    return ExerciseProgression(
        exercise_id="squat",
        base_weight=80,
        base_reps=8,
        base_sets=4,
        min_reps=8,
        max_reps=12,
        weight_increment=5,
    )


def week(actual_weight, actual_reps, target_reps=8, failures=0, week_number=1):
    return PreviousWeekPerformance(
        exercise_id="squat",
        week_number=week_number,
        target_weight=actual_weight,
        target_reps=target_reps,
        actual_weight=actual_weight,
        actual_reps=actual_reps,
        hit_target=actual_reps >= target_reps,
        consecutive_failures=failures,
    )


class TestNextWeekTargets:
    """Decision table for next week's targets."""

    def test_first_week_uses_base(self, service, squat):
        result = service.calculate_next_week_targets(squat, None)
        assert (result.target_weight, result.target_reps, result.target_sets) == (80, 8, 4)
        assert result.reason == ProgressionReason.FIRST_WEEK
        assert result.is_deload is False

    def test_first_week_ignores_deload_flag(self, service, squat):
        result = service.calculate_next_week_targets(squat, None, is_deload_week=True)
        assert result.reason == ProgressionReason.FIRST_WEEK

    def test_hit_max_reps_adds_weight(self, service, squat):
        result = service.calculate_next_week_targets(squat, week(100, 12, target_reps=11))
        assert result.target_weight == 105
        assert result.target_reps == 8
        assert result.reason == ProgressionReason.HIT_MAX_REPS

    def test_hit_target_adds_rep(self, service, squat):
        result = service.calculate_next_week_targets(squat, week(100, 9, target_reps=9))
        assert result.target_weight == 100
        assert result.target_reps == 10
        assert result.reason == ProgressionReason.HIT_TARGET

    def test_missed_target_holds(self, service, squat):
        result = service.calculate_next_week_targets(squat, week(100, 9, target_reps=10))
        assert result.target_reps == 10
        assert result.reason == ProgressionReason.HOLD

    def test_single_failure_holds_at_min_reps(self, service, squat):
        result = service.calculate_next_week_targets(squat, week(100, 6, failures=1))
        assert result.target_weight == 100
        assert result.target_reps == 8
        assert result.reason == ProgressionReason.HOLD

    def test_two_failures_regress(self, service, squat):
        result = service.calculate_next_week_targets(squat, week(100, 6, failures=2))
        assert result.target_weight == 95
        assert result.target_reps == 8
        assert result.reason == ProgressionReason.REGRESS

    def test_regress_never_below_base_weight(self, service, squat):
        result = service.calculate_next_week_targets(squat, week(82.5, 5, failures=3))
        assert result.target_weight == 80

    def test_deload(self, service, squat):
        result = service.calculate_next_week_targets(squat, week(100, 10), is_deload_week=True)
        assert result.target_weight == 85.0
        assert result.target_reps == 8
        assert result.target_sets == 2
        assert result.is_deload is True
        assert result.reason == ProgressionReason.DELOAD

    def test_deload_rounds_half_up(self, service, squat):
        # 102.5 * 0.85 = 87.125 -> 87.5
        result = service.calculate_next_week_targets(squat, week(102.5, 10), is_deload_week=True)
        assert result.target_weight == pytest.approx(87.5)

    def test_deload_keeps_at_least_one_set(self, service):
        exercise = ExerciseProgression(exercise_id="curl", base_weight=10, base_reps=10, base_sets=1)
        result = service.calculate_next_week_targets(exercise, week(10, 10), is_deload_week=True)
        assert result.target_sets == 1


class TestConsecutiveFailures:
    """Counting failed weeks, newest first."""

    def test_counts_until_success(self, service):
        history = [week(100, 6), week(100, 7), week(100, 9), week(100, 5)]
        assert service.calculate_consecutive_failures(history, 100, 8) == 2

    def test_weight_change_resets(self, service):
        history = [week(100, 6), week(95, 6)]
        assert service.calculate_consecutive_failures(history, 100, 8) == 1

    def test_empty_history(self, service):
        assert service.calculate_consecutive_failures([], 100, 8) == 0


class TestBuildPreviousWeekPerformance:
    """Summarizing logged sets."""

    def test_no_sets(self, service):
        assert service.build_previous_week_performance("squat", 2, 100, 8, [], 8, []) is None

    def test_best_set_heaviest_then_most_reps(self, service):
        sets = [
            CompletedSet(actual_weight=95, actual_reps=12),
            CompletedSet(actual_weight=100, actual_reps=7),
            CompletedSet(actual_weight=100, actual_reps=9),
        ]
        perf = service.build_previous_week_performance("squat", 2, 100, 8, sets, 8, [])

        assert perf.actual_weight == 100
        assert perf.actual_reps == 9
        assert perf.hit_target is True
        assert perf.consecutive_failures == 0

    def test_failures_accumulate(self, service):
        sets = [CompletedSet(actual_weight=100, actual_reps=6)]
        history = [week(100, 7, week_number=1)]
        perf = service.build_previous_week_performance("squat", 2, 100, 8, sets, 8, history)

        assert perf.consecutive_failures == 2
        assert perf.hit_target is False

    def test_feeds_regression(self, service, squat):
        sets = [CompletedSet(actual_weight=100, actual_reps=6)]
        perf = service.build_previous_week_performance(
            "squat", 3, 100, 8, sets, 8, [week(100, 7, week_number=2)]
        )
        result = service.calculate_next_week_targets(squat, perf)
        assert result.reason == ProgressionReason.REGRESS
