"""Unit tests for resistance training energy."""

import pytest

from tdee_engine.domain.calculation.lifting_service import LiftingService, lifting_calories
from tdee_engine.domain.core.value_objects import LiftingIntensity, LiftingSession


class TestLiftingCalories:
    """Test MET-based lifting energy with recovery overhead."""

    @pytest.mark.parametrize(
        "intensity,met",
        [(LiftingIntensity.MODERATE, 3.5), (LiftingIntensity.VIGOROUS, 6.0)],
    )
    @pytest.mark.parametrize("weight,minutes", [(82, 60), (60, 45), (110, 90)])
    def test_recovery_overhead_is_ten_percent(self, intensity, met, weight, minutes):
        """Test total is exactly 1.10 x MET x weight x hours."""
        expected = 1.10 * (met * weight * (minutes / 60))

        assert lifting_calories(weight, intensity, minutes) == pytest.approx(expected)

    def test_vigorous_hour(self):
        """Test 80 kg vigorous for 60 minutes."""
        # Expected: 6.0 * 80 * 1 * 1.10 = 528
        assert lifting_calories(80, LiftingIntensity.VIGOROUS, 60) == pytest.approx(528.0)

    def test_zero_duration(self):
        """Test zero minutes yields zero energy."""
        assert lifting_calories(80, LiftingIntensity.MODERATE, 0) == 0

    def test_accepts_plain_string_intensity(self):
        """Test caller strings are accepted for intensity."""
        assert lifting_calories(80, "moderate", 60) == pytest.approx(308.0)


class TestLiftingService:
    """Test LiftingService port implementation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = LiftingService()

    def test_no_session_logged(self, male_profile):
        """Test default session contributes nothing."""
        assert self.service.calculate(male_profile, LiftingSession()) == 0.0

    def test_logged_session(self, male_profile):
        """Test logged session uses profile weight."""
        session = LiftingSession(LiftingIntensity.MODERATE, 60)

        # Expected: 3.5 * 82 * 1 * 1.10 = 315.7
        assert self.service.calculate(male_profile, session) == pytest.approx(315.7)
