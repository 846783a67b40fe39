"""Unit tests for heart-rate zone energy estimation."""

import pytest

from tdee_engine.domain.calculation.heart_rate_service import (
    HeartRateZoneService,
    average_heart_rate,
    calories_from_heart_rate,
    max_heart_rate,
    zone_calories,
)
from tdee_engine.domain.core.value_objects import HeartRateZone, Sex, ZoneActivity


class TestAverageHeartRate:
    """Test zone to heart-rate conversion."""

    def test_zone_3_age_30(self):
        """Test max HR 190 and zone 3 average 142.5."""
        assert max_heart_rate(30) == 190
        assert average_heart_rate(HeartRateZone.ZONE_3, 30) == 142.5

    def test_accepts_plain_int_zone(self):
        """Test plain integers are accepted as zones."""
        assert average_heart_rate(5, 20) == pytest.approx(190.0)

    def test_no_clamp_for_extreme_age(self):
        """Test max HR is not clamped outside the valid age range."""
        assert max_heart_rate(230) == -10

    def test_unknown_zone_rejected(self):
        """Test zone outside 1-5 raises ValueError."""
        with pytest.raises(ValueError):
            average_heart_rate(0, 30)


class TestCaloriesFromHeartRate:
    """Test sex-specific heart-rate regression."""

    def test_male(self):
        """Test male regression."""
        kcal = calories_from_heart_rate(Sex.MALE, 30, 82, 142.5, 45)

        # Expected: 45*(0.6309*142.5 + 0.1988*82 + 0.2017*30 - 55.0969)/4.184
        expected = 45 * (0.6309 * 142.5 + 0.1988 * 82 + 0.2017 * 30 - 55.0969) / 4.184
        assert kcal == pytest.approx(expected)
        assert kcal == pytest.approx(614.76, abs=0.01)

    def test_female(self):
        """Test female regression."""
        kcal = calories_from_heart_rate(Sex.FEMALE, 40, 60, 117, 30)

        # Expected: 30*(0.4472*117 - 0.1263*60 + 0.074*40 - 20.4022)/4.184
        assert kcal == pytest.approx(195.76, abs=0.01)

    def test_linear_in_duration(self):
        """Test doubling duration doubles energy."""
        single = calories_from_heart_rate(Sex.MALE, 30, 82, 150, 30)
        double = calories_from_heart_rate(Sex.MALE, 30, 82, 150, 60)

        assert double == pytest.approx(2 * single)

    def test_zero_duration(self):
        """Test zero minutes yields zero energy."""
        assert calories_from_heart_rate(Sex.FEMALE, 30, 60, 150, 0) == 0

    def test_negative_result_not_clamped(self):
        """Test very low heart rate gives a negative value, unchanged."""
        kcal = calories_from_heart_rate(Sex.FEMALE, 20, 100, 40, 10)

        # 10*(0.4472*40 - 0.1263*100 + 0.074*20 - 20.4022)/4.184
        assert kcal < 0
        assert kcal == pytest.approx(-32.66, abs=0.01)


class TestZoneCalories:
    """Test zone-based energy and HeartRateZoneService."""

    def test_zone_calories_uses_average_heart_rate(self):
        """Test zone energy equals heart-rate energy at zone average."""
        expected = calories_from_heart_rate(Sex.MALE, 30, 82, 142.5, 45)

        assert zone_calories(Sex.MALE, 30, 82, HeartRateZone.ZONE_3, 45) == expected

    def test_higher_zone_burns_more(self):
        """Test energy increases with zone."""
        values = [zone_calories(Sex.FEMALE, 35, 65, zone, 30) for zone in HeartRateZone]

        assert values == sorted(values)

    def test_extreme_profile_negative(self):
        """Test zone 1 for an old, heavy woman yields negative energy."""
        assert zone_calories(Sex.FEMALE, 100, 225, HeartRateZone.ZONE_1, 10) < 0

    def test_service(self, male_profile):
        """Test service delegates to zone_calories."""
        service = HeartRateZoneService()
        activity = ZoneActivity(zone=HeartRateZone.ZONE_3, duration_minutes=45)

        assert service.calculate(male_profile, activity) == zone_calories(
            Sex.MALE, 30, 82.0, HeartRateZone.ZONE_3, 45
        )
