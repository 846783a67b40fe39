"""Unit tests for BMR formulas and BMRService."""

import pytest

from tdee_engine.domain.calculation.bmr_service import (
    BMRService,
    KatchMcArdle,
    MifflinStJeor,
    calculate_bmr,
    select_bmr_formula,
)
from tdee_engine.domain.core.value_objects import Profile, Sex


class TestMifflinStJeor:
    """Test Mifflin-St Jeor equation."""

    def test_male(self):
        """Test reference male scenario."""
        formula = MifflinStJeor(sex=Sex.MALE, age_years=30, height_cm=178, weight_kg=82)

        # Expected: 10*82 + 6.25*178 - 5*30 + 5 = 820 + 1112.5 - 150 + 5
        assert formula.estimate() == 1787.5

    def test_female(self):
        """Test female offset of -161."""
        formula = MifflinStJeor(sex=Sex.FEMALE, age_years=25, height_cm=165, weight_kg=60)

        # Expected: 10*60 + 6.25*165 - 5*25 - 161 = 1345.25
        assert formula.estimate() == 1345.25

    def test_sex_difference(self):
        """Test male and female differ by 166 kcal."""
        male = MifflinStJeor(Sex.MALE, 30, 170, 70).estimate()
        female = MifflinStJeor(Sex.FEMALE, 30, 170, 70).estimate()

        assert male - female == 166.0


class TestKatchMcArdle:
    """Test Katch-McArdle formula."""

    def test_from_body_fat(self):
        """Test lean mass derived from body fat."""
        formula = KatchMcArdle.from_body_fat(weight_kg=80, body_fat_percent=20)

        assert formula.lean_mass_kg == pytest.approx(64.0)
        # Expected: 370 + 21.6*64 = 1752.4
        assert formula.estimate() == pytest.approx(1752.4)

    def test_ignores_sex(self):
        """Test Katch-McArdle depends only on lean mass."""
        male = calculate_bmr(Sex.MALE, 30, 180, 80, body_fat_percent=15)
        female = calculate_bmr(Sex.FEMALE, 60, 160, 80, body_fat_percent=15)

        assert male == female


class TestFormulaSelection:
    """Test the BMR formula selection policy."""

    def test_positive_body_fat_selects_katch_mcardle(self):
        """Test body fat > 0 selects Katch-McArdle."""
        formula = select_bmr_formula(Sex.MALE, 30, 178, 80, body_fat_percent=20)

        assert isinstance(formula, KatchMcArdle)

    @pytest.mark.parametrize("body_fat", [None, 0, 0.0, -5])
    def test_missing_or_zero_body_fat_selects_mifflin(self, body_fat):
        """Test missing, zero or negative body fat selects Mifflin-St Jeor."""
        formula = select_bmr_formula(Sex.MALE, 30, 178, 82, body_fat_percent=body_fat)

        assert isinstance(formula, MifflinStJeor)
        assert formula.estimate() == 1787.5

    def test_calculate_bmr_scenarios(self):
        """Test reference scenarios through calculate_bmr."""
        assert calculate_bmr(Sex.MALE, 30, 178, 82) == 1787.5
        assert calculate_bmr(Sex.MALE, 30, 178, 80, 20) == pytest.approx(1752.4)

    def test_accepts_plain_string_sex(self):
        """Test caller strings are accepted for sex."""
        assert calculate_bmr("female", 25, 165, 60) == 1345.25

    @pytest.mark.parametrize("body_fat", [None, 25.0])
    def test_monotonic_in_weight(self, body_fat):
        """Test BMR increases with weight, all else fixed."""
        values = [
            calculate_bmr(Sex.FEMALE, 40, 165, weight, body_fat)
            for weight in (40, 55, 70, 85, 100, 150, 220)
        ]

        assert values == sorted(values)
        assert len(set(values)) == len(values)


class TestBMRService:
    """Test BMRService port implementation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = BMRService()

    def test_calculate_without_body_fat(self, male_profile):
        """Test service uses Mifflin-St Jeor without body fat."""
        bmr = self.service.calculate(male_profile)

        assert bmr.value == 1787.5
        assert bmr.formula == "mifflin_st_jeor"

    def test_calculate_with_body_fat(self):
        """Test service uses Katch-McArdle with body fat."""
        profile = Profile(
            sex=Sex.MALE, age_years=30, height_cm=178, weight_kg=80, body_fat_percent=20
        )

        bmr = self.service.calculate(profile)

        assert bmr.value == pytest.approx(1752.4)
        assert bmr.formula == "katch_mcardle"

    def test_out_of_range_input_still_computes(self):
        """Test no error is raised for non-physiological input."""
        profile = Profile(sex=Sex.FEMALE, age_years=500, height_cm=10, weight_kg=1)

        bmr = self.service.calculate(profile)

        # 10*1 + 6.25*10 - 5*500 - 161 = -2588.5
        assert bmr.value == -2588.5
