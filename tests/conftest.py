"""Shared test fixtures for the TDEE engine."""

import pytest
import structlog

from tdee_engine.domain.core.value_objects import Profile, Sex


@pytest.fixture(autouse=True)
def clean_engine_env(monkeypatch):
    """Keep engine settings independent of the developer's environment."""
    for name in (
        "TDEE_DEFAULT_TEF_LEVEL",
        "TDEE_DEFAULT_CALIBRATION",
        "TDEE_STRICT_VALIDATION",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def male_profile() -> Profile:
    """Reference profile: male, 30 years, 178 cm, 82 kg."""
    return Profile(sex=Sex.MALE, age_years=30, height_cm=178.0, weight_kg=82.0)


@pytest.fixture
def female_profile() -> Profile:
    """Reference profile: female, 40 years, 165 cm, 60 kg."""
    return Profile(sex=Sex.FEMALE, age_years=40, height_cm=165.0, weight_kg=60.0)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by the code under test."""
    yield
    structlog.reset_defaults()
