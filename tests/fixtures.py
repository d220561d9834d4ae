"""
tests/fixtures.py

Shared test data and helper functions for constructing profiles and settings.
All tests must use these fixtures instead of hardcoding test values.
"""

from typing import Optional

from config import Settings
from inventory.schemas import ProfileOverrides


def build_settings(
    base_profile: str = "default",
    slope: Optional[float] = None,
    threshold: Optional[float] = None,
    holdoff_millis: Optional[float] = None,
) -> Settings:
    """Build a Settings instance that ignores the local .env file."""
    return Settings(
        _env_file=None,
        mobility_profile_base_profile=base_profile,
        mobility_profile_slope=slope,
        mobility_profile_threshold=threshold,
        mobility_profile_holdoff_millis=holdoff_millis,
    )


def build_overrides(
    slope: Optional[float] = None,
    threshold: Optional[float] = None,
    holdoff_millis: Optional[float] = None,
) -> ProfileOverrides:
    """Build ProfileOverrides marking only the given fields as overridden."""
    return ProfileOverrides.from_settings(
        build_settings(
            slope=slope,
            threshold=threshold,
            holdoff_millis=holdoff_millis,
        )
    )


# ── Test timestamps (milliseconds) ───────────────────────────

TEST_REFERENCE_TS: int = 1_560_000_000_000
TEST_RETAIL_REFERENCE_TS: int = 100_000
TEST_RETAIL_LAST_READ_TS: int = 0
TEST_UNKNOWN_PROFILE_ID: str = "nonexistent_profile"
