"""
inventory/services/mobility_profile.py

Mobility profile registry, resolution, and weight calculation.
- resolve_profile: selects a base preset, applies overrides, and derives the intercept
- ActiveProfileProvider: resolves the active profile once and caches it
- compute_weight: time-decayed weight of a read against a resolved profile

Uses constants from inventory/constants.py; no magic numbers allowed.
"""

import threading
from types import MappingProxyType
from typing import Mapping, Optional

import structlog

from config import Settings
from inventory.constants import (
    ASSET_TRACKING_HOLDOFF_MILLIS,
    ASSET_TRACKING_SLOPE,
    ASSET_TRACKING_THRESHOLD,
    PROFILE_ID_ASSET_TRACKING,
    PROFILE_ID_DEFAULT,
    PROFILE_ID_RETAIL_GARMENT,
    RETAIL_GARMENT_HOLDOFF_MILLIS,
    RETAIL_GARMENT_SLOPE,
    RETAIL_GARMENT_THRESHOLD,
)
from inventory.schemas import MobilityProfile, ProfileOverrides

logger = structlog.get_logger(__name__)

ASSET_TRACKING = MobilityProfile(
    slope=ASSET_TRACKING_SLOPE,
    threshold=ASSET_TRACKING_THRESHOLD,
    holdoff_millis=ASSET_TRACKING_HOLDOFF_MILLIS,
)

RETAIL_GARMENT = MobilityProfile(
    slope=RETAIL_GARMENT_SLOPE,
    threshold=RETAIL_GARMENT_THRESHOLD,
    holdoff_millis=RETAIL_GARMENT_HOLDOFF_MILLIS,
)

PROFILE_REGISTRY: Mapping[str, MobilityProfile] = MappingProxyType(
    {
        PROFILE_ID_DEFAULT: ASSET_TRACKING,
        PROFILE_ID_ASSET_TRACKING: ASSET_TRACKING,
        PROFILE_ID_RETAIL_GARMENT: RETAIL_GARMENT,
    }
)


def resolve_profile(
    selected_id: str,
    overrides: ProfileOverrides,
    registry: Mapping[str, MobilityProfile] = PROFILE_REGISTRY,
) -> MobilityProfile:
    """
    Build a mobility profile from a registry preset and a set of overrides.

    An unknown identifier is not an error for the caller: it is logged and
    the default preset is used instead.
    """
    base = registry.get(selected_id)
    if base is None:
        logger.error(
            "mobility_profile_not_found",
            profile_id=selected_id,
            fallback=PROFILE_ID_DEFAULT,
        )
        base = registry[PROFILE_ID_DEFAULT]

    fields = {
        "slope": base.slope,
        "threshold": base.threshold,
        "holdoff_millis": base.holdoff_millis,
    }
    if overrides.slope_overridden:
        fields["slope"] = overrides.slope
    if overrides.threshold_overridden:
        fields["threshold"] = overrides.threshold
    if overrides.holdoff_millis_overridden:
        fields["holdoff_millis"] = overrides.holdoff_millis

    # A fresh instance derives its own intercept; the preset is left untouched
    return MobilityProfile(**fields)


def compute_weight(
    profile: MobilityProfile,
    reference_timestamp: int,
    last_read: int,
    is_deep_scan: bool,
) -> float:
    """
    Compute the weight applied to a read based on when it happened.

    Deep scan reads always weigh the threshold. Otherwise the weight follows
    y = mx + b over the elapsed milliseconds, capped at the threshold, so any
    read younger than the holdoff window weighs exactly the threshold.
    """
    return profile.compute_weight(reference_timestamp, last_read, is_deep_scan)


class ActiveProfileProvider:
    """
    Holds the process-wide active mobility profile.

    The profile is resolved from settings on first access and then reused for
    the provider's lifetime; later settings changes are not observed.
    """

    def __init__(
        self,
        settings: Settings,
        registry: Mapping[str, MobilityProfile] = PROFILE_REGISTRY,
    ):
        """
        Args:
            settings: Settings instance supplying the base profile and overrides.
            registry: Preset table to resolve the base profile from.
        """
        self.settings = settings
        self.registry = registry
        self._active: Optional[MobilityProfile] = None
        self._lock = threading.Lock()

    def get_active_profile(self) -> MobilityProfile:
        """Return the active profile, resolving it on first call."""
        if self._active is None:
            with self._lock:
                if self._active is None:
                    self._active = self._load()
        return self._active

    def _load(self) -> MobilityProfile:
        profile_id = self.settings.mobility_profile_base_profile
        profile = resolve_profile(
            profile_id,
            ProfileOverrides.from_settings(self.settings),
            self.registry,
        )
        logger.info(
            "mobility_profile_resolved",
            profile_id=profile_id,
            slope=profile.slope,
            threshold=profile.threshold,
            holdoff_millis=profile.holdoff_millis,
            y_intercept=profile.y_intercept,
        )
        return profile
