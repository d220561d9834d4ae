"""
inventory/schemas.py

Pydantic data models for the inventory layer.
- MobilityProfile: parameters of the weighted slope formula used to locate tags
- ProfileOverrides: per-field overrides applied on top of a base profile
- WeightRequest / WeightResponse: request and response bodies of the weight endpoint
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from config import Settings
from inventory.constants import TIMESTAMP_MAX_MILLIS, TIMESTAMP_MIN_MILLIS


class MobilityProfile(BaseModel):
    """
    Parameters of the weighted slope formula used in calculating a tag's location.

    Tag location is determined from the quality of reads associated with a
    sensor averaged over time. For a tag to move from one location to another,
    the other location must have either a better signal or a more recent read.
    Serialized with the short keys used on the wire: m, t, a, b.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # dBm per millisecond, weight applied to older RSSI values
    slope: float = Field(alias="m")
    # dBm, must be exceeded for the tag to move from the previous sensor
    threshold: float = Field(alias="t")
    # milliseconds during which the weight is just the threshold
    holdoff_millis: float = Field(alias="a")

    @computed_field(alias="b")  # type: ignore[prop-decorator]
    @property
    def y_intercept(self) -> float:
        """b = y - (m * x), with the line passing through (holdoff_millis, threshold)."""
        return self.threshold - (self.slope * self.holdoff_millis)

    def compute_weight(
        self,
        reference_timestamp: int,
        last_read: int,
        is_deep_scan: bool,
    ) -> float:
        """Weight of a read at ``last_read`` relative to ``reference_timestamp``."""
        if is_deep_scan:
            return self.threshold

        # y = mx + b
        weight = (self.slope * (reference_timestamp - last_read)) + self.y_intercept

        # Cap at the threshold ceiling
        if weight > self.threshold:
            weight = self.threshold

        return weight


class ProfileOverrides(BaseModel):
    """Optional replacements for the fields of a base mobility profile."""

    slope_overridden: bool = False
    slope: float = 0.0
    threshold_overridden: bool = False
    threshold: float = 0.0
    holdoff_millis_overridden: bool = False
    holdoff_millis: float = 0.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProfileOverrides":
        """Build overrides from Settings; a field is overridden when it is set."""
        overrides: dict[str, Any] = {}
        for name in ("slope", "threshold", "holdoff_millis"):
            value = getattr(settings, f"mobility_profile_{name}")
            if value is not None:
                overrides[name] = value
                overrides[f"{name}_overridden"] = True
        return cls(**overrides)


class WeightRequest(BaseModel):
    """Request body for POST /mobility-profile/weight."""

    # milliseconds, signed 64-bit range
    reference_timestamp: int = Field(ge=TIMESTAMP_MIN_MILLIS, le=TIMESTAMP_MAX_MILLIS)
    last_read: int = Field(ge=TIMESTAMP_MIN_MILLIS, le=TIMESTAMP_MAX_MILLIS)
    is_deep_scan: bool = False


class WeightResponse(BaseModel):
    """Response body for POST /mobility-profile/weight."""

    weight: float
