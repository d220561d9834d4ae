"""
inventory/constants.py

Mobility profile preset values used by the profile registry.
All preset numeric values must be referenced from this module.
"""

# ── Asset tracking preset ────────────────────────────────────
ASSET_TRACKING_SLOPE: float = -0.008  # dBm per millisecond
ASSET_TRACKING_THRESHOLD: float = 6.0  # dBm
ASSET_TRACKING_HOLDOFF_MILLIS: float = 500.0

# ── Retail garment preset ────────────────────────────────────
RETAIL_GARMENT_SLOPE: float = -0.0005  # dBm per millisecond
RETAIL_GARMENT_THRESHOLD: float = 6.0  # dBm
RETAIL_GARMENT_HOLDOFF_MILLIS: float = 60000.0

# ── Registry identifiers ─────────────────────────────────────
PROFILE_ID_DEFAULT: str = "default"
PROFILE_ID_ASSET_TRACKING: str = "asset_tracking"
PROFILE_ID_RETAIL_GARMENT: str = "retail_garment"

# ── Timestamp bounds (signed 64-bit milliseconds) ────────────
TIMESTAMP_MIN_MILLIS: int = -(2**63)
TIMESTAMP_MAX_MILLIS: int = 2**63 - 1
