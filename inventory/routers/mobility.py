"""
inventory/routers/mobility.py

Mobility profile endpoints.
Exposes the active profile, the preset table, and weight computation.
"""

import structlog
from fastapi import APIRouter, Depends, Request

from inventory.schemas import MobilityProfile, WeightRequest, WeightResponse
from inventory.services.mobility_profile import ActiveProfileProvider, compute_weight

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/mobility-profile")


def get_profile_provider(request: Request) -> ActiveProfileProvider:
    """Return the provider created during application startup."""
    return request.app.state.profile_provider


@router.get("", response_model=MobilityProfile)
async def get_active_profile(
    provider: ActiveProfileProvider = Depends(get_profile_provider),
) -> MobilityProfile:
    """Return the currently active mobility profile."""
    return provider.get_active_profile()


@router.get("/presets", response_model=dict[str, MobilityProfile])
async def list_presets(
    provider: ActiveProfileProvider = Depends(get_profile_provider),
) -> dict[str, MobilityProfile]:
    """Return every preset known to the registry, before overrides."""
    return dict(provider.registry)


@router.post("/weight", response_model=WeightResponse)
async def post_weight(
    body: WeightRequest,
    provider: ActiveProfileProvider = Depends(get_profile_provider),
) -> WeightResponse:
    """
    Compute the weight of a read against the active profile.

    The caller compares weights across sensors; this endpoint only scores one read.
    """
    weight = compute_weight(
        provider.get_active_profile(),
        body.reference_timestamp,
        body.last_read,
        body.is_deep_scan,
    )
    logger.debug(
        "weight_computed",
        reference_timestamp=body.reference_timestamp,
        last_read=body.last_read,
        is_deep_scan=body.is_deep_scan,
        weight=weight,
    )
    return WeightResponse(weight=weight)
