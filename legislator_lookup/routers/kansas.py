"""Kansas senate district API endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..context import ContextDep, ServiceContext
from ..kansas.districts import is_kansas_state
from ..kansas.geo import PROCESSING_FAILED, resolve_district_from_geo
from ..security import require_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/kansas", tags=["kansas"])


class CensusDataRequest(BaseModel):
    censusData: Any = None
    key: str | None = None


class AddressMatchRequest(BaseModel):
    addressMatch: Any = None
    key: str | None = None


def resolve_representative(ctx: ServiceContext, census_data: Any) -> dict:
    """Resolve a geocoder response to the district's representative."""
    try:
        resolution = resolve_district_from_geo(census_data, ctx.settings.senate_geography)
        if not resolution.found:
            status = 400 if resolution.error == PROCESSING_FAILED else 404
            raise HTTPException(status_code=status, detail=resolution.error)

        if resolution.state_code and not is_kansas_state(resolution.state_code):
            raise HTTPException(
                status_code=404,
                detail=f"Address is in {resolution.state_code}, not Kansas",
            )

        response = ctx.districts.format_response(resolution.district_number)
        if response is None:
            raise HTTPException(
                status_code=404,
                detail=f"No Kansas senator found for district {resolution.district_number}",
            )
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error resolving Kansas district")
        raise HTTPException(status_code=500, detail="Error resolving Kansas district") from None

    if resolution.coordinates is not None:
        response["coordinates"] = resolution.coordinates.to_dict()
    return response


@router.get("/representative/district/{district_number}")
async def get_district_representative(
    ctx: ContextDep,
    district_number: str,
    key: str | None = None,
) -> dict:
    """Get the senator and office for a district number."""
    require_key(key, ctx.settings)

    try:
        result = ctx.districts.lookup(district_number)
        response = ctx.districts.format_response(district_number) if result.found else None
    except Exception:
        logger.exception("Error looking up Kansas district %r", district_number)
        raise HTTPException(status_code=500, detail="Error finding Kansas district") from None

    if response is None:
        raise HTTPException(status_code=404, detail=result.error)
    return response


@router.post("/district/address")
async def get_district_from_address(ctx: ContextDep, body: CensusDataRequest) -> dict:
    """Resolve a full Census geocoder response to a district and senator."""
    require_key(body.key, ctx.settings)
    if not isinstance(body.censusData, dict):
        raise HTTPException(status_code=400, detail="censusData is required")
    return resolve_representative(ctx, body.censusData)


@router.post("/representative/coordinates")
async def get_representative_from_match(ctx: ContextDep, body: AddressMatchRequest) -> dict:
    """Resolve a single Census address match to a district and senator."""
    require_key(body.key, ctx.settings)
    if not isinstance(body.addressMatch, dict):
        raise HTTPException(status_code=400, detail="addressMatch is required")
    census_data = {"result": {"addressMatches": [body.addressMatch]}}
    return resolve_representative(ctx, census_data)
