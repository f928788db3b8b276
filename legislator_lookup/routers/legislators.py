"""Congressional legislator API endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..context import ContextDep
from ..legislators import find_legislator_by_name, format_legislator, format_office_address
from ..security import require_key

logger = logging.getLogger(__name__)

router = APIRouter(tags=["legislators"])


class AddressesRequest(BaseModel):
    names: Any = None
    key: str | None = None


def not_found_message(name: str) -> str:
    return f"No legislator found with name: {name}"


@router.get("/legislator")
async def get_legislator(ctx: ContextDep, name: str | None = None, key: str | None = None) -> dict:
    """Get a single legislator by name."""
    require_key(key, ctx.settings)
    if not name:
        raise HTTPException(status_code=400, detail="Name parameter is required")

    try:
        legislator = find_legislator_by_name(ctx.legislators, name)
        response = format_legislator(legislator) if legislator is not None else None
    except Exception:
        logger.exception("Error finding legislator %r", name)
        raise HTTPException(status_code=500, detail="Error finding legislator") from None

    if response is None:
        raise HTTPException(status_code=404, detail=not_found_message(name))
    return response


@router.post("/legislators/addresses")
async def get_legislator_addresses(ctx: ContextDep, body: AddressesRequest) -> list[dict]:
    """Look up office addresses for a list of names, preserving input order."""
    require_key(body.key, ctx.settings)
    if not isinstance(body.names, list):
        raise HTTPException(status_code=400, detail="Names must be provided as an array")

    results: list[dict] = []
    for name in body.names:
        if not isinstance(name, str):
            results.append({"name": name, "error": "Name must be a string"})
            continue
        try:
            legislator = find_legislator_by_name(ctx.legislators, name)
        except Exception:
            logger.exception("Error finding legislator %r", name)
            results.append({"name": name, "error": "Error finding legislator"})
            continue

        if legislator is None:
            results.append({"name": name, "error": not_found_message(name)})
        else:
            results.append(format_office_address(legislator))
    return results
