"""Resolve Census geocoder responses to Kansas senate districts.

The payload is the JSON body returned by the Census Bureau geocoder's
``geographies/address`` endpoint. Only the first address match is used.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..config import DEFAULT_SENATE_GEOGRAPHY
from ..exceptions import GeoPayloadError
from ..schema import GeoPoint, GeoResolution

logger = logging.getLogger(__name__)

NO_ADDRESS_MATCH = "No address match found in Census data"
NO_DISTRICT = "No Kansas legislative district found for this address"
PROCESSING_FAILED = "Failed to process Kansas district geographical data"


def _require_mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise GeoPayloadError(
            message=f"expected an object, got {type(value).__name__}",
            field_name=field_name,
        )
    return value


@dataclass(frozen=True)
class CensusLegislativeDistrict:
    """A state legislative district geography from the geocoder."""

    sldu: str
    geoid: str | None = None
    name: str | None = None
    state: str | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> CensusLegislativeDistrict:
        raw = _require_mapping(raw, "SLDU")
        sldu = raw.get("SLDU")
        if sldu is None:
            raise GeoPayloadError(message="district has no SLDU code", field_name="SLDU")
        return cls(
            sldu=str(sldu),
            geoid=raw.get("GEOID"),
            name=raw.get("NAME"),
            state=raw.get("STATE"),
        )

    @property
    def district_number(self) -> str:
        """SLDU as a plain integer string ("07" becomes "7")."""
        try:
            return str(int(self.sldu))
        except ValueError as e:
            raise GeoPayloadError(
                message=f"SLDU {self.sldu!r} is not numeric",
                field_name="SLDU",
            ) from e


@dataclass(frozen=True)
class CensusAddressMatch:
    """One entry of ``result.addressMatches``."""

    geographies: Mapping[str, Any]
    coordinates: GeoPoint | None = None
    matched_address: str | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> CensusAddressMatch:
        raw = _require_mapping(raw, "addressMatches[0]")
        geographies = _require_mapping(raw.get("geographies") or {}, "geographies")

        coordinates = None
        coords = raw.get("coordinates")
        if coords is not None:
            coords = _require_mapping(coords, "coordinates")
            # Census reports x as longitude and y as latitude
            coordinates = GeoPoint(lat=coords["y"], lng=coords["x"])

        return cls(
            geographies=geographies,
            coordinates=coordinates,
            matched_address=raw.get("matchedAddress"),
        )

    def first_geography(self, key: str) -> Any | None:
        entries = self.geographies.get(key)
        if not isinstance(entries, Sequence) or isinstance(entries, str) or not entries:
            return None
        return entries[0]

    def senate_district(self, key: str) -> CensusLegislativeDistrict | None:
        entry = self.first_geography(key)
        if entry is None:
            return None
        return CensusLegislativeDistrict.from_dict(entry)

    @property
    def state_code(self) -> str | None:
        state = self.first_geography("States")
        if not isinstance(state, Mapping):
            return None
        code = state.get("STUSAB")
        if code is not None and not isinstance(code, str):
            raise GeoPayloadError(
                message=f"expected a string, got {type(code).__name__}",
                field_name="STUSAB",
            )
        return code


def address_matches(census_data: Any) -> Sequence[Any]:
    """Return ``result.addressMatches`` from a geocoder response."""
    result = _require_mapping(_require_mapping(census_data, "censusData").get("result"), "result")
    matches = result.get("addressMatches")
    if matches is None:
        return []
    if not isinstance(matches, Sequence) or isinstance(matches, str):
        raise GeoPayloadError(message="expected a list", field_name="addressMatches")
    return matches


def resolve_district_from_geo(
    census_data: Any,
    geography_key: str = DEFAULT_SENATE_GEOGRAPHY,
) -> GeoResolution:
    """
    Extract the senate district and coordinates from a geocoder response.

    Never raises: a missing match, a missing district geography or a
    malformed payload all produce ``found=False`` with an error message.

    Args:
        census_data: Parsed geocoder JSON response.
        geography_key: Name of the upper-chamber district collection.

    Returns:
        GeoResolution for the first address match.
    """
    try:
        matches = address_matches(census_data)
        if not matches:
            return GeoResolution(found=False, error=NO_ADDRESS_MATCH)

        match = CensusAddressMatch.from_dict(matches[0])
        district = match.senate_district(geography_key)
        if district is None:
            return GeoResolution(found=False, error=NO_DISTRICT)

        return GeoResolution(
            found=True,
            district_number=district.district_number,
            coordinates=match.coordinates,
            state_code=match.state_code,
        )
    except (GeoPayloadError, KeyError, TypeError) as e:
        logger.error("Error processing Kansas district geo data: %s", e)
        return GeoResolution(found=False, error=PROCESSING_FAILED)
