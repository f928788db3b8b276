"""Kansas senate district registry and display formatting."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from ..schema import DistrictRecord, KansasLookupResult, LegislatorContact

KANSAS_STATE_CODE = "KS"
KANSAS_STATE_NAME = "Kansas"


def is_kansas_state(state_code: str) -> bool:
    """Check a two-letter state code against Kansas, ignoring case."""
    return state_code.upper() == KANSAS_STATE_CODE


def ordinal_suffix(number: str) -> str:
    """
    English ordinal suffix for a district number.

    Values 4 through 20 always take "th"; otherwise the last digit decides.

    Examples:
        >>> ordinal_suffix("1")
        'st'
        >>> ordinal_suffix("11")
        'th'
        >>> ordinal_suffix("22")
        'nd'
    """
    # Roster keys are plain digits; anything else gets "th" rather than a parsed prefix
    try:
        n = int(number)
    except ValueError:
        return "th"

    if 3 < n < 21:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


class DistrictRegistry:
    """
    Read-only registry of senate districts keyed by district number.

    District numbers are opaque strings: "07" and "7" are different keys.
    """

    def __init__(
        self,
        districts: Mapping[str, DistrictRecord],
        contacts: Mapping[str, LegislatorContact] | None = None,
    ) -> None:
        self._districts = MappingProxyType(dict(districts))
        self._contacts = MappingProxyType(dict(contacts or {}))

    @classmethod
    def from_contacts(cls, contacts: Mapping[str, LegislatorContact]) -> DistrictRegistry:
        """Build the registry from the district roster."""
        districts = {
            number: DistrictRecord.from_contact(contact) for number, contact in contacts.items()
        }
        return cls(districts, contacts)

    def __len__(self) -> int:
        return len(self._districts)

    def is_valid(self, district_number: str) -> bool:
        return district_number in self._districts

    def get(self, district_number: str) -> DistrictRecord | None:
        return self._districts.get(district_number)

    def contact(self, district_number: str) -> LegislatorContact | None:
        return self._contacts.get(district_number)

    def lookup(self, district_number: str) -> KansasLookupResult:
        if not self.is_valid(district_number):
            return KansasLookupResult(
                found=False,
                error=f"Invalid Kansas district number: {district_number}",
            )
        return KansasLookupResult(found=True, district=self._districts[district_number])

    def format_response(self, district_number: str) -> dict[str, Any] | None:
        """
        Build the display response for a district, or None if it is unknown.

        Email and URL come from the roster row and are omitted when blank.
        """
        result = self.lookup(district_number)
        if not result.found or result.district is None:
            return None

        district = result.district
        number = district.district_number
        response: dict[str, Any] = {
            "state": KANSAS_STATE_NAME,
            "stateCode": KANSAS_STATE_CODE,
            "districtNumber": number,
            "fullDistrict": f"{KANSAS_STATE_NAME}'s {number}{ordinal_suffix(number)} Senate District",
            "representative": district.representative,
            "officeAddress": district.office_address,
        }

        contact = self.contact(number)
        if contact is not None:
            if contact.email:
                response["email"] = contact.email
            if contact.url:
                response["url"] = contact.url
        return response
