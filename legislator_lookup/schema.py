"""Record definitions for the legislator and district rosters."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# =============================================================================
# LEGISLATOR ROSTER (congress-legislators YAML)
# =============================================================================
# Term fields reported in the "current_role" response block.
TERM_FIELDS = [
    "type",
    "start",
    "end",
    "state",
    "district",
    "party",
    "url",
    "address",
    "phone",
    "contact_form",
    "office",
    "state_rank",
]

NO_OFFICE_ADDRESS = "No office address available"


def _optional_str(raw: Mapping[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class LegislatorName:
    """Name block of a legislator record."""

    first: str
    last: str
    middle: str | None = None
    official_full: str | None = None
    nickname: str | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> LegislatorName:
        first = raw.get("first")
        last = raw.get("last")
        if not first or not last:
            raise ValueError("name.first and name.last are required")
        return cls(
            first=str(first),
            last=str(last),
            middle=_optional_str(raw, "middle"),
            official_full=_optional_str(raw, "official_full"),
            nickname=_optional_str(raw, "nickname"),
        )

    @property
    def display_name(self) -> str:
        """Official full name, falling back to "first last"."""
        return self.official_full or f"{self.first} {self.last}"

    def to_dict(self) -> dict[str, str | None]:
        return {
            "first": self.first,
            "middle": self.middle,
            "last": self.last,
            "official_full": self.official_full,
            "nickname": self.nickname,
        }


@dataclass(frozen=True)
class Term:
    """A single term of office.

    ``district`` is kept as loaded (the roster stores House districts as
    integers); all other fields are strings or None. ``raw`` holds the term
    exactly as it appeared in the roster, including keys not modelled here.
    """

    type: str
    start: str
    end: str
    state: str
    party: str | None = None
    district: int | str | None = None
    url: str | None = None
    address: str | None = None
    phone: str | None = None
    contact_form: str | None = None
    office: str | None = None
    state_rank: str | None = None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Term:
        return cls(
            type=str(raw.get("type", "")),
            start=str(raw.get("start", "")),
            end=str(raw.get("end", "")),
            state=str(raw.get("state", "")),
            party=_optional_str(raw, "party"),
            district=raw.get("district"),
            url=_optional_str(raw, "url"),
            address=_optional_str(raw, "address"),
            phone=_optional_str(raw, "phone"),
            contact_form=_optional_str(raw, "contact_form"),
            office=_optional_str(raw, "office"),
            state_rank=_optional_str(raw, "state_rank"),
            raw=dict(raw),
        )

    def to_dict(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in TERM_FIELDS}

    def as_loaded(self) -> dict[str, Any]:
        """The term as it appeared in the roster, or the modelled fields if built directly."""
        return dict(self.raw) if self.raw else self.to_dict()


@dataclass(frozen=True)
class LegislatorRecord:
    """A legislator loaded from the roster. The last term is the current one."""

    ids: Mapping[str, Any]
    name: LegislatorName
    bio: Mapping[str, Any]
    terms: tuple[Term, ...]

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> LegislatorRecord:
        if not isinstance(raw, Mapping):
            raise ValueError(f"legislator entry must be a mapping, got {type(raw).__name__}")
        terms = raw.get("terms") or []
        if not terms:
            raise ValueError("legislator has no terms")
        return cls(
            ids=dict(raw.get("id") or {}),
            name=LegislatorName.from_dict(raw.get("name") or {}),
            bio=dict(raw.get("bio") or {}),
            terms=tuple(Term.from_dict(term) for term in terms),
        )

    @property
    def current_term(self) -> Term:
        return self.terms[-1]


# =============================================================================
# DISTRICT ROSTER (Kansas senate CSV)
# =============================================================================
DISTRICT_ROSTER_COLUMNS = [
    "FID",
    "DISTRICT",
    "NAME",
    "FULLNAME",
    "EMAIL",
    "URL",
    "DISTRICT_N",
    "Shape__Area",
    "Shape__Length",
]

DEFAULT_OFFICE_ADDRESS = "300 SW 10th Ave, Topeka, KS 66612"


def _parse_float(value: str | None) -> float:
    try:
        return float(value) if value else math.nan
    except ValueError:
        return math.nan


@dataclass(frozen=True)
class LegislatorContact:
    """One row of the district roster. Shape values are carried but unused."""

    district_number: str
    name: str
    full_name: str
    email: str
    url: str
    fid: str = ""
    district_code: str = ""
    shape_area: float = math.nan
    shape_length: float = math.nan

    @classmethod
    def from_row(cls, row: Mapping[str, str | None]) -> LegislatorContact:
        return cls(
            district_number=row.get("DISTRICT_N") or "",
            name=row.get("NAME") or "",
            full_name=row.get("FULLNAME") or "",
            email=row.get("EMAIL") or "",
            url=row.get("URL") or "",
            fid=row.get("FID") or "",
            district_code=row.get("DISTRICT") or "",
            shape_area=_parse_float(row.get("Shape__Area")),
            shape_length=_parse_float(row.get("Shape__Length")),
        )


@dataclass(frozen=True)
class DistrictRecord:
    """A state-senate district and its representative."""

    district_number: str
    representative: str
    counties: tuple[str, ...] = ()
    office_address: str = DEFAULT_OFFICE_ADDRESS

    @classmethod
    def from_contact(cls, contact: LegislatorContact) -> DistrictRecord:
        # County membership is not part of the roster export
        return cls(
            district_number=contact.district_number,
            representative=contact.full_name,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "districtNumber": self.district_number,
            "representative": self.representative,
            "counties": list(self.counties),
            "officeAddress": self.office_address,
        }


# =============================================================================
# GEO RESOLUTION
# =============================================================================
@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lng: float

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class GeoResolution:
    """Outcome of resolving a geocoding payload to a senate district."""

    found: bool
    district_number: str | None = None
    coordinates: GeoPoint | None = None
    state_code: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class KansasLookupResult:
    found: bool
    district: DistrictRecord | None = None
    error: str | None = None
