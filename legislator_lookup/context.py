"""Service context built once at startup and injected into handlers."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request

from .config import Settings
from .kansas.districts import DistrictRegistry
from .loader import load_district_roster, load_legislator_roster
from .schema import LegislatorRecord


@dataclass(frozen=True)
class ServiceContext:
    """Immutable datasets shared by all requests."""

    settings: Settings
    legislators: tuple[LegislatorRecord, ...]
    districts: DistrictRegistry


def build_context(settings: Settings) -> ServiceContext:
    """Load both rosters. Load failures leave the corresponding dataset empty."""
    return ServiceContext(
        settings=settings,
        legislators=load_legislator_roster(settings.legislators_path),
        districts=DistrictRegistry.from_contacts(load_district_roster(settings.kansas_csv_path)),
    )


def get_context(request: Request) -> ServiceContext:
    return request.app.state.context


ContextDep = Annotated[ServiceContext, Depends(get_context)]
