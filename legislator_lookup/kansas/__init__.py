"""Kansas state-senate district lookup."""

from .districts import (
    KANSAS_STATE_CODE,
    KANSAS_STATE_NAME,
    DistrictRegistry,
    is_kansas_state,
    ordinal_suffix,
)
from .geo import resolve_district_from_geo

__all__ = [
    "KANSAS_STATE_CODE",
    "KANSAS_STATE_NAME",
    "DistrictRegistry",
    "is_kansas_state",
    "ordinal_suffix",
    "resolve_district_from_geo",
]
