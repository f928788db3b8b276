"""Legislator and Kansas senate district lookup service.

Serves two read-only datasets loaded once at startup:
- the congress-legislators roster (YAML), searched by name
- the Kansas senate district roster (CSV), keyed by district number and
  reachable from Census geocoder responses

Example usage:
    from legislator_lookup import create_app, load_settings

    app = create_app(settings=load_settings())
"""

from .config import Settings, load_settings
from .context import ServiceContext, build_context
from .legislators import find_legislator_by_name
from .main import create_app
from .normalization import normalize_name

__all__ = [
    "create_app",
    "build_context",
    "find_legislator_by_name",
    "load_settings",
    "normalize_name",
    "ServiceContext",
    "Settings",
]
