"""Legislator matching and response formatting."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .normalization import normalize_name
from .schema import NO_OFFICE_ADDRESS, LegislatorRecord


def candidate_names(legislator: LegislatorRecord) -> list[str]:
    """Name forms tried for a legislator, in priority order."""
    name = legislator.name
    candidates = [f"{name.first} {name.last}"]
    if name.official_full:
        candidates.append(name.official_full)
    if name.nickname:
        candidates.append(f"{name.nickname} {name.last}")
    return candidates


def find_legislator_by_name(
    legislators: Iterable[LegislatorRecord],
    search_name: str,
) -> LegislatorRecord | None:
    """
    Find the first legislator whose name matches ``search_name``.

    Each legislator is compared on "first last", the official full name and
    "nickname last", after normalization. Roster order decides between
    legislators that normalize to the same name.

    Args:
        legislators: Loaded roster, in load order.
        search_name: Free-text name to search for.

    Returns:
        The matching record, or None when nobody matches.
    """
    normalized_search = normalize_name(search_name)
    for legislator in legislators:
        for candidate in candidate_names(legislator):
            if normalize_name(candidate) == normalized_search:
                return legislator
    return None


def format_legislator(legislator: LegislatorRecord) -> dict[str, Any]:
    """Build the detail response for a legislator."""
    return {
        "name": legislator.name.to_dict(),
        "bio": dict(legislator.bio),
        "ids": dict(legislator.ids),
        "current_role": legislator.current_term.to_dict(),
        "all_terms": [term.as_loaded() for term in legislator.terms],
    }


def format_office_address(legislator: LegislatorRecord) -> dict[str, str]:
    """Build the batch-address entry for a matched legislator."""
    return {
        "name": legislator.name.display_name,
        "officeAddress": legislator.current_term.address or NO_OFFICE_ADDRESS,
    }
