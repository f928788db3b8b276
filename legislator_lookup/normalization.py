"""Name normalization for legislator matching."""

import re
from typing import Final

_NON_ALPHANUMERIC: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9]")


def normalize_name(name: str) -> str:
    """
    Canonicalize a human name for equality comparison.

    Lower-cases the input and removes every character outside ``a-z0-9``.
    Diacritics are not folded, so accented letters are dropped entirely.

    Examples:
        >>> normalize_name("John A. Smith-Jr")
        'johnasmithjr'
        >>> normalize_name("  JANE   DOE ")
        'janedoe'
    """
    return _NON_ALPHANUMERIC.sub("", name.lower())
