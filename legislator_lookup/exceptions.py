"""Exception hierarchy for the legislator lookup service."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class LookupServiceError(Exception):
    """Base exception for lookup service errors."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class DatasetLoadError(LookupServiceError):
    """Raised when a dataset file cannot be read or has the wrong shape."""

    path: Path

    def __str__(self) -> str:
        return f"Failed to load dataset: {self.path}\n{self.message}"


@dataclass
class GeoPayloadError(LookupServiceError):
    """Raised when a geocoding payload does not have the expected structure."""

    field_name: str

    def __str__(self) -> str:
        return f"Malformed geocoding payload at '{self.field_name}': {self.message}"
