"""Load the legislator and district rosters at startup.

Both loaders absorb read and parse failures: the failure is logged and an
empty dataset is returned so the service still starts and answers "not
found".
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

import yaml

from .exceptions import DatasetLoadError
from .schema import DISTRICT_ROSTER_COLUMNS, LegislatorContact, LegislatorRecord

logger = logging.getLogger(__name__)


def read_district_roster(csv_path: Path) -> dict[str, LegislatorContact]:
    """
    Parse the district roster CSV into contacts keyed by district number.

    Raises:
        DatasetLoadError: If the header is missing the district number column.
        OSError: If the file cannot be read.
    """
    contacts: dict[str, LegislatorContact] = {}

    # utf-8-sig strips the BOM that ArcGIS exports prepend
    with csv_path.open(encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        header = reader.fieldnames or []
        if "DISTRICT_N" not in header:
            raise DatasetLoadError(
                message=f"Missing DISTRICT_N column (header: {', '.join(header)})",
                path=csv_path,
            )
        missing = [col for col in DISTRICT_ROSTER_COLUMNS if col not in header]
        if missing:
            logger.warning("District roster %s is missing columns: %s", csv_path, missing)

        for row in reader:
            # Blank lines come back as rows of empty strings
            if not any(row.values()):
                continue
            contact = LegislatorContact.from_row(row)
            if contact.district_number in contacts:
                logger.warning(
                    "Duplicate district %s in %s; keeping the later row",
                    contact.district_number,
                    csv_path,
                )
            contacts[contact.district_number] = contact

    return contacts


def read_legislator_roster(yaml_path: Path) -> tuple[LegislatorRecord, ...]:
    """
    Parse the congress-legislators YAML file, preserving file order.

    Entries that lack a first/last name or any terms are skipped with a warning.

    Raises:
        DatasetLoadError: If the document is not a list of legislators.
        OSError: If the file cannot be read.
        yaml.YAMLError: If the document is not valid YAML.
    """
    with yaml_path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return ()
    if not isinstance(data, list):
        raise DatasetLoadError(
            message=f"Expected a list of legislators, got {type(data).__name__}",
            path=yaml_path,
        )

    legislators: list[LegislatorRecord] = []
    for index, entry in enumerate(data):
        try:
            legislators.append(LegislatorRecord.from_dict(entry))
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning("Skipping legislator #%d in %s: %s", index, yaml_path, e)

    return tuple(legislators)


def load_district_roster(csv_path: Path) -> dict[str, LegislatorContact]:
    """Load the district roster, returning an empty mapping on failure."""
    logger.info("Loading district roster from %s", csv_path)
    try:
        contacts = read_district_roster(csv_path)
    except (OSError, csv.Error, UnicodeDecodeError, DatasetLoadError) as e:
        logger.error("Error loading district roster %s: %s", csv_path, e)
        return {}

    logger.info("Loaded %d districts from %s", len(contacts), csv_path.name)
    return contacts


def load_legislator_roster(yaml_path: Path) -> tuple[LegislatorRecord, ...]:
    """Load the legislator roster, returning an empty tuple on failure."""
    logger.info("Loading legislator roster from %s", yaml_path)
    try:
        legislators = read_legislator_roster(yaml_path)
    except (OSError, yaml.YAMLError, UnicodeDecodeError, DatasetLoadError) as e:
        logger.error("Error loading legislator roster %s: %s", yaml_path, e)
        return ()

    logger.info("Loaded %d legislators from %s", len(legislators), yaml_path.name)
    return legislators
