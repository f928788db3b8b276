"""Shared pytest fixtures for legislator lookup tests."""

import copy
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from legislator_lookup.config import Settings
from legislator_lookup.context import ServiceContext, build_context
from legislator_lookup.main import create_app

TEST_KEY = "test-key"

LEGISLATORS_YAML = """\
- id:
    bioguide: D000001
    fec:
      - S0KS00001
    govtrack: 400001
  name:
    first: Jane
    middle: Q.
    last: Doe
    official_full: Jane Q. Doe
  bio:
    birthday: '1960-04-01'
    gender: F
  terms:
    - type: rep
      start: '2015-01-06'
      end: '2017-01-03'
      state: KS
      district: 2
      party: Republican
    - type: sen
      start: '2021-01-03'
      end: '2027-01-03'
      state: KS
      party: Republican
      state_rank: junior
      url: https://www.doe.senate.gov
      address: 109 Hart Senate Office Building Washington DC 20510
      phone: 202-224-0001
- id:
    bioguide: S000033
  name:
    first: Bernard
    last: Sanders
    nickname: Bernie
    official_full: Bernard Sanders
  bio:
    birthday: '1941-09-08'
    gender: M
  terms:
    - type: sen
      start: '2019-01-03'
      end: '2025-01-03'
      state: VT
      party: Independent
- id:
    bioguide: O000001
  name:
    first: John
    last: O'Brien
  bio:
    gender: M
  terms:
    - type: rep
      start: '2023-01-03'
      end: '2025-01-03'
      state: MA
      district: 9
      party: Democrat
"""

KANSAS_CSV = """\
FID,DISTRICT,NAME,FULLNAME,EMAIL,URL,DISTRICT_N,Shape__Area,Shape__Length
1,SD01,Smith,Alice Smith,alice.smith@senate.ks.gov,https://kslegislature.gov/li/b2025_26/members/sen_smith_alice_1/,1,1524300.5,7320.25
2,SD05,Jones,Bob Jones,bob.jones@senate.ks.gov,https://kslegislature.gov/li/b2025_26/members/sen_jones_bob_1/,5,880012.75,5100.5
3,SD07,Lee,Carol Lee,,,7,412.0,90.5
4,SD19,Park,Dan Park,dan.park@senate.ks.gov,https://kslegislature.gov/li/b2025_26/members/sen_park_dan_1/,19,99.5,
"""

CENSUS_RESPONSE = {
    "result": {
        "input": {
            "address": {"address": "300 SW 10th Ave, Topeka, KS 66612"},
            "vintage": {"id": "4", "vintageName": "Current_Current"},
            "benchmark": {"id": "4", "benchmarkName": "Public_AR_Current"},
        },
        "addressMatches": [
            {
                "tigerLine": {"side": "L", "tigerLineId": "76256286"},
                "geographies": {
                    "States": [
                        {"STATENS": "00481813", "GEOID": "20", "STATE": "20", "STUSAB": "KS", "NAME": "Kansas"}
                    ],
                    "2024 State Legislative Districts - Upper": [
                        {"GEOID": "20019", "SLDU": "019", "NAME": "State Senate District 19", "STATE": "20"}
                    ],
                },
                "coordinates": {"x": -95.67804, "y": 39.04833},
                "matchedAddress": "300 SW 10TH AVE, TOPEKA, KS, 66612",
            }
        ],
    }
}


@pytest.fixture
def census_response() -> dict:
    """Census geocoder response for an address in senate district 19."""
    return copy.deepcopy(CENSUS_RESPONSE)


@pytest.fixture
def legislators_yaml(tmp_path: Path) -> Path:
    """Legislator roster YAML file."""
    path = tmp_path / "legislators-current.yaml"
    path.write_text(LEGISLATORS_YAML, encoding="utf-8")
    return path


@pytest.fixture
def kansas_csv(tmp_path: Path) -> Path:
    """District roster CSV file."""
    path = tmp_path / "kansas.csv"
    path.write_text(KANSAS_CSV, encoding="utf-8")
    return path


@pytest.fixture
def settings(legislators_yaml: Path, kansas_csv: Path) -> Settings:
    return Settings(
        key=TEST_KEY,
        legislators_path=legislators_yaml,
        kansas_csv_path=kansas_csv,
    )


@pytest.fixture
def context(settings: Settings) -> ServiceContext:
    return build_context(settings)


@pytest.fixture
def client(context: ServiceContext) -> TestClient:
    return TestClient(create_app(context=context))
