"""Shared fixtures for the SkyCharter airport tests.

Provides a CSV writer for the bulk-source column layout, a catalog
factory, and a FastAPI test client wired to a known catalog.
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Add project root to path so `import skycharter` works without installing.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from skycharter.app.airports import AirportRecord
from skycharter.app.catalog import AIRPORT_COLUMNS, AirportCatalog
from skycharter.app.config import Settings
from skycharter.app.main import create_app


HEADER = ",".join(AIRPORT_COLUMNS)


def make_row(
    *,
    ident="",
    type="small_airport",
    name="",
    elevation="0",
    continent="NA",
    country="US",
    region="US-NY",
    city="",
    icao="",
    iata="",
    gps="",
    local="",
    lat="0",
    lon="0",
):
    fields = [ident, type, name, elevation, continent, country, region, city, icao, iata, gps, local, lat, lon]
    return ",".join(f'"{f}"' if "," in f else f for f in fields)


def make_airport(code, *, city="", name=None, country="US", facility_type="small_airport", icao_code=""):
    return AirportRecord(
        code=code,
        icao_code=icao_code,
        name=name if name is not None else f"{code} Airport",
        city=city,
        country=country,
        continent="NA",
        latitude=0.0,
        longitude=0.0,
        elevation=0.0,
        facility_type=facility_type,
    )


# ============================================================
# CSV SOURCE FIXTURES
# ============================================================

@pytest.fixture
def write_csv(tmp_path):
    """Write header + rows to a temp airports CSV and return its path."""
    def _write(rows, header=HEADER, name="airports.csv"):
        path = tmp_path / name
        path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def nyc_csv(write_csv):
    return write_csv([
        make_row(ident="KJFK", type="large_airport", name="John F Kennedy International Airport",
                 elevation="13", city="New York", icao="KJFK", iata="JFK", gps="KJFK",
                 lat="40.639447", lon="-73.779317"),
        make_row(ident="KLGA", type="medium_airport", name="La Guardia Airport",
                 elevation="21", city="New York", icao="KLGA", iata="LGA", gps="KLGA",
                 lat="40.777245", lon="-73.872608"),
        make_row(ident="KEWR", type="large_airport", name="Newark Liberty International Airport",
                 elevation="18", region="US-NJ", city="Newark", icao="KEWR", iata="EWR",
                 lat="40.692501", lon="-74.168701"),
        make_row(ident="KTEB", type="medium_airport", name="Teterboro Airport",
                 elevation="9", region="US-NJ", city="Teterboro", icao="KTEB", iata="TEB"),
    ])


# ============================================================
# CATALOG FACTORY / TEST CLIENT
# ============================================================

@pytest.fixture
def make_catalog(tmp_path):
    """Catalog over an in-memory record list (the bulk path never exists)."""
    def _factory(records):
        return AirportCatalog(tmp_path / "missing.csv", fallback=records)
    return _factory


@pytest.fixture
def nyc_catalog(nyc_csv):
    return AirportCatalog(nyc_csv)


@pytest.fixture
def api_client(nyc_catalog):
    app = create_app(catalog=nyc_catalog, settings=Settings(max_result_limit=25))
    with TestClient(app) as client:
        yield client
