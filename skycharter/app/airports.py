from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AirportRecord:
    code: str  # IATA preferred, else GPS/local code; always 3 chars
    icao_code: str
    name: str
    city: str
    country: str
    continent: str
    latitude: float
    longitude: float
    elevation: float
    facility_type: str


# Installed when the bulk source can't be read. Keep to well-known hubs.
FALLBACK_AIRPORTS: tuple[AirportRecord, ...] = (
    AirportRecord(
        code="JFK",
        icao_code="KJFK",
        name="John F. Kennedy International Airport",
        city="New York",
        country="US",
        continent="NA",
        latitude=40.6413,
        longitude=-73.7781,
        elevation=13.0,
        facility_type="large_airport",
    ),
    AirportRecord(
        code="LAX",
        icao_code="KLAX",
        name="Los Angeles International Airport",
        city="Los Angeles",
        country="US",
        continent="NA",
        latitude=33.9416,
        longitude=-118.4085,
        elevation=125.0,
        facility_type="large_airport",
    ),
    AirportRecord(code="ORD", icao_code="KORD", name="O'Hare International Airport", city="Chicago", country="US", continent="NA", latitude=41.9742, longitude=-87.9073, elevation=672.0, facility_type="large_airport"),
    AirportRecord(code="MIA", icao_code="KMIA", name="Miami International Airport", city="Miami", country="US", continent="NA", latitude=25.7959, longitude=-80.2870, elevation=8.0, facility_type="large_airport"),
    AirportRecord(code="LHR", icao_code="EGLL", name="London Heathrow Airport", city="London", country="GB", continent="EU", latitude=51.4700, longitude=-0.4543, elevation=83.0, facility_type="large_airport"),
    AirportRecord(code="CDG", icao_code="LFPG", name="Charles de Gaulle International Airport", city="Paris", country="FR", continent="EU", latitude=49.0097, longitude=2.5479, elevation=392.0, facility_type="large_airport"),
    AirportRecord(code="DXB", icao_code="OMDB", name="Dubai International Airport", city="Dubai", country="AE", continent="AS", latitude=25.2532, longitude=55.3657, elevation=62.0, facility_type="large_airport"),
    AirportRecord(code="NRT", icao_code="RJAA", name="Narita International Airport", city="Tokyo", country="JP", continent="AS", latitude=35.7720, longitude=140.3929, elevation=141.0, facility_type="large_airport"),
    AirportRecord(code="SIN", icao_code="WSSS", name="Singapore Changi Airport", city="Singapore", country="SG", continent="AS", latitude=1.3644, longitude=103.9915, elevation=22.0, facility_type="large_airport"),
    AirportRecord(code="SYD", icao_code="YSSY", name="Sydney Kingsford Smith International Airport", city="Sydney", country="AU", continent="OC", latitude=-33.9399, longitude=151.1753, elevation=21.0, facility_type="large_airport"),
    AirportRecord(code="TEB", icao_code="KTEB", name="Teterboro Airport", city="Teterboro", country="US", continent="NA", latitude=40.8501, longitude=-74.0608, elevation=9.0, facility_type="medium_airport"),
    AirportRecord(code="VNY", icao_code="KVNY", name="Van Nuys Airport", city="Los Angeles", country="US", continent="NA", latitude=34.2098, longitude=-118.4900, elevation=802.0, facility_type="medium_airport"),
)


def normalize_code(code: str | None) -> str:
    return (code or "").strip().upper()


def pick_primary_code(*candidates: str | None) -> str:
    """Return the first candidate that is a 3-character code, uppercased.

    Candidates are tried in order (IATA, then GPS/local, then ICAO), so a
    4-letter ICAO code never becomes the primary suggestion identifier.
    """
    for candidate in candidates:
        code = normalize_code(candidate)
        if len(code) == 3:
            return code
    return ""
