"""Airport catalog: bulk CSV load plus typeahead queries.

The catalog is populated once, on first use, from a CSV file in a fixed
column layout (see ``AIRPORT_COLUMNS``). Columns are read by position, so the
header is checked against the expected names before any row is parsed; a
mismatch is treated like an unreadable file and the built-in fallback list is
installed instead. After load the record list never changes, and queries only
read it.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from threading import Lock
from typing import Iterable, Literal, Sequence

from skycharter.app.airports import FALLBACK_AIRPORTS, AirportRecord, normalize_code, pick_primary_code
from skycharter.app.services.ranking import normalize_query, score_airport

__all__ = [
    "AIRPORT_COLUMNS",
    "AirportCatalog",
    "AirportSourceError",
    "load_airports_csv",
    "read_airports_csv",
]

logger = logging.getLogger(__name__)


AIRPORT_COLUMNS: tuple[str, ...] = (
    "ident",
    "type",
    "name",
    "elevation_ft",
    "continent",
    "iso_country",
    "iso_region",
    "municipality",
    "icao_code",
    "iata_code",
    "gps_code",
    "local_code",
    "latitude_deg",
    "longitude_deg",
)

_TYPE = 1
_NAME = 2
_ELEVATION = 3
_CONTINENT = 4
_COUNTRY = 5
_CITY = 7
_ICAO = 8
_IATA = 9
_GPS = 10
_LOCAL = 11
_LAT = 12
_LON = 13


class AirportSourceError(RuntimeError):
    pass


def _coerce_float(v: str) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        return 0.0


def _check_header(header: Sequence[str] | None) -> None:
    if not header:
        raise AirportSourceError("airport source has no header row")
    got = [h.strip().lower() for h in header[: len(AIRPORT_COLUMNS)]]
    if got != list(AIRPORT_COLUMNS):
        raise AirportSourceError(f"unexpected airport source columns: {got}")


def _parse_row(row: Sequence[str]) -> AirportRecord | None:
    name = row[_NAME].strip()
    code = pick_primary_code(row[_IATA], row[_GPS], row[_LOCAL], row[_ICAO])
    if not code or not name:
        return None
    return AirportRecord(
        code=code,
        icao_code=normalize_code(row[_ICAO]),
        name=name,
        city=row[_CITY].strip(),
        country=row[_COUNTRY].strip(),
        continent=row[_CONTINENT].strip(),
        latitude=_coerce_float(row[_LAT]),
        longitude=_coerce_float(row[_LON]),
        elevation=_coerce_float(row[_ELEVATION]),
        facility_type=row[_TYPE].strip(),
    )


def read_airports_csv(path: str | Path) -> tuple[list[AirportRecord], int]:
    """Parse a bulk airport CSV into records, in file order, plus a skipped-row count.

    Rows that are too short, or lack a usable 3-character code or a name,
    are skipped. Unparseable numbers become ``0.0``.

    Raises
    ------
    OSError
        The file can't be opened.
    AirportSourceError
        The header doesn't match ``AIRPORT_COLUMNS`` or no row was usable.
    """
    out: list[AirportRecord] = []
    skipped = 0
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f)
        _check_header(next(reader, None))
        for row in reader:
            if len(row) < len(AIRPORT_COLUMNS):
                skipped += 1
                logger.debug("skipping short airport row at line %d", reader.line_num)
                continue
            rec = _parse_row(row)
            if rec is None:
                skipped += 1
                continue
            out.append(rec)

    if not out:
        raise AirportSourceError(f"no usable airport rows in {path}")
    return out, skipped


def load_airports_csv(path: str | Path) -> list[AirportRecord]:
    records, _ = read_airports_csv(path)
    return records


class AirportCatalog:
    """Read-only airport list with ranked search, popular listing and lookup.

    The first call to any query method loads the source. Loading happens at
    most once per instance even if several threads race to the first query.
    """

    def __init__(self, source_path: str | Path, *, fallback: Iterable[AirportRecord] = FALLBACK_AIRPORTS) -> None:
        self.source_path = Path(source_path)
        self._fallback = tuple(fallback)
        self._lock = Lock()
        self._records: tuple[AirportRecord, ...] = ()
        self._source: Literal["file", "fallback"] | None = None
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def source(self) -> Literal["file", "fallback"] | None:
        return self._source

    def ensure_loaded(self) -> None:
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            try:
                parsed, skipped = read_airports_csv(self.source_path)
                records = tuple(parsed)
                source: Literal["file", "fallback"] = "file"
            except (OSError, UnicodeDecodeError, csv.Error, AirportSourceError) as e:
                logger.warning("airport source %s unusable (%s); using built-in airports", self.source_path, e)
                records = self._fallback
                skipped = 0
                source = "fallback"
            self._records = records
            self._source = source
            self._loaded = True
        logger.info(
            "airport catalog ready: %d airports from %s (%d rows skipped)", len(records), source, skipped
        )

    def __len__(self) -> int:
        self.ensure_loaded()
        return len(self._records)

    def records(self) -> list[AirportRecord]:
        self.ensure_loaded()
        return list(self._records)

    def search_scored(self, query: str | None, limit: int = 10) -> list[tuple[AirportRecord, int]]:
        q = normalize_query(query)
        if not q or limit < 1:
            return []
        self.ensure_loaded()

        scored: list[tuple[AirportRecord, int]] = []
        for rec in self._records:
            s = score_airport(rec, q)
            if s > 0:
                scored.append((rec, s))
        # sorted() is stable, so equal scores keep catalog order
        scored = sorted(scored, key=lambda t: -t[1])
        return scored[:limit]

    def search(self, query: str | None, limit: int = 10) -> list[AirportRecord]:
        return [rec for rec, _ in self.search_scored(query, limit)]

    def popular(self, limit: int = 20) -> list[AirportRecord]:
        if limit < 1:
            return []
        self.ensure_loaded()
        out: list[AirportRecord] = []
        for rec in self._records:
            if rec.facility_type == "large_airport":
                out.append(rec)
                if len(out) >= limit:
                    break
        return out

    def find_by_code(self, code: str | None) -> AirportRecord | None:
        wanted = normalize_code(code)
        if not wanted:
            return None
        self.ensure_loaded()
        for rec in self._records:
            if rec.code == wanted or rec.icao_code == wanted:
                return rec
        return None
