from __future__ import annotations

from skycharter.app.airports import AirportRecord


CODE_EXACT = 100
CODE_PREFIX = 80
CODE_SUBSTRING = 50

CITY_EXACT = 90
CITY_PREFIX = 70
CITY_SUBSTRING = 40

NAME_SUBSTRING = 30
COUNTRY_SUBSTRING = 20

FACILITY_BONUS: dict[str, int] = {
    "large_airport": 10,
    "medium_airport": 5,
}


def normalize_query(query: str | None) -> str:
    return (query or "").strip().lower()


def score_airport(record: AirportRecord, query: str) -> int:
    """Additive typeahead score for one record against a normalized query.

    Code, city, name and country rules fire independently, so a record can
    collect several bonuses. The facility bonus only counts once something
    textual matched; otherwise the score is 0 and the record is dropped.
    """
    if not query:
        return 0

    score = 0

    code = record.code.lower()
    if code == query:
        score += CODE_EXACT
    elif code.startswith(query):
        score += CODE_PREFIX
    elif query in code:
        score += CODE_SUBSTRING

    city = record.city.lower()
    if city == query:
        score += CITY_EXACT
    elif city.startswith(query):
        score += CITY_PREFIX
    elif query in city:
        score += CITY_SUBSTRING

    if query in record.name.lower():
        score += NAME_SUBSTRING
    if query in record.country.lower():
        score += COUNTRY_SUBSTRING

    if score == 0:
        return 0
    return score + FACILITY_BONUS.get(record.facility_type, 0)
