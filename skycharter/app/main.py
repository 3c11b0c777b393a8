from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from pydantic import BaseModel
import uvicorn

from skycharter.app.airports import AirportRecord
from skycharter.app.catalog import AirportCatalog
from skycharter.app.config import Settings, settings as default_settings


class AirportOut(BaseModel):
    code: str
    icao_code: str
    name: str
    city: str
    country: str
    continent: str
    latitude: float
    longitude: float
    elevation: float
    facility_type: str


def _airport_to_public(a: AirportRecord) -> AirportOut:
    return AirportOut(
        code=a.code,
        icao_code=a.icao_code,
        name=a.name,
        city=a.city,
        country=a.country,
        continent=a.continent,
        latitude=a.latitude,
        longitude=a.longitude,
        elevation=a.elevation,
        facility_type=a.facility_type,
    )


def get_catalog(request: Request) -> AirportCatalog:
    return request.app.state.catalog


def create_app(*, catalog: AirportCatalog | None = None, settings: Settings | None = None) -> FastAPI:
    cfg = settings or default_settings
    logging.basicConfig(level=cfg.log_level)

    app = FastAPI(title="SkyCharter Airports", version="0.1.0")
    app.state.catalog = catalog if catalog is not None else AirportCatalog(cfg.airports_csv_path)
    max_limit = cfg.max_result_limit

    @app.get("/api/health")
    def health(cat: AirportCatalog = Depends(get_catalog)) -> dict[str, Any]:
        return {"status": "ok", "airports": len(cat), "source": cat.source}

    @app.get("/api/airports", response_model=list[AirportOut])
    def list_airports(
        search: str | None = None,
        limit: int = Query(cfg.search_default_limit, ge=1, le=max_limit),
        cat: AirportCatalog = Depends(get_catalog),
    ) -> list[AirportOut]:
        if search:
            found = cat.search(search, limit)
        else:
            found = cat.popular(cfg.popular_default_limit)
        return [_airport_to_public(a) for a in found]

    @app.get("/api/airports/suggest", response_model=list[AirportOut])
    def suggest(
        q: str | None = None,
        limit: int = Query(cfg.suggest_default_limit, ge=1, le=max_limit),
        cat: AirportCatalog = Depends(get_catalog),
    ) -> list[AirportOut]:
        # Nothing typed yet: show popular airports instead of an empty list.
        if not q:
            return [_airport_to_public(a) for a in cat.popular(limit)]
        return [_airport_to_public(a) for a in cat.search(q, limit)]

    @app.get("/api/airports/{code}", response_model=AirportOut)
    def airport_by_code(code: str, cat: AirportCatalog = Depends(get_catalog)) -> AirportOut:
        airport = cat.find_by_code(code)
        if not airport:
            raise HTTPException(status_code=404, detail="Airport not found")
        return _airport_to_public(airport)

    return app


app = create_app()


def serve(settings: Settings | None = None) -> None:
    cfg = settings or default_settings
    application = app if settings is None else create_app(settings=cfg)
    uvicorn.run(application, host=cfg.host, port=cfg.port, log_level=logging.getLevelName(cfg.log_level))
