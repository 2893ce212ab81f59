"""Page/view routes for serving the widget page and its HTMX fragments."""

import httpx
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from weather_widget.config import Settings, get_settings
from weather_widget.dependencies import get_http_client
from weather_widget.services.locator import ReportedPosition
from weather_widget.views.template_renderer import TemplateRenderer

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Render the weather widget page."""
    return TemplateRenderer.render_index(request, client, settings)


@router.get("/tiles/weather/search", response_class=HTMLResponse)
async def search_tile(
    request: Request,
    city: str = Query(default="", description="Text typed in the search box"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Look weather up by city name and render the widget fragment."""
    return await TemplateRenderer.render_search(request, client, settings, city)


@router.get("/tiles/weather/location", response_class=HTMLResponse)
async def location_tile(
    request: Request,
    latitude: float | None = Query(default=None, ge=-90, le=90),
    longitude: float | None = Query(default=None, ge=-180, le=180),
    error_code: int | None = Query(default=None, description="Browser GeolocationPositionError code"),
    unsupported: bool = Query(default=False, description="Browser has no geolocation support"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Look weather up by the position the browser reported and render the widget fragment."""
    provider = None if unsupported else ReportedPosition.from_report(latitude, longitude, error_code)
    return await TemplateRenderer.render_location(request, client, settings, provider)
