"""Template rendering utilities for HTML views."""

from pathlib import Path

import httpx
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from weather_widget.config import Settings
from weather_widget.protocols import GeolocationProvider
from weather_widget.views.presenter import Presenter, WidgetHandles
from weather_widget.views.widget_controller import WeatherWidget

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)


def build_widget(client: httpx.AsyncClient, settings: Settings) -> WeatherWidget:
    """Create a widget with fresh handles for one page interaction."""
    presenter = Presenter(WidgetHandles.create(), icon_base_url=settings.weather_icon_base_url)
    return WeatherWidget(presenter, client, settings)


class TemplateRenderer:
    """Handles rendering of Jinja2 templates for the widget."""

    @staticmethod
    def _context(request: Request, widget: WeatherWidget) -> dict:
        return {
            "request": request,
            "ui": widget.presenter.handles,
            "state": widget.presenter.state.value,
            "configured": widget.settings.is_weather_api_key_configured,
            "search_value": widget.search_input.value,
            "geolocation_timeout_ms": int(widget.settings.geolocation_timeout * 1000),
            "geolocation_high_accuracy": widget.settings.geolocation_high_accuracy,
        }

    @staticmethod
    def render_index(request: Request, client: httpx.AsyncClient, settings: Settings) -> HTMLResponse:
        """Render the widget page, showing the configuration error if needed."""
        widget = build_widget(client, settings)
        widget.check_configuration()
        return templates.TemplateResponse(request, "index.html", TemplateRenderer._context(request, widget))

    @staticmethod
    def render_widget(request: Request, widget: WeatherWidget) -> HTMLResponse:
        """Render the widget fragment for an HTMX swap."""
        return templates.TemplateResponse(request, "tiles/weather.html", TemplateRenderer._context(request, widget))

    @staticmethod
    async def render_search(
        request: Request,
        client: httpx.AsyncClient,
        settings: Settings,
        city: str,
    ) -> HTMLResponse:
        """Run a city search and render the resulting widget.

        Args:
            request: FastAPI request object
            client: HTTP client for API calls
            settings: Settings instance (must be provided by router via Depends)
            city: Raw text from the search box

        Returns:
            HTMLResponse with the rendered widget fragment
        """
        widget = build_widget(client, settings)
        await widget.handle_search(city)
        return TemplateRenderer.render_widget(request, widget)

    @staticmethod
    async def render_location(
        request: Request,
        client: httpx.AsyncClient,
        settings: Settings,
        provider: GeolocationProvider | None,
    ) -> HTMLResponse:
        """Run a device-location lookup and render the resulting widget."""
        widget = build_widget(client, settings)
        await widget.handle_location(provider)
        return TemplateRenderer.render_widget(request, widget)
