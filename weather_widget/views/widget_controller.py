"""Action handlers wiring Locator -> WeatherClient -> Presenter."""

import httpx

from weather_widget.config import Settings
from weather_widget.exceptions import WidgetException
from weather_widget.logging_config import get_logger, log_with_context
from weather_widget.models.location import CoordinatesQuery, PositionOptions
from weather_widget.protocols import GeolocationProvider
from weather_widget.services import locator, weather_service
from weather_widget.views.presenter import Presenter, SearchInput

logger = get_logger(__name__)

ENTER_KEY = "Enter"


class WeatherWidget:
    """Handles the widget's user actions.

    Every ``WidgetException`` raised along the way ends here and is shown in
    the error banner. Nothing is retried or cancelled here; when two
    actions overlap the page shows whichever response finishes last.
    """

    def __init__(
        self,
        presenter: Presenter,
        client: httpx.AsyncClient,
        settings: Settings,
        search_input: SearchInput | None = None,
    ):
        self.presenter = presenter
        self.client = client
        self.settings = settings
        self.search_input = search_input or SearchInput()

    @property
    def position_options(self) -> PositionOptions:
        return PositionOptions(
            timeout=self.settings.geolocation_timeout,
            enable_high_accuracy=self.settings.geolocation_high_accuracy,
        )

    def check_configuration(self) -> bool:
        """Page-load check; shows the configuration error if the key is missing."""
        try:
            weather_service.require_api_key(self.settings)
        except WidgetException as e:
            self._show_error(e, action="page_load")
            return False
        return True

    async def handle_search(self, raw_input: str) -> None:
        """Search button (or Enter) with the current input text."""
        self.search_input.value = raw_input
        try:
            query = locator.resolve_typed_query(raw_input)
            weather_service.require_api_key(self.settings)
            self.presenter.enter_loading()
            report = await weather_service.fetch_by_name(self.client, query.name, self.settings)
        except WidgetException as e:
            self._show_error(e, action="search")
            return

        self.presenter.enter_populated(report)
        self.search_input.value = ""
        log_with_context(
            logger,
            "info",
            "Weather displayed",
            action="search",
            location=report.name,
            event_type="weather_displayed",
        )

    async def handle_location(self, provider: GeolocationProvider | None) -> None:
        """Handle the "use my location" button."""
        try:
            weather_service.require_api_key(self.settings)
            self.presenter.enter_loading()
            coordinates = await locator.resolve_device_location(provider, self.position_options)
            query = CoordinatesQuery.from_coordinates(coordinates)
            report = await weather_service.fetch_query(self.client, query, self.settings)
        except WidgetException as e:
            self._show_error(e, action="location")
            return

        self.presenter.enter_populated(report)
        log_with_context(
            logger,
            "info",
            "Weather displayed",
            action="location",
            location=report.name,
            event_type="weather_displayed",
        )

    async def handle_input_key(self, key: str, raw_input: str) -> None:
        """Key press in the city input; Enter acts like the search button."""
        if key == ENTER_KEY:
            await self.handle_search(raw_input)

    def _show_error(self, exc: WidgetException, action: str) -> None:
        log_with_context(
            logger,
            "warning",
            "Weather action failed",
            action=action,
            error_code=exc.code.value,
            error=exc.message,
            details=exc.details,
            event_type="widget_error",
        )
        self.presenter.enter_error(exc.message)
