"""Presenter owning the widget's three mutually exclusive UI states."""

from dataclasses import dataclass, field
from enum import Enum

from weather_widget.config import OPENWEATHER_ICON_URL
from weather_widget.models.weather import WeatherReport


def format_number(value: float) -> str:
    """Print a number with every digit it has, dropping only a trailing ".0".

    4.0 -> "4", 12.3456789 -> "12.3456789", 1234567.0 -> "1234567".
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class UIState(str, Enum):
    """Which region of the widget is showing."""

    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    POPULATED = "populated"


@dataclass
class Region:
    """A toggleable page region (spinner, error banner, weather card)."""

    hidden: bool = True
    text: str = ""

    def show(self) -> None:
        self.hidden = False

    def hide(self) -> None:
        self.hidden = True


@dataclass
class TextField:
    """A text display slot inside the weather card."""

    text: str = ""


@dataclass
class ImageField:
    """The condition icon slot."""

    src: str = ""
    alt: str = ""


@dataclass
class SearchInput:
    """The city text input."""

    value: str = ""


@dataclass
class WidgetHandles:
    """Every element the presenter writes to, as handed over by the host."""

    spinner: Region = field(default_factory=Region)
    error_banner: Region = field(default_factory=Region)
    weather_card: Region = field(default_factory=Region)
    city_name: TextField = field(default_factory=TextField)
    country: TextField = field(default_factory=TextField)
    temperature: TextField = field(default_factory=TextField)
    weather_condition: TextField = field(default_factory=TextField)
    feels_like: TextField = field(default_factory=TextField)
    humidity: TextField = field(default_factory=TextField)
    wind_speed: TextField = field(default_factory=TextField)
    weather_icon: ImageField = field(default_factory=ImageField)

    @classmethod
    def create(cls) -> "WidgetHandles":
        """Fresh handles with every region hidden and every field blank."""
        return cls()


class Presenter:
    """Writes weather reports and errors into the widget handles.

    Exactly one of the spinner, the error banner and the weather card is
    visible after any entry point has been called. Each entry point hides
    the other two regions before showing its own, and the last call wins.
    """

    def __init__(self, handles: WidgetHandles, icon_base_url: str = OPENWEATHER_ICON_URL):
        self.handles = handles
        self.icon_base_url = icon_base_url
        self._state = UIState.IDLE
        self._report: WeatherReport | None = None

    @property
    def state(self) -> UIState:
        return self._state

    @property
    def report(self) -> WeatherReport | None:
        """The report currently on the card, if the card is showing."""
        return self._report if self._state is UIState.POPULATED else None

    @property
    def error_message(self) -> str | None:
        return self.handles.error_banner.text if self._state is UIState.ERROR else None

    def enter_loading(self) -> None:
        """Show the spinner."""
        self.handles.error_banner.hide()
        self.handles.weather_card.hide()
        self.handles.spinner.show()
        self._state = UIState.LOADING

    def enter_error(self, message: str) -> None:
        """Show the error banner with a user-facing message."""
        self.handles.spinner.hide()
        self.handles.weather_card.hide()
        self.handles.error_banner.text = message
        self.handles.error_banner.show()
        self._state = UIState.ERROR

    def enter_populated(self, report: WeatherReport) -> None:
        """Fill the weather card from a report and show it."""
        self.handles.spinner.hide()
        self.handles.error_banner.hide()

        h = self.handles
        h.city_name.text = report.name
        h.country.text = report.country
        h.temperature.text = f"{report.temperature}°C"
        h.weather_condition.text = report.description
        h.feels_like.text = f"{report.feels_like}°C"
        h.humidity.text = f"{report.humidity}%"
        h.wind_speed.text = f"{format_number(report.wind_speed)} m/s"
        h.weather_icon.src = report.icon_url(self.icon_base_url)
        h.weather_icon.alt = report.description

        h.weather_card.show()
        self._report = report
        self._state = UIState.POPULATED
