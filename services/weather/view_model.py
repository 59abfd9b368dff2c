"""
View model builder for the weather page.

Turns a validated `WeatherReading` into display-ready values: Celsius
temperatures, formatted times, the background theme and the six detail rows.
Pure functions apart from the wall-clock date shown in the header.
"""

import math
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from services.weather.models import WeatherReading

KELVIN_OFFSET = 273.15

# Theme identifier -> background gradient classes
THEME_GRADIENTS = {
    "cold": "from-slate-800 to-slate-900",
    "mild": "from-emerald-800 to-emerald-900",
    "warm": "from-teal-700 to-teal-800",
    "hot": "from-amber-600 to-orange-700",
}


class DetailRow(BaseModel):
    icon: str
    label: str
    value: str


class ViewModel(BaseModel):
    """Everything the template needs for one render pass."""

    temperature: int = 0
    feels_like: int = 0
    city: str = ""
    description: str = ""
    icon: str = ""
    formatted_date: str
    sunrise: str = ""
    sunset: str = ""
    theme: str
    gradient: str
    details: List[DetailRow] = Field(default_factory=list)
    searching: bool = False


def kelvin_to_celsius(kelvin: float) -> int:
    """Round half up, so 0.5 degrees shows as 1 rather than 0."""
    return math.floor(kelvin - KELVIN_OFFSET + 0.5)


def background_theme(celsius: int) -> str:
    """Map a Celsius temperature onto one of four bands (upper bound inclusive)."""
    if celsius <= 0:
        return "cold"
    if celsius <= 15:
        return "mild"
    if celsius <= 25:
        return "warm"
    return "hot"


def format_time(timestamp: int, utc_offset: int = 0) -> str:
    """Render Unix seconds as 'hh:mm AM' in the location's UTC offset."""
    tz = timezone(timedelta(seconds=utc_offset))
    return datetime.fromtimestamp(timestamp, tz=tz).strftime("%I:%M %p")


def format_date(day: date) -> str:
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


def _format_number(value: Union[int, float]) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def build_details(reading: WeatherReading) -> List[DetailRow]:
    """Six rows, always in the same order."""
    offset = reading.timezone
    return [
        DetailRow(icon="cloud-rain", label="Cloudiness", value=f"{_format_number(reading.clouds.all)}%"),
        DetailRow(icon="droplet", label="Humidity", value=f"{_format_number(reading.main.humidity)}%"),
        DetailRow(icon="wind", label="Wind Speed", value=f"{_format_number(reading.wind.speed)} m/s"),
        DetailRow(icon="sunrise", label="Sunrise", value=format_time(reading.sys.sunrise, offset)),
        DetailRow(icon="sunset", label="Sunset", value=format_time(reading.sys.sunset, offset)),
        DetailRow(icon="compass", label="Wind Direction", value=f"{_format_number(reading.wind.deg)}°"),
    ]


def build_view_model(reading: WeatherReading, today: Optional[date] = None) -> ViewModel:
    temperature = kelvin_to_celsius(reading.main.temp)
    theme = background_theme(temperature)
    condition = reading.condition
    return ViewModel(
        temperature=temperature,
        feels_like=kelvin_to_celsius(reading.main.feels_like),
        city=reading.name,
        description=condition.description,
        icon=condition.icon,
        formatted_date=format_date(today or date.today()),
        sunrise=format_time(reading.sys.sunrise, reading.timezone),
        sunset=format_time(reading.sys.sunset, reading.timezone),
        theme=theme,
        gradient=THEME_GRADIENTS[theme],
        details=build_details(reading),
    )


def placeholder_view_model(today: Optional[date] = None) -> ViewModel:
    """Shown while a lookup is in flight; never reads from a payload."""
    theme = background_theme(0)
    return ViewModel(
        formatted_date=format_date(today or date.today()),
        theme=theme,
        gradient=THEME_GRADIENTS[theme],
        searching=True,
    )
