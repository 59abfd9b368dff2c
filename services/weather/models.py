"""
Schema for the OpenWeatherMap current-conditions payload.

The payload is validated on receipt; fields the view does not use are
ignored. Temperatures are in Kelvin (the request does not ask for metric
units).
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SUCCESS_CODE = 200


def parse_status_code(value) -> Optional[int]:
    """Normalize the `cod` field, which arrives as 200 on success and "404" on failure."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class _Block(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class MainConditions(_Block):
    temp: float = Field(..., ge=0, allow_inf_nan=False, description="Temperature (K)")
    feels_like: float = Field(..., ge=0, allow_inf_nan=False, description="Feels-like temperature (K)")
    humidity: float = Field(..., allow_inf_nan=False, description="Humidity (%)")


class Clouds(_Block):
    all: float = Field(..., allow_inf_nan=False, description="Cloudiness (%)")


class Wind(_Block):
    speed: float = Field(..., allow_inf_nan=False, description="Wind speed (m/s)")
    deg: float = Field(..., allow_inf_nan=False, description="Wind direction (degrees)")


class SunTimes(_Block):
    sunrise: int = Field(..., description="Sunrise (Unix seconds, UTC)")
    sunset: int = Field(..., description="Sunset (Unix seconds, UTC)")
    country: Optional[str] = None


class WeatherCondition(_Block):
    description: str
    icon: str
    main: str = ""


class WeatherReading(_Block):
    """Current conditions for one location, as returned by the provider."""

    cod: int
    name: str = ""
    timezone: int = Field(0, description="Shift from UTC (seconds)")
    main: MainConditions
    clouds: Clouds
    wind: Wind
    sys: SunTimes
    weather: List[WeatherCondition] = Field(..., min_length=1)

    @field_validator("cod", mode="before")
    @classmethod
    def _normalize_cod(cls, value):
        code = parse_status_code(value)
        if code is None:
            raise ValueError(f"invalid status code: {value!r}")
        return code

    @property
    def condition(self) -> WeatherCondition:
        return self.weather[0]
