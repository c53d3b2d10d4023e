"""NWS forecast and alert data models."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


def _field(raw: dict, key: str) -> Any:
    """Return a field, treating null and empty strings as absent."""
    value = raw.get(key)
    if value is None or value == "":
        return None
    return value


def format_coordinate(value: float) -> str:
    """Render a coordinate the way the caller sent it (40, not 40.0)."""
    if float(value).is_integer():
        return str(int(value))
    text = repr(float(value))
    if "e" in text:
        # 1e-05 -> 0.00001
        text = format(Decimal(text), "f")
    return text


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"{format_coordinate(self.latitude)}, {format_coordinate(self.longitude)}"


@dataclass(frozen=True)
class GridPoint:
    forecast_url: str | None

    @classmethod
    def from_api(cls, raw: Any) -> "GridPoint":
        properties = raw.get("properties") if isinstance(raw, dict) else None
        if not isinstance(properties, dict):
            return cls(forecast_url=None)
        url = _field(properties, "forecast")
        return cls(forecast_url=url if isinstance(url, str) else None)


@dataclass(frozen=True)
class ForecastPeriod:
    name: str | None = None
    temperature: int | float | str | None = None
    temperature_unit: str | None = None
    wind_speed: str | None = None
    wind_direction: str | None = None
    short_forecast: str | None = None

    @classmethod
    def from_api(cls, raw: dict) -> "ForecastPeriod":
        return cls(
            name=_field(raw, "name"),
            temperature=_field(raw, "temperature"),
            temperature_unit=_field(raw, "temperatureUnit"),
            wind_speed=_field(raw, "windSpeed"),
            wind_direction=_field(raw, "windDirection"),
            short_forecast=_field(raw, "shortForecast"),
        )


@dataclass(frozen=True)
class AlertFeature:
    event: str | None = None
    area_desc: str | None = None
    severity: str | None = None
    status: str | None = None
    headline: str | None = None

    @classmethod
    def from_api(cls, raw: dict) -> "AlertFeature":
        props = raw.get("properties")
        if not isinstance(props, dict):
            props = {}
        return cls(
            event=_field(props, "event"),
            area_desc=_field(props, "areaDesc"),
            severity=_field(props, "severity"),
            status=_field(props, "status"),
            headline=_field(props, "headline"),
        )


def parse_periods(raw: Any) -> list[ForecastPeriod]:
    """Extract forecast periods from a /gridpoints forecast response."""
    properties = raw.get("properties") if isinstance(raw, dict) else None
    if not isinstance(properties, dict):
        return []
    periods = properties.get("periods") or []
    return [ForecastPeriod.from_api(p) for p in periods if isinstance(p, dict)]


def parse_alerts(raw: Any) -> list[AlertFeature]:
    """Extract alert features from an /alerts response."""
    features = (raw.get("features") if isinstance(raw, dict) else None) or []
    return [AlertFeature.from_api(f) for f in features if isinstance(f, dict)]
