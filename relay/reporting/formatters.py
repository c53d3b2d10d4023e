"""Plain-text renderers for forecast periods and alert features."""

from relay.models.weather import AlertFeature, Coordinate, ForecastPeriod

UNKNOWN = "Unknown"
SEPARATOR = "---"


def _or(value, placeholder: str) -> str:
    return placeholder if value is None else str(value)


def format_period(p: ForecastPeriod) -> str:
    lines = [
        f"{_or(p.name, UNKNOWN)}:",
        f"Temperature: {_or(p.temperature, UNKNOWN)}°{_or(p.temperature_unit, 'F')}",
        f"Wind: {_or(p.wind_speed, UNKNOWN)} {_or(p.wind_direction, '')}",
        _or(p.short_forecast, "No forecast available"),
        SEPARATOR,
    ]
    return "\n".join(lines)


def format_alert(a: AlertFeature) -> str:
    lines = [
        f"Event: {_or(a.event, UNKNOWN)}",
        f"Area: {_or(a.area_desc, UNKNOWN)}",
        f"Severity: {_or(a.severity, UNKNOWN)}",
        f"Status: {_or(a.status, UNKNOWN)}",
        f"Headline: {_or(a.headline, 'No headline')}",
        SEPARATOR,
    ]
    return "\n".join(lines)


def format_forecast(coord: Coordinate, periods: list[ForecastPeriod]) -> str:
    """Header line plus one block per period."""
    blocks = "\n".join(format_period(p) for p in periods)
    return f"Forecast for {coord}:\n\n{blocks}"


def format_alerts(state_code: str, alerts: list[AlertFeature]) -> str:
    if not alerts:
        return f"No active alerts for {state_code}"
    blocks = "\n".join(format_alert(a) for a in alerts)
    return f"Active alerts for {state_code}:\n\n{blocks}"
