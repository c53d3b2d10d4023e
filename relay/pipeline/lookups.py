"""Forecast and alert lookups: upstream round trips followed by formatting."""

import logging

from relay.ingest.nws_client import NwsClient
from relay.models.errors import NoData, UnsupportedLocation, UpstreamError
from relay.models.weather import Coordinate, GridPoint, parse_alerts, parse_periods
from relay.reporting.formatters import format_alerts, format_forecast

logger = logging.getLogger(__name__)


async def lookup_forecast(client: NwsClient, coord: Coordinate) -> str:
    """Resolve the grid point for a coordinate, then fetch and render its forecast.

    The two upstream calls are sequential: the forecast URL comes from
    the grid point response.
    """
    unsupported = UnsupportedLocation(
        f"Location {coord} is not supported by the NWS API (US locations only)"
    )
    try:
        raw_point = await client.get_json(
            client.points_url(coord.latitude, coord.longitude)
        )
    except UpstreamError as e:
        # NWS answers 404 for points outside its coverage.
        if e.upstream_status == 404:
            raise unsupported from e
        raise

    point = GridPoint.from_api(raw_point)
    if point.forecast_url is None:
        raise unsupported

    periods = parse_periods(await client.get_json(point.forecast_url))
    if not periods:
        raise NoData("No forecast periods available")

    logger.info("Forecast for %s: %d periods", coord, len(periods))
    return format_forecast(coord, periods)


async def lookup_alerts(client: NwsClient, state_code: str) -> str:
    """Fetch and render active alerts for an upper-case state code."""
    alerts = parse_alerts(await client.get_json(client.alerts_url(state_code)))
    logger.info("Alerts for %s: %d active", state_code, len(alerts))
    return format_alerts(state_code, alerts)
