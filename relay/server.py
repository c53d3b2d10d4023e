"""Weather relay gateway: FastAPI app forwarding forecast and alert lookups to NWS."""

import json
import logging

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel, ValidationError

from relay.config.schema import RelayConfig
from relay.ingest.nws_client import NwsClient
from relay.models.errors import InvalidInput, RelayError
from relay.models.requests import AlertsRequest, ForecastRequest
from relay.pipeline.lookups import lookup_alerts, lookup_forecast
from relay.static_assets import content_type_for, resolve_asset

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def _read_body(request: Request, model: type[BaseModel], invalid: str):
    """Buffer the whole request body, then parse and validate it."""
    body = await request.body()
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise InvalidInput("Invalid JSON body") from e
    if not isinstance(payload, dict):
        raise InvalidInput(invalid)
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise InvalidInput(invalid) from e


def create_app(config: RelayConfig | None = None, client: NwsClient | None = None) -> FastAPI:
    config = config or RelayConfig()
    client = client or NwsClient(config.nws.base_url, config.nws.user_agent)
    public_dir = config.public_dir

    app = FastAPI(
        title="Weather Relay",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError) -> Response:
        logger.info(
            "%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message
        )
        if exc.status_code == 400:
            return JSONResponse({"error": exc.message}, status_code=400)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.middleware("http")
    async def cors_and_errors(request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            response: Response = Response(status_code=200)
        else:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception("Unhandled error: %s %s", request.method, request.url.path)
                response = PlainTextResponse("Internal Server Error", status_code=500)
        response.headers.update(CORS_HEADERS)
        return response

    # ── API ─────────────────────────────────────────────────────

    @app.post("/api/forecast")
    async def forecast(request: Request):
        """Text forecast for a latitude/longitude pair."""
        body = await _read_body(request, ForecastRequest, "Invalid latitude or longitude")
        return {"forecast": await lookup_forecast(client, body.coordinate())}

    @app.post("/api/alerts")
    async def alerts(request: Request):
        """Active alerts for a two-letter state code."""
        body = await _read_body(request, AlertsRequest, "Invalid state code")
        return {"alerts": await lookup_alerts(client, body.state_code)}

    # ── Static front-end ────────────────────────────────────────

    @app.api_route(
        "/{asset_path:path}",
        methods=["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH"],
    )
    def serve_asset(asset_path: str):
        path = resolve_asset(public_dir, asset_path)
        return FileResponse(path, media_type=content_type_for(path))

    return app
