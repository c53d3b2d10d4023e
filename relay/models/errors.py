"""Relay error taxonomy. Each error carries the HTTP status it maps to."""


class RelayError(Exception):
    """Base for every failure the gateway reports to the caller."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(RelayError):
    """Malformed or out-of-range request body."""


class UnsupportedLocation(RelayError):
    """The coordinate has no NWS forecast resource."""


class NoData(RelayError):
    """The forecast came back without any periods."""


class UpstreamError(RelayError):
    """Transport failure or non-success status from the NWS API."""

    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class StaticAssetNotFound(RelayError):
    status_code = 404


class PathTraversal(RelayError):
    status_code = 403
