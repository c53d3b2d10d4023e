"""Request bodies accepted by the gateway's API routes."""

from pydantic import BaseModel, Field

from relay.models.weather import Coordinate


class ForecastRequest(BaseModel):
    model_config = {"strict": True}

    latitude: float = Field(ge=-90.0, le=90.0, allow_inf_nan=False)
    longitude: float = Field(ge=-180.0, le=180.0, allow_inf_nan=False)

    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


class AlertsRequest(BaseModel):
    model_config = {"strict": True}

    # Two-letter postal code, upper-cased before use.
    state: str = Field(pattern=r"^[A-Za-z]{2}$")

    @property
    def state_code(self) -> str:
        return self.state.upper()
