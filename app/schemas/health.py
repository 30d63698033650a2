from pydantic import BaseModel, ConfigDict, Field


class ServicesStatus(BaseModel):
    """Status of the services the API depends on."""

    database: str = Field(description="ok or unavailable")
    ai_client: str = Field(description="initialized or not_initialized")


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    model_config = ConfigDict(ser_json_timedelta="iso8601", ser_json_bytes="utf8")

    version: str = Field(description="API version")
    status: str = Field(description="Overall health status")
    timestamp: str = Field(description="Current timestamp")
    services: ServicesStatus = Field(description="Status of dependent services")
