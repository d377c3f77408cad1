"""Body of GET /health."""

from typing import Literal

from pydantic import Field

from roomkey.schemas.common import ApiResponse


class HealthResponse(ApiResponse):
    status: Literal["ok"] = "ok"
    environment: Literal["dev", "prod"] = Field(description="APP_ENV of the running process")
    database: Literal["connected", "disconnected"] = Field(
        description="Result of a SELECT 1 on a pooled connection",
    )
