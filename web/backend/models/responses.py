#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict


class CompatibilityTriggerResponse(BaseModel):
    """Acknowledgement that a compatibility run was scheduled."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "user_id": "8c1f0b6e-5d1a-4c55-9a0e-2f3b7c9d1e42",
                "message": "Compatibility calculation scheduled"
            }
        }
    )

    success: bool
    user_id: str
    message: str


class HealthResponse(BaseModel):
    status: str
    service: str
