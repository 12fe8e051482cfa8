"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["ACCOUNT_NOT_FOUND"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Account not found: 9999999999"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "ACCOUNT_NOT_FOUND",
                    "message": "Account not found: 9999999999",
                    "request_id": "3f1c2a9e-8d4b-4e7a-9c61-2b5d0f7e4a10",
                }
            ]
        }
    }
