"""Base model classes for MCP Soul."""

from pydantic import BaseModel, ConfigDict


class SoulBaseModel(BaseModel):
    """Base model with common configuration for all MCP Soul models."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Validate assignment after model creation
        validate_assignment=True,
        # Reject unknown fields instead of dropping them
        extra='forbid',
    )
