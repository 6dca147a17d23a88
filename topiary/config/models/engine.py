"""Turn engine configuration model."""

from pydantic import BaseModel, Field


class EngineConfig(BaseModel):
    """Configuration for the turn engine."""

    persist_on_error: bool = Field(
        default=False,
        description="Save conversation state even when a turn raises",
    )
