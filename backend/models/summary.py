from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator

class SummarizeRequest(BaseModel):
    # Both optional so that missing fields reach the route's own validation
    text: str | None = None
    length: str | None = None           # "short" | "medium" | "detailed"

    @field_validator("length", mode="before")
    @classmethod
    def ignore_non_string_length(cls, value: Any) -> str | None:
        # Unrecognised options fall back to medium, whatever their JSON type
        return value if isinstance(value, str) else None

class SummaryStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reduction: int                                        # percent
    time_saved: int = Field(alias="timeSaved")            # minutes at 200 wpm
    original_word_count: int = Field(alias="originalWordCount")
    summary_word_count: int = Field(alias="summaryWordCount")

class SummarizeResponse(BaseModel):
    summary: str
    stats: SummaryStats

class HealthResponse(BaseModel):
    status: str
    message: str

class ErrorResponse(BaseModel):
    error: str
