"""
Configuration Models

Pydantic models for type-safe configuration management with validation,
defaults, and field documentation.
"""

from datetime import date, datetime, timezone
from typing import List, Literal, Optional

from dateutil import parser as date_parser
from pydantic import BaseModel, Field, field_validator, model_validator


class FilterConfig(BaseModel):
    """Configuration for selecting tweets."""

    author: Optional[str] = Field(
        default=None,
        description="Keep tweets written by this user (case-insensitive)"
    )
    since: Optional[datetime] = Field(
        default=None,
        description="Keep tweets sent on or after this instant (ISO format or any dateutil-readable date)"
    )
    until: Optional[datetime] = Field(
        default=None,
        description="Keep tweets sent on or before this instant"
    )
    words: List[str] = Field(
        default=[],
        description="Keep tweets containing any of these words (case-insensitive substring)"
    )
    composition: Literal["and", "or"] = Field(
        default="and",
        description="Combine the configured criteria with AND or OR"
    )

    @field_validator('since', 'until', mode='before')
    @classmethod
    def parse_date(cls, v):
        """Parse date strings with dateutil, treating naive values as UTC."""
        if v is None or v == "":
            return None
        if isinstance(v, str):
            try:
                v = date_parser.parse(v)
            except (ValueError, OverflowError) as e:
                raise ValueError(f"Could not parse date '{v}': {e}")
        elif isinstance(v, date) and not isinstance(v, datetime):
            # YAML loads bare dates as date objects
            v = datetime(v.year, v.month, v.day)
        if isinstance(v, datetime) and v.tzinfo is None:
            v = v.replace(tzinfo=timezone.utc)
        return v

    @field_validator('composition', mode='before')
    @classmethod
    def normalize_composition(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('words')
    @classmethod
    def validate_words(cls, v: List[str]) -> List[str]:
        """Words must be nonempty runs of nonspace characters."""
        for word in v:
            if not word or any(ch.isspace() for ch in word):
                raise ValueError(f"Invalid word {word!r}: words must be nonempty and contain no spaces")
        return v

    @model_validator(mode='after')
    def validate_window(self):
        if self.since is not None and self.until is not None and self.since > self.until:
            raise ValueError("since must be on or before until")
        return self

    def is_empty(self) -> bool:
        """Whether no selection criterion is configured."""
        return self.author is None and self.since is None and self.until is None and not self.words


class OutputConfig(BaseModel):
    """Configuration for how results are printed."""

    format: Literal["table", "json"] = Field(
        default="table",
        description="Print results as a table or as JSON lines"
    )
    max_text_width: int = Field(
        default=80,
        ge=10,
        le=500,
        description="Truncate tweet text in tables to this many characters"
    )


class AppConfig(BaseModel):
    """Root application configuration model."""

    filters: FilterConfig = Field(default_factory=FilterConfig, description="Filter configuration")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output configuration")

    verbose: bool = Field(
        default=False,
        description="Enable verbose logging output"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with detailed logging"
    )
