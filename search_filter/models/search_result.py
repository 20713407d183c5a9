"""
Search result model.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime


class SearchResult(BaseModel):
    """
    Represents a single search result from the search provider.

    Results are immutable and identified by their link: two results
    with the same link compare equal.
    """

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = Field(default=None, description="Page title")
    link: Optional[str] = Field(default=None, description="Page URL")
    display_link: Optional[str] = Field(default=None, description="Domain/hostname")
    snippet: Optional[str] = Field(default=None, description="Search snippet")
    mime_type: Optional[str] = Field(default=None, description="Content MIME type")
    file_format: Optional[str] = Field(default=None, description="File format label")

    # Optional metadata
    indexed_time: Optional[datetime] = Field(
        default=None,
        description="Publication/update timestamp if available"
    )
    language_code: Optional[str] = Field(default=None, description="Locale, e.g. 'en-US'")
    safe: bool = Field(default=True, description="Produced under safe search")

    @field_validator("indexed_time")
    @classmethod
    def require_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Reject naive timestamps."""
        if v is not None and v.utcoffset() is None:
            raise ValueError("indexed_time must be timezone-aware")
        return v

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchResult):
            return NotImplemented
        return self.link == other.link

    def __hash__(self) -> int:
        return hash(self.link)

    def __str__(self) -> str:
        return f"{self.title} ({self.display_link})"
