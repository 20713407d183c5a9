"""
Filter criteria model.
"""

from datetime import datetime
from typing import FrozenSet, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MAX_RESULTS = 20


class FilterCriteria(BaseModel):
    """
    Filters applied to a list of search results.

    String sets are stored as frozensets; matching against them is
    case-insensitive. Dates bound an inclusive window and must carry
    a timezone.
    """

    model_config = ConfigDict(validate_assignment=True)

    from_date: Optional[datetime] = Field(default=None, description="Earliest indexed time")
    to_date: Optional[datetime] = Field(default=None, description="Latest indexed time")

    domain_whitelist: FrozenSet[str] = Field(default_factory=frozenset)
    domain_blacklist: FrozenSet[str] = Field(default_factory=frozenset)
    mime_types: FrozenSet[str] = Field(default_factory=frozenset)
    language_codes: FrozenSet[str] = Field(default_factory=frozenset)

    safe_only: bool = Field(default=True, description="Keep only safe results")
    max_results: int = Field(
        default=DEFAULT_MAX_RESULTS,
        gt=0,
        description="Maximum number of results to keep"
    )

    @field_validator("from_date", "to_date")
    @classmethod
    def require_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Reject naive datetimes so comparisons stay well defined."""
        if v is not None and v.utcoffset() is None:
            raise ValueError("date bounds must be timezone-aware")
        return v

    @field_validator(
        "domain_whitelist", "domain_blacklist", "mime_types", "language_codes",
        mode="before"
    )
    @classmethod
    def normalize_entries(cls, v: Union[str, Iterable[str], None]) -> FrozenSet[str]:
        """Accept any iterable (or a comma-separated string), drop blanks."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = v.split(",")
        return frozenset(entry.strip() for entry in v if entry and entry.strip())
