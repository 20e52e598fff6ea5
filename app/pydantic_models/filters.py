"""
Filter specification supplied by the dashboard's search widgets.
"""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils.constants import ALL_SCOPES, SCOPE_FILTER_VALUES

logger = logging.getLogger(__name__)


class FilterSpec(BaseModel):
    """Search text, company selection and scope selection as one value."""

    model_config = ConfigDict(frozen=True)

    search_text: str = Field("", description="Whitespace-separated search terms")
    selected_companies: frozenset[str] = Field(
        default_factory=frozenset,
        description="Company names; empty means no company restriction",
    )
    selected_scope: str = Field(
        ALL_SCOPES, description="'all', 'Scope 1', 'Scope 2' or 'Scope 3'"
    )

    @field_validator("search_text", mode="before")
    @classmethod
    def _default_search_text(cls, value):
        return value or ""

    @field_validator("selected_companies", mode="before")
    @classmethod
    def _default_companies(cls, value):
        if not value:
            return frozenset()
        if isinstance(value, str):
            value = [value]
        return frozenset(name for name in value if name)

    @field_validator("selected_scope", mode="before")
    @classmethod
    def _normalize_scope(cls, value):
        if isinstance(value, Enum):
            value = value.value
        # Unrecognized selector values fail open to "all"
        if value not in SCOPE_FILTER_VALUES:
            if value is not None:
                logger.warning(f"Unknown scope filter {value!r}, using {ALL_SCOPES!r}")
            return ALL_SCOPES
        return value

    @property
    def search_terms(self) -> list[str]:
        return self.search_text.lower().split()

    @property
    def is_identity(self) -> bool:
        """True when no criterion narrows the input."""
        return (
            not self.search_terms
            and not self.selected_companies
            and self.selected_scope == ALL_SCOPES
        )
