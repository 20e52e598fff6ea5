"""
FastAPI dependencies.

The record store is built once by the application factory and kept on
``app.state``; handlers receive it (or a selector over it) through these.
"""
from fastapi import Depends, Query, Request

from app.core.config import Config
from app.pydantic_models import FilterSpec
from app.services.loaders import RecordStore
from app.services.selectors import EmissionSelector
from app.utils.constants import ALL_SCOPES


def get_app_config(request: Request) -> Config:
    """Configuration the running app was created with."""
    return request.app.state.config


def get_record_store(request: Request) -> RecordStore:
    """Read-only dataset loaded at startup."""
    return request.app.state.record_store


def get_emission_selector(
    store: RecordStore = Depends(get_record_store),
) -> EmissionSelector:
    """Selector over the loaded dataset."""
    return EmissionSelector(store)


def get_filter_spec(
    search: str = Query("", description="Whitespace-separated search terms", examples=["adani jsw"]),
    company: list[str] = Query(
        [], description="Selected company names (repeat the parameter)", examples=[["Tata Steel"]]
    ),
    scope: str = Query(
        ALL_SCOPES,
        description="'all', 'Scope 1', 'Scope 2' or 'Scope 3'; unknown values mean 'all'",
        examples=["Scope 2"],
    ),
) -> FilterSpec:
    """Build the filter specification from the search widgets' query parameters."""
    return FilterSpec(search_text=search, selected_companies=company, selected_scope=scope)
