"""
Dataset loading and the read-only record store.
"""
from app.services.loaders.record_loader import (
    DataIntegrityError,
    build_record_store,
    load_facilities,
    load_record_store,
    load_records,
)
from app.services.loaders.record_store import RecordStore

__all__ = [
    "DataIntegrityError",
    "RecordStore",
    "build_record_store",
    "load_facilities",
    "load_record_store",
    "load_records",
]
