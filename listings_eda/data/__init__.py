"""Data loading, normalization, derivation, and in-memory store."""
from .loader import load_listings, select_columns
from .normalize import normalize_fields
from .derive import derive_fields
from .pipeline import run_pipeline
from .store import ListingStore
from .schemas import ListingRecord, ReviewCategory, SchemaError
