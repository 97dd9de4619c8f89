"""
Adapters layer - Reference implementations of the storage and lookup collaborators.
"""

from .court_lookup import ConfigCourtLookup
from .slot_store import InMemorySlotStore, JsonFileSlotStore

__all__ = ["ConfigCourtLookup", "InMemorySlotStore", "JsonFileSlotStore"]
