"""
Service layer helpers that orchestrate storage collaborators and domain logic.
"""

from .protocols import CourtLookupProtocol, SlotStoreProtocol
from .slot_generation import SlotGenerationService
from .slot_service import SlotService

__all__ = ["CourtLookupProtocol", "SlotStoreProtocol", "SlotGenerationService", "SlotService"]
