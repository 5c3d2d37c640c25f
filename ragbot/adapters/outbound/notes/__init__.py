"""Notes storage adapters."""

from .airtable_adapter import AirtableNotesAdapter, mask_token

__all__ = ["AirtableNotesAdapter", "mask_token"]
