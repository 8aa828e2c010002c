"""Local persistence for journal state."""

from .journal_store import JournalStore

__all__ = ["JournalStore"]
