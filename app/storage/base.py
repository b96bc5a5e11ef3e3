# app/storage/base.py
"""Base storage interface.

A collection holds flat documents keyed by ``id``. Filters are exact-match on
every given field; a field left out of the filter matches anything.
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any

Document = Dict[str, Any]


class DocumentCollection(ABC):
    """Abstract base class for all collection implementations."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    async def find_one(self, filters: Dict[str, Any]) -> Optional[Document]:
        """Return the first document matching ``filters`` or None."""
        pass

    @abstractmethod
    async def find(self, filters: Dict[str, Any]) -> List[Document]:
        """Return all documents matching ``filters``."""
        pass

    @abstractmethod
    async def insert_one(self, document: Document) -> str:
        """Persist a new document and return its id."""
        pass

    async def ensure_indexes(self):
        """Create backend indexes/constraints. No-op by default."""
        pass
