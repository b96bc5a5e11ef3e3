# app/storage/memory.py
"""In-process collection used for tests and local runs without Neo4j."""

from typing import Optional, List, Dict, Any
import copy

from app.core.constants import PRIMARY_KEY
from app.core.logging import get_logger
from app.storage.base import DocumentCollection, Document

logger = get_logger(__name__)


class MemoryCollection(DocumentCollection):
    """Dict-backed collection. Insertion order is preserved."""

    def __init__(self, name: str):
        super().__init__(name)
        self._documents: Dict[str, Document] = {}

    @staticmethod
    def _matches(document: Document, filters: Dict[str, Any]) -> bool:
        for key, value in filters.items():
            if key not in document or document[key] != value:
                return False
        return True

    async def find_one(self, filters: Dict[str, Any]) -> Optional[Document]:
        for document in self._documents.values():
            if self._matches(document, filters):
                return copy.deepcopy(document)
        return None

    async def find(self, filters: Dict[str, Any]) -> List[Document]:
        return [
            copy.deepcopy(d) for d in self._documents.values()
            if self._matches(d, filters)
        ]

    async def insert_one(self, document: Document) -> str:
        document_id = document[PRIMARY_KEY]
        if document_id in self._documents:
            raise ValueError(f"Duplicate {PRIMARY_KEY} in {self.name}: {document_id}")
        self._documents[document_id] = copy.deepcopy(document)
        logger.debug(f"Inserted into {self.name}", id=document_id)
        return document_id

    def count(self) -> int:
        return len(self._documents)
