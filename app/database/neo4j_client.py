# app/database/neo4j_client.py
from neo4j import AsyncGraphDatabase
from neo4j.exceptions import AuthError, ServiceUnavailable, SessionExpired
from typing import Optional, List, Dict, Any

from app.core.config import settings
from app.core.constants import PRIMARY_KEY
from app.core.exceptions import StorageConnectionError
from app.core.logging import get_logger
from app.storage.base import DocumentCollection, Document

logger = get_logger(__name__)


class Neo4jClient:
    """Owns the driver; hands out one collection per node label."""

    def __init__(
        self,
        uri: Optional[str] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        database: Optional[str] = None
    ):
        self.driver = AsyncGraphDatabase.driver(
            uri or settings.NEO4J_URI,
            auth=(user or settings.NEO4J_USER, password or settings.NEO4J_PASSWORD)
        )
        self.database = database or settings.NEO4J_DATABASE

    async def close(self):
        await self.driver.close()

    def collection(self, label: str) -> "Neo4jCollection":
        return Neo4jCollection(self, label)

    async def run(self, query: str, **params) -> List[Dict[str, Any]]:
        """Run a query in a fresh session and return all records as dicts."""
        try:
            async with self.driver.session(database=self.database) as session:
                result = await session.run(query, **params)
                return [record.data() async for record in result]
        except (ServiceUnavailable, SessionExpired, AuthError) as e:
            logger.error(f"Neo4j query failed: {e}")
            raise StorageConnectionError(str(e)) from e


class Neo4jCollection(DocumentCollection):
    """Documents stored as nodes with a fixed label; properties are the fields.

    Neo4j does not store null properties, so absent fields come back missing.
    """

    def __init__(self, client: Neo4jClient, label: str):
        super().__init__(label)
        self.client = client
        self.label = label

    async def find_one(self, filters: Dict[str, Any]) -> Optional[Document]:
        records = await self.client.run(f"""
            MATCH (n:{self.label})
            WHERE all(key IN keys($filters) WHERE n[key] = $filters[key])
            RETURN properties(n) AS document
            LIMIT 1
        """,
            filters=filters
        )
        return records[0]["document"] if records else None

    async def find(self, filters: Dict[str, Any]) -> List[Document]:
        records = await self.client.run(f"""
            MATCH (n:{self.label})
            WHERE all(key IN keys($filters) WHERE n[key] = $filters[key])
            RETURN properties(n) AS document
        """,
            filters=filters
        )
        return [record["document"] for record in records]

    async def insert_one(self, document: Document) -> str:
        records = await self.client.run(f"""
            CREATE (n:{self.label})
            SET n = $document
            RETURN n.{PRIMARY_KEY} AS id
        """,
            document=document
        )
        return records[0]["id"]

    async def ensure_indexes(self):
        constraint = f"{self.label.lower()}_{PRIMARY_KEY}_unique"
        await self.client.run(f"""
            CREATE CONSTRAINT {constraint} IF NOT EXISTS
            FOR (n:{self.label}) REQUIRE n.{PRIMARY_KEY} IS UNIQUE
        """)
        logger.info(f"Ensured unique {PRIMARY_KEY} constraint", label=self.label)
