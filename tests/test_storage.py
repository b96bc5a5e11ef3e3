"""Tests for the collection backends."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from app.database.neo4j_client import Neo4jCollection
from app.storage.memory import MemoryCollection


class TestMemoryCollection:
    def test_filters_are_exact_and_conjunctive(self) -> None:
        collection = MemoryCollection("Claim")

        async def scenario() -> None:
            await collection.insert_one({"id": "1", "firstName": "Jane", "lastName": "Doe"})
            await collection.insert_one({"id": "2", "firstName": "Jane", "lastName": "Roe"})
            await collection.insert_one({"id": "3", "firstName": "jane", "lastName": "Doe"})

            assert [d["id"] for d in await collection.find({"firstName": "Jane"})] == ["1", "2"]
            assert [d["id"] for d in await collection.find({"firstName": "Jane", "lastName": "Doe"})] == ["1"]
            assert len(await collection.find({})) == 3
            assert await collection.find_one({"id": "4"}) is None

        asyncio.run(scenario())

    def test_returned_documents_are_copies(self) -> None:
        collection = MemoryCollection("Claim")

        async def scenario() -> None:
            await collection.insert_one({"id": "1", "status": "Unprocessed"})
            found = await collection.find_one({"id": "1"})
            found["status"] = "Closed"
            assert (await collection.find_one({"id": "1"}))["status"] == "Unprocessed"

        asyncio.run(scenario())

    def test_duplicate_id_is_rejected(self) -> None:
        collection = MemoryCollection("Claim")

        async def scenario() -> None:
            await collection.insert_one({"id": "1"})
            with pytest.raises(ValueError):
                await collection.insert_one({"id": "1"})

        asyncio.run(scenario())
        assert collection.count() == 1


class FakeNeo4jClient:
    """Records queries and replays canned records."""

    def __init__(self, records: list[dict[str, Any]]) -> None:
        self.records = records
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def run(self, query: str, **params: Any) -> list[dict[str, Any]]:
        self.calls.append((query, params))
        return self.records


class TestNeo4jCollection:
    def test_find_one_passes_filters_as_parameter(self) -> None:
        client = FakeNeo4jClient([{"document": {"id": "1", "firstName": "Jane"}}])
        collection = Neo4jCollection(client, "Claim")

        document = asyncio.run(collection.find_one({"id": "1"}))

        assert document == {"id": "1", "firstName": "Jane"}
        [(query, params)] = client.calls
        assert "MATCH (n:Claim)" in query
        assert "LIMIT 1" in query
        assert params == {"filters": {"id": "1"}}

    def test_find_one_miss(self) -> None:
        collection = Neo4jCollection(FakeNeo4jClient([]), "Claim")
        assert asyncio.run(collection.find_one({"id": "nope"})) is None

    def test_find_unwraps_documents(self) -> None:
        client = FakeNeo4jClient([{"document": {"id": "1"}}, {"document": {"id": "2"}}])
        collection = Neo4jCollection(client, "Credential")

        documents = asyncio.run(collection.find({}))

        assert documents == [{"id": "1"}, {"id": "2"}]
        assert "MATCH (n:Credential)" in client.calls[0][0]

    def test_insert_creates_labelled_node(self) -> None:
        client = FakeNeo4jClient([{"id": "abc"}])
        collection = Neo4jCollection(client, "Claim")

        assert asyncio.run(collection.insert_one({"id": "abc", "status": "Unprocessed"})) == "abc"
        query, params = client.calls[0]
        assert "CREATE (n:Claim)" in query
        assert params == {"document": {"id": "abc", "status": "Unprocessed"}}

    def test_ensure_indexes_creates_unique_constraint(self) -> None:
        client = FakeNeo4jClient([])
        asyncio.run(Neo4jCollection(client, "Claim").ensure_indexes())
        assert "REQUIRE n.id IS UNIQUE" in client.calls[0][0]
