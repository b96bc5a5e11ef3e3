from enum import Enum

class ClaimStatus(str, Enum):
    UNPROCESSED = "Unprocessed"
    PROCESSING = "Processing"
    CLOSED = "Closed"

    @classmethod
    def initial(cls) -> "ClaimStatus":
        return cls.UNPROCESSED

class StorageBackend(str, Enum):
    NEO4J = "neo4j"
    MEMORY = "memory"
