# app/core/dependencies.py
from typing import Any, Dict

from fastapi import Request

from app.core.config import settings
from app.core.constants import CLAIM_LABEL, CREDENTIAL_LABEL
from app.core.exceptions import StorageConnectionError
from app.core.logging import get_logger
from app.core.security import decode_token, require_secret
from app.models.enums import StorageBackend
from app.services.auth_service import AuthService
from app.services.claim_service import ClaimService
from app.services.places import PlacesClient

logger = get_logger(__name__)

# ===================
# Startup / Shutdown
# ===================

async def init_resources(state):
    """Create the long-lived store and HTTP client and attach them to app.state."""
    require_secret()

    backend = StorageBackend(settings.STORAGE_BACKEND)
    if backend is StorageBackend.NEO4J:
        from app.database.neo4j_client import Neo4jClient
        state.neo4j_client = Neo4jClient()
        state.claims = state.neo4j_client.collection(CLAIM_LABEL)
        state.credentials = state.neo4j_client.collection(CREDENTIAL_LABEL)
        try:
            await state.claims.ensure_indexes()
            await state.credentials.ensure_indexes()
        except StorageConnectionError as e:
            logger.warning(f"Could not ensure constraints: {e.message}")
    else:
        from app.storage.memory import MemoryCollection
        state.neo4j_client = None
        state.claims = MemoryCollection(CLAIM_LABEL)
        state.credentials = MemoryCollection(CREDENTIAL_LABEL)

    state.places = PlacesClient()
    logger.info("Resources initialized", storage=backend.value)


async def cleanup_resources(state):
    """Cleanup all resources on shutdown."""
    places = getattr(state, "places", None)
    if places:
        await places.close()
        state.places = None

    client = getattr(state, "neo4j_client", None)
    if client:
        await client.close()
        state.neo4j_client = None
        logger.info("Neo4j client closed")

# ===================
# Request Dependencies
# ===================

def get_claim_service(request: Request) -> ClaimService:
    return ClaimService(request.app.state.claims)


def get_auth_service(request: Request) -> AuthService:
    return AuthService(request.app.state.credentials)


def get_places_client(request: Request) -> PlacesClient:
    return request.app.state.places


def require_session(request: Request) -> Dict[str, Any]:
    """Verify the session cookie; any validly signed token is accepted."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    return decode_token(token)
