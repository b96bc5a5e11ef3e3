# app/services/claim_service.py
"""Create, fetch and search claim records."""

from typing import Optional, List, Dict, Any

from app.core.constants import EXACT_SEARCH_FIELDS, PRIMARY_KEY
from app.core.exceptions import ClaimNotFoundError, SearchParametersMissingError
from app.core.logging import get_logger
from app.models.claim import Claim, ClaimCreate
from app.storage.base import DocumentCollection

logger = get_logger(__name__)


class ClaimService:
    """Claim operations over one injected collection."""

    def __init__(self, collection: DocumentCollection):
        self.collection = collection

    async def create(self, submission: ClaimCreate) -> Claim:
        """Persist a new claim. No validation, no de-duplication."""
        claim = Claim.from_submission(submission)
        await self.collection.insert_one(claim.to_document())
        logger.info("Claim created", id=claim.id, policy_number=claim.policy_number)
        return claim

    async def get_by_id(self, claim_id: str) -> Optional[Claim]:
        """Return the claim or None; callers decide what missing means."""
        document = await self.collection.find_one({PRIMARY_KEY: claim_id})
        if document is None:
            logger.debug("Claim lookup missed", id=claim_id)
            return None
        return Claim.model_validate(document)

    async def require(self, claim_id: str) -> Claim:
        claim = await self.get_by_id(claim_id)
        if claim is None:
            raise ClaimNotFoundError(claim_id)
        return claim

    async def search_exact(
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        policy_number: Optional[str]
    ) -> List[Claim]:
        """Exact match on all three fields; every one must be non-empty."""
        query = {
            "firstName": first_name or "",
            "lastName": last_name or "",
            "policyNumber": policy_number or "",
        }
        missing = [field for field in EXACT_SEARCH_FIELDS if query[field] == ""]
        if missing:
            raise SearchParametersMissingError(missing)
        return await self._find(query)

    async def search_wildcard(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        policy_number: Optional[str] = None
    ) -> List[Claim]:
        """Match on the given fields; omitted fields match anything."""
        query = {
            "firstName": first_name,
            "lastName": last_name,
            "policyNumber": policy_number,
        }
        return await self._find({k: v for k, v in query.items() if v is not None})

    async def search_by_policy(self, policy_number: str) -> List[Claim]:
        return await self._find({"policyNumber": policy_number})

    async def _find(self, query: Dict[str, Any]) -> List[Claim]:
        logger.info("Searching claims", **query)
        documents = await self.collection.find(query)
        return [Claim.model_validate(d) for d in documents]
