# app/routers/insurer.py
from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from app.core.dependencies import get_claim_service, require_session
from app.models.claim import Claim
from app.services.claim_service import ClaimService

router = APIRouter(prefix="/insurer", tags=["insurer"])


@router.get("/claims", response_model=List[Claim], dependencies=[Depends(require_session)])
async def search_claims(
    first_name: Optional[str] = Query(None, alias="firstName"),
    last_name: Optional[str] = Query(None, alias="lastName"),
    policy_number: Optional[str] = Query(None, alias="policyNumber"),
    service: ClaimService = Depends(get_claim_service)
):
    """Authenticated search; omitted filters match anything, none lists every claim."""
    return await service.search_wildcard(first_name, last_name, policy_number)
