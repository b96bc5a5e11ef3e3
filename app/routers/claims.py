# app/routers/claims.py
from fastapi import APIRouter, Depends, Query, Response
from typing import List, Optional

from app.core.dependencies import get_claim_service, get_places_client
from app.models.claim import Claim, ClaimCreate, ClaimSubmitResponse
from app.services.claim_service import ClaimService
from app.services.places import PlacesClient

router = APIRouter(prefix="/claims", tags=["claims"])


@router.post("", response_model=ClaimSubmitResponse)
async def submit_claim(
    claim: ClaimCreate,
    service: ClaimService = Depends(get_claim_service)
):
    """Store a new claim and return its id."""
    created = await service.create(claim)
    return ClaimSubmitResponse(id=created.id)


@router.get("", response_model=List[Claim])
async def search_claims(
    first_name: Optional[str] = Query(None, alias="firstName"),
    last_name: Optional[str] = Query(None, alias="lastName"),
    policy_number: Optional[str] = Query(None, alias="policyNumber"),
    service: ClaimService = Depends(get_claim_service)
):
    """Exact-match search. firstName, lastName and policyNumber are all required."""
    return await service.search_exact(first_name, last_name, policy_number)


@router.get("/search/{policy_number}", response_model=List[Claim])
async def search_by_policy(
    policy_number: str,
    service: ClaimService = Depends(get_claim_service)
):
    return await service.search_by_policy(policy_number)


@router.get("/map/{claim_id}")
async def get_claim_map(
    claim_id: str,
    service: ClaimService = Depends(get_claim_service),
    places: PlacesClient = Depends(get_places_client)
):
    """Static map image centred on the claim's address."""
    claim = await service.require(claim_id)
    content, media_type = await places.static_map(claim.address)
    return Response(content=content, media_type=media_type)


@router.get("/{claim_id}", response_model=Optional[Claim])
async def get_claim(
    claim_id: str,
    service: ClaimService = Depends(get_claim_service)
):
    """Fetch one claim. An unknown id yields a null body, not a 404."""
    return await service.get_by_id(claim_id)
