# app/routers/address.py
from fastapi import APIRouter, Depends

from app.core.dependencies import get_places_client
from app.services.places import PlacesClient

router = APIRouter(prefix="/address", tags=["address"])


@router.get("/{text}")
async def suggest_addresses(
    text: str,
    places: PlacesClient = Depends(get_places_client)
):
    """Autocomplete suggestions for the claim form's address field."""
    return await places.autocomplete(text)
