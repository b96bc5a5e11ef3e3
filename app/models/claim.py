# app/models/claim.py
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional, Dict, Any, Union
from datetime import datetime, timezone
import uuid

from app.core.constants import SUBMITTED_DATE_FORMAT
from app.models.enums import ClaimStatus


# Untyped form value; scalars are stored as sent
FormValue = Optional[Union[str, int, float, bool]]


def submitted_now() -> str:
    """Current UTC time in the format stored as dateSubmitted."""
    return datetime.now(timezone.utc).strftime(SUBMITTED_DATE_FORMAT)


# ===================
# Request Models
# ===================

class ClaimCreate(BaseModel):
    """Claim form as posted by the client. Nothing is required."""
    policy_number: FormValue = None
    category: FormValue = None
    description: FormValue = None
    first_name: FormValue = None
    last_name: FormValue = None
    address: FormValue = None
    date_occurred: FormValue = None

    class Config:
        json_schema_extra = {
            "example": {
                "policy_number": "P1",
                "category": "auto",
                "description": "fender bender",
                "first_name": "Jane",
                "last_name": "Doe",
                "address": "1 Main St",
                "date_occurred": "2026-10-01"
            }
        }


# ===================
# Stored Record
# ===================

class Claim(BaseModel):
    """Stored claim record. Serialized with camelCase keys."""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    policy_number: FormValue = None
    category: FormValue = None
    description: FormValue = None
    first_name: FormValue = None
    last_name: FormValue = None
    address: FormValue = None
    date_submitted: str = Field(default_factory=submitted_now)
    date_occurred: FormValue = None
    status: ClaimStatus = ClaimStatus.initial()

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        use_enum_values = True
        validate_default = True

    @classmethod
    def from_submission(cls, submission: ClaimCreate) -> "Claim":
        """Build a new record; id, dateSubmitted and status are server-assigned."""
        return cls(**submission.model_dump())

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


# ===================
# Responses
# ===================

class ClaimSubmitResponse(BaseModel):
    status: int = 200
    id: str
