# app/models/user.py
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional, Dict, Any
import uuid


class LoginRequest(BaseModel):
    user_name: Optional[str] = None
    password: Optional[str] = None


class RegisterRequest(BaseModel):
    user_name: Optional[str] = None
    password: Optional[str] = None
    email: Optional[str] = None


class Credential(BaseModel):
    """Stored login credential. ``password`` holds the bcrypt hash."""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    user_name: Optional[str] = None
    password: str
    email: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
