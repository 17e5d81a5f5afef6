"""
Client Schemas
"""
from pydantic import BaseModel, Field, ValidationError, field_validator
from typing import Dict, Optional, Tuple

class ClientPayload(BaseModel):
    """Body of POST/PUT /api/clients; required fields are checked by the service"""
    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    loyalty_points: Optional[int] = Field(None, alias="loyaltyPoints")

    class Config:
        populate_by_name = True
        extra = "ignore"

# ============== Web forms ==============

FORM_MESSAGES = {
    "name": "Le nom doit contenir au moins 2 caractères",
    "phone": "Le numéro de téléphone doit contenir au moins 8 chiffres",
    "address": "Adresse invalide",
}

class ClientForm(BaseModel):
    """Add / edit form fields"""
    name: str = Field(min_length=2)
    phone: str = Field(min_length=8)
    address: Optional[str] = ""

    @field_validator("address")
    @classmethod
    def empty_address(cls, value: Optional[str]) -> str:
        return value or ""

def validate_client_form(data: dict) -> Tuple[Optional[ClientForm], Dict[str, str]]:
    """Validate submitted form fields; returns (form, {}) or (None, field errors)"""
    try:
        return ClientForm(**data), {}
    except ValidationError as e:
        errors = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "name"
            errors.setdefault(field, FORM_MESSAGES.get(field, error["msg"]))
        return None, errors
