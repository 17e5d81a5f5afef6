# Pydantic Schemas Package
from .client import ClientPayload, ClientForm, validate_client_form

__all__ = ["ClientPayload", "ClientForm", "validate_client_form"]
