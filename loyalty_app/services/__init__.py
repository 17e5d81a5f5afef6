# Services Package
from .client_service import ClientService

__all__ = ["ClientService"]
