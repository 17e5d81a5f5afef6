"""
Client Service - Business Logic for Clients and Loyalty Points
"""
import logging
from typing import Iterable, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from loyalty_app.core.database import MongoStore
from loyalty_app.core.exceptions import (
    ClientNotFoundError,
    ClientValidationError,
    InvalidClientIdError,
    StoreError,
)
from loyalty_app.models import Client
from loyalty_app.schemas.client import ClientPayload

logger = logging.getLogger(__name__)

class ClientService:
    """Client business logic; every store call goes through here"""

    @staticmethod
    def parse_id(client_id: str) -> ObjectId:
        """Convert path identifier to ObjectId"""
        if not ObjectId.is_valid(client_id):
            raise InvalidClientIdError(f"Identifiant client invalide: {client_id}")
        return ObjectId(client_id)

    @staticmethod
    def validate_payload(payload: ClientPayload) -> None:
        if not payload.name or not payload.phone:
            raise ClientValidationError("Nom et téléphone requis")
        if payload.loyalty_points is not None and payload.loyalty_points < 0:
            raise ClientValidationError("loyaltyPoints doit être un entier positif ou nul")

    @staticmethod
    def get_clients(db: MongoStore) -> List[Client]:
        """Get all clients in insertion order"""
        try:
            docs = db.clients.find({}).sort("_id", 1)
            return [Client.from_document(doc) for doc in docs]
        except PyMongoError as e:
            logger.exception("Error listing clients")
            raise StoreError() from e

    @staticmethod
    def get_client(db: MongoStore, client_id: str) -> Client:
        """Get client by ID"""
        oid = ClientService.parse_id(client_id)
        try:
            doc = db.clients.find_one({"_id": oid})
        except PyMongoError as e:
            logger.exception(f"Error reading client {client_id}")
            raise StoreError() from e

        if not doc:
            raise ClientNotFoundError()
        return Client.from_document(doc)

    @staticmethod
    def create_client(db: MongoStore, payload: ClientPayload) -> Client:
        """Create new client; points default to 0"""
        ClientService.validate_payload(payload)

        client = Client(
            id=None,
            name=payload.name,
            phone=payload.phone,
            address=payload.address or "",
            loyalty_points=payload.loyalty_points or 0,
        )
        try:
            result = db.clients.insert_one(client.to_document())
        except PyMongoError as e:
            logger.exception("Error creating client")
            raise StoreError() from e

        client.id = str(result.inserted_id)
        logger.info(f"Client created: {client.id}")
        return client

    @staticmethod
    def update_client(db: MongoStore, client_id: str, payload: ClientPayload) -> Client:
        """
        Overwrite name, phone, address and loyaltyPoints.

        The returned client echoes the submitted values. When loyaltyPoints is
        omitted the stored value is left untouched and reported back.
        """
        ClientService.validate_payload(payload)
        oid = ClientService.parse_id(client_id)

        fields = {
            "name": payload.name,
            "phone": payload.phone,
            "address": payload.address or "",
        }
        if payload.loyalty_points is not None:
            fields["loyaltyPoints"] = payload.loyalty_points

        try:
            doc = db.clients.find_one_and_update(
                {"_id": oid},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.exception(f"Error updating client {client_id}")
            raise StoreError() from e

        if doc is None:
            raise ClientNotFoundError()

        loyalty_points = payload.loyalty_points
        if loyalty_points is None:
            loyalty_points = doc.get("loyaltyPoints") or 0

        return Client(
            id=client_id,
            name=payload.name,
            phone=payload.phone,
            address=payload.address or "",
            loyalty_points=loyalty_points,
        )

    @staticmethod
    def delete_client(db: MongoStore, client_id: str) -> None:
        """Hard delete"""
        oid = ClientService.parse_id(client_id)
        try:
            result = db.clients.delete_one({"_id": oid})
        except PyMongoError as e:
            logger.exception(f"Error deleting client {client_id}")
            raise StoreError() from e

        if result.deleted_count == 0:
            raise ClientNotFoundError()
        logger.info(f"Client deleted: {client_id}")

    @staticmethod
    def add_loyalty_point(db: MongoStore, client_id: str) -> Client:
        """Atomically add one point and return the stored record"""
        oid = ClientService.parse_id(client_id)
        try:
            doc = db.clients.find_one_and_update(
                {"_id": oid},
                {"$inc": {"loyaltyPoints": 1}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.exception(f"Error adding loyalty point to client {client_id}")
            raise StoreError() from e

        if doc is None:
            raise ClientNotFoundError()

        client = Client.from_document(doc)
        logger.info(f"Loyalty point added: {client_id} -> {client.loyalty_points}")
        return client

    @staticmethod
    def filter_clients(clients: Iterable[Client], query: Optional[str]) -> List[Client]:
        """Case-insensitive substring search over name, phone and address"""
        clients = list(clients)
        if not query:
            return clients

        needle = query.lower()
        return [
            c for c in clients
            if needle in (c.name or "").lower()
            or needle in (c.phone or "").lower()
            or needle in (c.address or "").lower()
        ]
