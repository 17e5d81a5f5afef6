"""
Document store handle
"""
import logging

from fastapi import Request
from pymongo import MongoClient

logger = logging.getLogger(__name__)

class MongoStore:
    """One MongoClient shared by every request of the process"""

    def __init__(self, client: MongoClient, db_name: str, collection_name: str):
        self.client = client
        self.db_name = db_name
        self.collection_name = collection_name

    @classmethod
    def from_settings(cls, settings) -> "MongoStore":
        client = MongoClient(settings.MONGODB_URI)
        logger.info(f"Document store configured: db={settings.MONGODB_DB} collection={settings.MONGODB_COLLECTION}")
        return cls(client, settings.MONGODB_DB, settings.MONGODB_COLLECTION)

    @property
    def clients(self):
        return self.client[self.db_name][self.collection_name]

    def close(self) -> None:
        self.client.close()
        logger.info("Document store connection closed")

# Dependency for FastAPI
def get_db(request: Request) -> MongoStore:
    return request.app.state.store
