"""
API Router - JSON Endpoints
"""
from fastapi import APIRouter, Depends

from loyalty_app.core import MongoStore, get_db
from loyalty_app.schemas.client import ClientPayload
from loyalty_app.services import ClientService

api_router = APIRouter(tags=["API"])

# ===================== CLIENTS =====================

@api_router.get("/clients")
def list_clients(db: MongoStore = Depends(get_db)):
    return [c.to_dict() for c in ClientService.get_clients(db)]

@api_router.post("/clients", status_code=201)
def create_client(payload: ClientPayload, db: MongoStore = Depends(get_db)):
    return ClientService.create_client(db, payload).to_dict()

@api_router.get("/clients/{client_id}")
def get_client(client_id: str, db: MongoStore = Depends(get_db)):
    return ClientService.get_client(db, client_id).to_dict()

@api_router.put("/clients/{client_id}")
def update_client(client_id: str, payload: ClientPayload, db: MongoStore = Depends(get_db)):
    """Full replace; response echoes the submitted values"""
    return ClientService.update_client(db, client_id, payload).to_dict()

@api_router.delete("/clients/{client_id}")
def delete_client(client_id: str, db: MongoStore = Depends(get_db)):
    ClientService.delete_client(db, client_id)
    return {"success": True}

@api_router.patch("/clients/{client_id}")
def add_loyalty_point(client_id: str, db: MongoStore = Depends(get_db)):
    """Add one loyalty point; response is the re-read record"""
    return ClientService.add_loyalty_point(db, client_id).to_dict()
