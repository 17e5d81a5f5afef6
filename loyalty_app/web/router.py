"""
Web Router - HTML Page Routes
"""
from fastapi import APIRouter, Request, Depends, Form
from fastapi.templating import Jinja2Templates
from fastapi.responses import RedirectResponse
import logging
import os

from loyalty_app.core import MongoStore, get_db
from loyalty_app.core.exceptions import LoyaltyAppError
from loyalty_app.schemas.client import ClientPayload, validate_client_form
from loyalty_app.services import ClientService

logger = logging.getLogger(__name__)

web_router = APIRouter(tags=["Web"])

# Setup templates
templates_path = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=templates_path)

def get_template_context(request: Request, **kwargs):
    settings = request.app.state.settings
    return {
        "app_name": settings.APP_NAME,
        "threshold": settings.REWARD_THRESHOLD,
        **kwargs,
    }

def back_to_list():
    return RedirectResponse(url="/clients", status_code=303)

def render_list(request: Request, db: MongoStore, q: str = "", status_code: int = 200, **kwargs):
    """List page; a store failure renders the page empty with a notice"""
    try:
        clients = ClientService.filter_clients(ClientService.get_clients(db), q)
    except LoyaltyAppError as e:
        logger.warning(f"Client list unavailable: {e.message}")
        clients = []
        kwargs["load_failed"] = True
    return templates.TemplateResponse(request, "clients/list.html", get_template_context(
        request,
        title="Gestion de Cartes de Fidélité",
        clients=clients,
        q=q,
        **kwargs
    ), status_code=status_code)

@web_router.get("/clients")
def clients_list(request: Request, q: str = "", db: MongoStore = Depends(get_db)):
    """Client list with search"""
    return render_list(request, db, q)

@web_router.post("/clients")
def clients_add(
    request: Request,
    name: str = Form(""),
    phone: str = Form(""),
    address: str = Form(""),
    db: MongoStore = Depends(get_db)
):
    """Add client dialog submit"""
    values = {"name": name, "phone": phone, "address": address}
    form, errors = validate_client_form(values)
    if errors:
        return render_list(request, db, status_code=400, add_errors=errors, add_values=values)

    try:
        ClientService.create_client(db, ClientPayload(name=form.name, phone=form.phone, address=form.address))
    except LoyaltyAppError as e:
        logger.warning(f"Add client failed: {e.message}")
    return back_to_list()

@web_router.get("/clients/{client_id}/edit")
def clients_edit(request: Request, client_id: str, db: MongoStore = Depends(get_db)):
    """Edit client page"""
    try:
        client = ClientService.get_client(db, client_id)
    except LoyaltyAppError as e:
        logger.warning(f"Edit client {client_id}: {e.message}")
        return back_to_list()

    return templates.TemplateResponse(request, "clients/edit.html", get_template_context(
        request,
        title="Modifier la cliente",
        client=client,
        values=client.to_dict(),
        errors={}
    ))

@web_router.post("/clients/{client_id}/edit")
def clients_save(
    request: Request,
    client_id: str,
    name: str = Form(""),
    phone: str = Form(""),
    address: str = Form(""),
    db: MongoStore = Depends(get_db)
):
    """Edit client submit; id and loyalty points are kept"""
    values = {"name": name, "phone": phone, "address": address}
    form, errors = validate_client_form(values)
    if errors:
        return templates.TemplateResponse(request, "clients/edit.html", get_template_context(
            request,
            title="Modifier la cliente",
            client={"id": client_id},
            values=values,
            errors=errors
        ), status_code=400)

    try:
        ClientService.update_client(
            db, client_id, ClientPayload(name=form.name, phone=form.phone, address=form.address)
        )
    except LoyaltyAppError as e:
        logger.warning(f"Update client {client_id} failed: {e.message}")
    return back_to_list()

@web_router.post("/clients/{client_id}/delete")
def clients_delete(client_id: str, db: MongoStore = Depends(get_db)):
    try:
        ClientService.delete_client(db, client_id)
    except LoyaltyAppError as e:
        logger.warning(f"Delete client {client_id} failed: {e.message}")
    return back_to_list()

@web_router.get("/clients/{client_id}/card")
def clients_card(request: Request, client_id: str, db: MongoStore = Depends(get_db)):
    """Loyalty card"""
    try:
        client = ClientService.get_client(db, client_id)
    except LoyaltyAppError as e:
        logger.warning(f"Loyalty card {client_id}: {e.message}")
        return back_to_list()

    return templates.TemplateResponse(request, "clients/card.html", get_template_context(
        request,
        title="Carte de Fidélité",
        client=client
    ))

@web_router.post("/clients/{client_id}/points")
def clients_add_point(client_id: str, db: MongoStore = Depends(get_db)):
    try:
        ClientService.add_loyalty_point(db, client_id)
    except LoyaltyAppError as e:
        logger.warning(f"Add point to {client_id} failed: {e.message}")
    return back_to_list()
