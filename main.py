"""
Loyalty Cards - Client & Loyalty Point Management
FastAPI Application Entry Point
"""
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from fastapi.responses import JSONResponse, RedirectResponse
from contextlib import asynccontextmanager
import logging
import os

from loyalty_app import __version__
from loyalty_app.core import MongoStore, Settings, get_settings, setup_logging
from loyalty_app.core.exceptions import LoyaltyAppError
from loyalty_app.web.router import web_router
from loyalty_app.api.router import api_router

logger = logging.getLogger(__name__)

def create_app(settings: Settings = None, store: MongoStore = None) -> FastAPI:
    """
    Build the application.

    An injected store belongs to the caller; otherwise one is opened from
    settings at startup and closed at shutdown. Settings are read at startup
    so a missing MONGODB_URI aborts the process before serving.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        if app.state.settings is None:
            app.state.settings = get_settings()
            setup_logging(app.state.settings)

        owns_store = app.state.store is None
        if owns_store:
            app.state.store = MongoStore.from_settings(app.state.settings)
        logger.info(f"{app.state.settings.APP_NAME} starting on port {app.state.settings.APP_PORT}")

        yield

        # Shutdown
        if owns_store:
            app.state.store.close()
            app.state.store = None
        logger.info(f"{app.state.settings.APP_NAME} shutting down")

    app = FastAPI(
        title="Loyalty Cards",
        description="Client & Loyalty Card Management",
        version=__version__,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.store = store

    # Mount static files
    static_path = os.path.join(os.path.dirname(__file__), "loyalty_app", "static")
    app.mount("/static", StaticFiles(directory=static_path), name="static")

    # Include routers
    app.include_router(web_router)
    app.include_router(api_router, prefix="/api")

    @app.exception_handler(LoyaltyAppError)
    async def loyalty_error_handler(request: Request, exc: LoyaltyAppError):
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        fields = ", ".join(str(e["loc"][-1]) for e in errors if e.get("loc"))
        message = f"Requête invalide: {fields}" if fields else "Corps de requête invalide"
        return JSONResponse({"error": message}, status_code=400)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"{request.method} {request.url.path} failed", exc_info=exc)
        return JSONResponse({"error": "Erreur serveur"}, status_code=500)

    # Root redirect to client list
    @app.get("/")
    async def root():
        return RedirectResponse(url="/clients")

    # Health check
    @app.get("/health")
    async def health_check(request: Request):
        return {"status": "healthy", "app": request.app.state.settings.APP_NAME}

    return app

app = create_app()

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.APP_PORT,
        reload=settings.DEBUG
    )
