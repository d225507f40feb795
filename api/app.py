from __future__ import annotations

import logging
from datetime import datetime, timezone

from dotenv import load_dotenv
from elasticsearch import TransportError
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.dependencies import get_user_service
from api.routers import search_router, users_router
from config import get_api_config, get_current_environment
from services.user_service import UserService
from utils import connection


logger = logging.getLogger(__name__)


def _normalize_base_path(base_path: str) -> str:
    """Turn 'users-api/' into '/users-api'; empty stays empty."""
    if base_path and not base_path.startswith("/"):
        base_path = "/" + base_path
    if base_path.endswith("/") and base_path != "/":
        base_path = base_path.rstrip("/")
    return "" if base_path == "/" else base_path


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def _stored_document_handler(request: Request, exc: ValidationError) -> JSONResponse:
    # A stored source that does not fit the document model is a server-side problem
    logger.error("Stored document failed validation on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Stored document is malformed."})


async def _bad_input_handler(request: Request, exc: ValueError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _transport_error_handler(request: Request, exc: TransportError) -> JSONResponse:
    logger.error("Elasticsearch unreachable while serving %s: %s", request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": f"Elasticsearch unavailable: {exc}"})


def create_app() -> FastAPI:
    """Build the REST application."""
    load_dotenv()
    api_config = get_api_config()
    configure_logging(api_config["log_level"])

    app = FastAPI(
        title="Elastic Users API",
        version="1.0.0",
        description="CRUD and search over an Elasticsearch users index.",
        root_path=_normalize_base_path(api_config["base_path"]),
    )

    # CORS: allow browser apps hosted on other origins to call this API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, _stored_document_handler)
    app.add_exception_handler(ValueError, _bad_input_handler)
    app.add_exception_handler(TransportError, _transport_error_handler)

    app.include_router(users_router)
    app.include_router(search_router)

    @app.get("/health", tags=["ops"], summary="Health check")
    def health(service: UserService = Depends(get_user_service)):
        connected = connection.test_connection(service.documents.client)
        return {
            "status": "ok" if connected else "degraded",
            "environment": get_current_environment(),
            "elasticsearch": {
                "connected": connected,
                "index": service.index,
            },
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


app = create_app()
