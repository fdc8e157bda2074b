"""
FastAPI backend: phonebook REST API.
Run with uvicorn: uvicorn api.main:app --reload (or python -m api)
"""

import logging
import os
import time
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path

from phonebook.config import STORE_NEO4J, load_env_file, load_settings

# Load .env before anything reads the environment
load_env_file()

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from neo4j import GraphDatabase
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from phonebook.application import (
    ContactInput,
    ContactRepository,
    ContactService,
    Duplicate,
    Invalid,
    MalformedIdError,
)
from phonebook.domain import Contact, ContactId
from phonebook.infrastructure import (
    SEED_CONTACTS,
    InMemoryContactRepository,
    Neo4jContactRepository,
    ensure_contact_constraint,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

MALFORMED_BODY_REASON = "Malformed request body"
INTERNAL_ERROR_REASON = "Internal server error"


# --- Wire models ---


class ContactBody(BaseModel):
    """Create payload. Only name and phoneNumber are read; other fields are ignored."""

    name: str | None = None
    phoneNumber: str | None = None


class ContactItem(BaseModel):
    id: ContactId
    name: str
    phoneNumber: str


def _to_item(contact: Contact) -> ContactItem:
    return ContactItem(id=contact.id, name=contact.name, phoneNumber=contact.phone_number)


def _format_timestamp(now: datetime) -> str:
    """Render like 'Sun Oct 18 2026 14:03:07 GMT+0000 (UTC)'."""
    return now.strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)")


def _build_repository(settings) -> tuple[ContactRepository, object | None]:
    """Return the configured repository and the driver to close at shutdown (if any)."""
    if settings.store == STORE_NEO4J:
        driver = GraphDatabase.driver(
            settings.neo4j_uri, auth=(settings.neo4j_user, settings.neo4j_password)
        )
        ensure_contact_constraint(driver)
        return Neo4jContactRepository(driver), driver
    return InMemoryContactRepository(SEED_CONTACTS), None


@asynccontextmanager
async def lifespan(app: FastAPI):
    driver = None
    if getattr(app.state, "repository", None) is None:
        settings = load_settings()
        app.state.repository, driver = _build_repository(settings)
        logger.info("Using %s contact store", settings.store)
    try:
        yield
    finally:
        if driver is not None:
            driver.close()


def get_service(request: Request) -> ContactService:
    return ContactService(request.app.state.repository)


# --- Error handlers: every error body is {"error": message} ---


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        content={"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected request body on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(content={"error": MALFORMED_BODY_REASON}, status_code=400)


def _unhandled_error(request: Request) -> JSONResponse:
    """Log the active exception and return the generic 500 body."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(content={"error": INTERNAL_ERROR_REASON}, status_code=500)


# --- REST: phonebook ---


def _register_routes(app: FastAPI) -> None:
    @app.get("/", response_class=HTMLResponse)
    def welcome():
        return "<h1>Welcome to the phonebook app!</h1>"

    @app.get("/api/persons", response_model=list[ContactItem])
    def list_persons(service: ContactService = Depends(get_service)):
        return [_to_item(c) for c in service.list_contacts()]

    @app.get("/api/persons/{person_id}", response_model=ContactItem)
    def get_person(person_id: str, service: ContactService = Depends(get_service)):
        contact = service.get_contact(person_id)
        if contact is None:
            logger.info("No contact found with the specified id (%s)", person_id)
            return Response(status_code=404)
        return _to_item(contact)

    @app.delete("/api/persons/{person_id}", status_code=204)
    def delete_person(person_id: str, service: ContactService = Depends(get_service)):
        try:
            service.delete_contact(person_id)
        except MalformedIdError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        return Response(status_code=204)

    @app.post("/api/persons", response_model=ContactItem)
    def create_person(
        body: ContactBody | None = None,
        service: ContactService = Depends(get_service),
    ):
        body = body or ContactBody()
        result = service.create_contact(
            ContactInput(name=body.name, phone_number=body.phoneNumber)
        )
        if isinstance(result, (Invalid, Duplicate)):
            raise HTTPException(status_code=400, detail=result.reason)
        return _to_item(result.contact)

    @app.get("/info", response_class=HTMLResponse)
    def info(service: ContactService = Depends(get_service)):
        count = service.count_contacts()
        now = _format_timestamp(datetime.now().astimezone())
        return f"<p>Phonebook has info for {count} people</p><p>{now}</p>"


def create_app(
    repository: ContactRepository | None = None,
    *,
    static_dir: Path | None = None,
) -> FastAPI:
    """Build the app. Without a repository, one is created from settings at startup."""
    app = FastAPI(title="Phonebook API", lifespan=lifespan)
    app.state.repository = repository

    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        body = await request.body()
        try:
            response = await call_next(request)
        except Exception:
            response = _unhandled_error(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %s %s - %.3f ms %s",
            request.method,
            request.url.path,
            response.status_code,
            response.headers.get("content-length", "-"),
            elapsed_ms,
            body.decode("utf-8", errors="replace") if body else "-",
        )
        return response

    # Added after the logging middleware so it wraps every response, 500s included
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_routes(app)

    # Mounted last so API routes take precedence
    if static_dir is not None and static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


app = create_app(static_dir=Path(os.environ.get("STATIC_DIR", "build")))
