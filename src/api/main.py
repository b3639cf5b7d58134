"""
FastAPI backend: REST API over an in-memory registry of address books.
Run with uvicorn: uvicorn api.main:app --reload
"""

import locale
import logging
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import Literal

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from addressbook import (
    Contact,
    ContactCollection,
    DuplicateError,
    InMemoryContactRepository,
    Registry,
    ValidationError,
    load_settings,
)

settings = load_settings()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level, logging.INFO),
)
logger = logging.getLogger(__name__)

try:
    # Name, city and state sorts collate with the user locale.
    locale.setlocale(locale.LC_COLLATE, "")
except locale.Error as e:
    logger.warning("Could not set collation locale, using C ordering: %s", e)


def _get_registry(app: FastAPI) -> Registry:
    if getattr(app.state, "registry", None) is None:
        app.state.registry = Registry(InMemoryContactRepository, settings=settings)
    return app.state.registry


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.registry = None
    logger.info(
        "Address books live in memory only (zip length %d, phone length %d).",
        settings.zip_length,
        settings.phone_length,
    )
    _get_registry(app)
    yield


app = FastAPI(title="Address Book API", lifespan=lifespan)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: collections ---


class CreateCollectionBody(BaseModel):
    name: str


class CollectionItem(BaseModel):
    name: str
    size: int


class ContactBody(BaseModel):
    first_name: str
    last_name: str
    address: str
    city: str
    state: str
    zip: str
    phone: str
    email: str


def _collection_item(collection: ContactCollection) -> CollectionItem:
    return CollectionItem(name=collection.name, size=collection.size())


def _get_collection(name: str, request: Request) -> ContactCollection:
    collection = _get_registry(request.app).get_collection(name)
    if collection is None:
        raise HTTPException(status_code=404, detail=f"Address book '{name}' not found")
    return collection


def _to_contact(body: ContactBody) -> Contact:
    return Contact(**body.model_dump())


def _store_error(e: ValidationError | DuplicateError) -> HTTPException:
    if isinstance(e, ValidationError):
        return HTTPException(
            status_code=400, detail={"field": e.field, "message": e.message}
        )
    return HTTPException(status_code=409, detail=str(e))


@app.post("/collections")
def create_collection(body: CreateCollectionBody, request: Request):
    name = (body.name or "").strip()
    if not name:
        raise HTTPException(status_code=400, detail="Name is required")
    collection = _get_registry(request.app).create_collection(name)
    return JSONResponse(
        content=_collection_item(collection).model_dump(), status_code=201
    )


@app.get("/collections")
def list_collections(request: Request):
    return [
        _collection_item(c) for c in _get_registry(request.app).list_collections()
    ]


# --- REST: contacts ---


@app.post("/collections/{name}/contacts")
def add_contact(name: str, body: ContactBody, request: Request):
    collection = _get_collection(name, request)
    try:
        contact = collection.add(_to_contact(body))
    except (ValidationError, DuplicateError) as e:
        raise _store_error(e) from e
    return JSONResponse(content=asdict(contact), status_code=201)


@app.get("/collections/{name}/contacts")
def list_contacts(
    name: str,
    request: Request,
    city: str | None = None,
    state: str | None = None,
    sort: Literal["name", "city", "state", "zip"] | None = None,
):
    collection = _get_collection(name, request)
    if sort is not None:
        getattr(collection, f"sort_by_{sort}")()
    contacts = collection.contacts() if city is None else collection.filter_by_city(city)
    if state is not None:
        contacts = [c for c in contacts if c.state.lower() == state.lower()]
    return [asdict(c) for c in contacts]


@app.get("/collections/{name}/contacts/{first_name}")
def get_contact(name: str, first_name: str, request: Request):
    contact = _get_collection(name, request).search(first_name)
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    return asdict(contact)


@app.put("/collections/{name}/contacts/{first_name}")
def edit_contact(name: str, first_name: str, body: ContactBody, request: Request):
    collection = _get_collection(name, request)
    try:
        contact = collection.edit(first_name, _to_contact(body))
    except (ValidationError, DuplicateError) as e:
        raise _store_error(e) from e
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    return asdict(contact)


@app.delete("/collections/{name}/contacts/{identifier}")
def remove_contact(name: str, identifier: str, request: Request):
    if not _get_collection(name, request).remove(identifier):
        raise HTTPException(status_code=404, detail="Contact not found")
    return Response(status_code=204)


@app.get("/collections/{name}/counts")
def count_contacts(
    name: str,
    request: Request,
    city: str | None = None,
    state: str | None = None,
):
    collection = _get_collection(name, request)
    if city is not None:
        return {"count": collection.count_by_city(city)}
    if state is not None:
        return {"count": collection.count_by_state(state)}
    return {"count": collection.size()}
