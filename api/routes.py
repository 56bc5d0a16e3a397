"""All /api route handlers."""
import json
import sqlite3
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from fastapi.concurrency import run_in_threadpool

from config import Settings
from db import Store, StoreError
from agent.llm.base import LLMClient
from agent.modules import simplify as simplify_module
from api.schemas import DictionaryEntryIn, SimplifyRequest, entry_out

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

_TEXT_REQUIRED_ERR = "Text is required for simplification."
_INVALID_BODY_ERR = "Invalid request body."
_GENERIC_SIMPLIFY_ERR = "Failed to simplify text."


# ── dependencies ──────────────────────────────────────────────────────────────

def get_store(request: Request) -> Store:
    return request.app.state.store


def get_llm(request: Request) -> LLMClient:
    return request.app.state.llm


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


# ── helpers ───────────────────────────────────────────────────────────────────

async def _json_body(request: Request) -> dict:
    """Parsed JSON object body; anything unparsable counts as ``{}``."""
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _first_error(exc: PydanticValidationError) -> str:
    err = exc.errors()[0]
    field = ".".join(str(p) for p in err.get("loc", ())) or "body"
    return f"{field}: {err.get('msg', 'invalid value')}"


# ── routes ────────────────────────────────────────────────────────────────────

@router.get("/hello")
async def hello():
    return {"message": "Hello from backend!"}


@router.post("/simplify")
async def simplify_text(
    request: Request,
    store: Store = Depends(get_store),
    llm: LLMClient = Depends(get_llm),
    settings: Settings = Depends(get_settings),
):
    try:
        req = SimplifyRequest.model_validate(await _json_body(request))
    except PydanticValidationError:
        return JSONResponse(status_code=400, content={"error": _INVALID_BODY_ERR})

    if not req.text or not req.text.strip():
        return JSONResponse(status_code=400, content={"error": _TEXT_REQUIRED_ERR})

    try:
        simplified = await simplify_module.simplify(
            req.text,
            llm=llm,
            store=store,
            language=req.language if req.language is not None else simplify_module.DEFAULT_LANGUAGE,
            target_audience=(
                req.targetAudience if req.targetAudience is not None
                else simplify_module.DEFAULT_AUDIENCE
            ),
            output_format=(
                req.outputFormat if req.outputFormat is not None
                else simplify_module.DEFAULT_FORMAT
            ),
            max_tokens=settings.llm_max_tokens,
            temperature=settings.llm_temperature,
        )
    except Exception:
        logger.exception("Error simplifying text")
        return JSONResponse(status_code=500, content={"error": _GENERIC_SIMPLIFY_ERR})

    return {"simplifiedText": simplified}


@router.post("/dictionary", status_code=201)
async def create_entry(request: Request, store: Store = Depends(get_store)):
    try:
        body = DictionaryEntryIn.model_validate(await _json_body(request))
        entry = await run_in_threadpool(store.insert_entry, body.originalTerm, body.simplifiedTerm)
    except PydanticValidationError as exc:
        return _message(400, _first_error(exc))
    except (StoreError, sqlite3.Error) as exc:
        logger.info("Dictionary insert rejected: %s", exc)
        return _message(400, str(exc))
    return entry_out(entry)


@router.get("/dictionary")
async def list_entries(store: Store = Depends(get_store)):
    try:
        entries = await run_in_threadpool(store.list_entries)
    except (StoreError, sqlite3.Error) as exc:
        logger.warning("Dictionary listing failed: %s", exc)
        return _message(500, str(exc))
    return [entry_out(e) for e in entries]


@router.put("/dictionary/{entry_id}")
async def update_entry(entry_id: str, request: Request, store: Store = Depends(get_store)):
    try:
        body = DictionaryEntryIn.model_validate(await _json_body(request))
        patch = {
            "original_term": body.originalTerm,
            "simplified_term": body.simplifiedTerm,
        }
        entry = await run_in_threadpool(store.update_entry, entry_id, patch)
    except PydanticValidationError as exc:
        return _message(400, _first_error(exc))
    except (StoreError, sqlite3.Error) as exc:
        logger.info("Dictionary update of %s rejected: %s", entry_id, exc)
        return _message(400, str(exc))
    return entry_out(entry)


@router.delete("/dictionary/{entry_id}")
async def delete_entry(entry_id: str, store: Store = Depends(get_store)):
    try:
        await run_in_threadpool(store.delete_entry, entry_id)
    except (StoreError, sqlite3.Error) as exc:
        logger.warning("Dictionary delete of %s failed: %s", entry_id, exc)
        return _message(500, str(exc))
    return {"message": "Entry deleted"}
