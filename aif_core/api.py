# aif_core/api.py
from fastapi import APIRouter, HTTPException, Body
from fastapi.responses import Response

from . import config
from .codec import dump_text
from .errors import ParseError, SerializeError
from .schema_diff import diff_schemas
from .schema_infer import infer_schema, infer_schema_document

router = APIRouter()


def _json_response(text):
    return Response(content=text, media_type="application/json")


def _fail(e):
    if isinstance(e, ParseError):
        print("Rejected payload:", e)
        raise HTTPException(400, detail=str(e))
    print("Serialize failure:", e)
    raise HTTPException(500, detail=str(e))


def _check_size(items):
    if len(items) > config.API_MAX_SAMPLES:
        raise HTTPException(413, detail=f"Too many samples ({len(items)} > {config.API_MAX_SAMPLES})")


@router.post("/infer")
async def infer(batch: dict = Body(...)):
    """
    Accepts {"samples": ["<json text>", ...]}
    Returns the inferred JSON Schema.
    """
    samples = batch.get("samples")
    if not isinstance(samples, list) or not all(isinstance(s, str) for s in samples):
        raise HTTPException(400, detail="Missing 'samples' array of JSON strings in request body")
    _check_size(samples)
    try:
        return _json_response(infer_schema(samples))
    except (ParseError, SerializeError) as e:
        _fail(e)


@router.post("/infer/documents")
async def infer_documents(batch: dict = Body(...)):
    """
    Accepts {"documents": [ {...}, {...} ]} (already-decoded JSON)
    Returns the inferred JSON Schema.
    """
    docs = batch.get("documents")
    if not isinstance(docs, list):
        raise HTTPException(400, detail="Missing 'documents' array in request body")
    _check_size(docs)
    try:
        return _json_response(dump_text(infer_schema_document(docs)))
    except (ParseError, SerializeError) as e:
        _fail(e)


@router.post("/diff")
async def diff(pair: dict = Body(...)):
    """
    Accepts {"a": "<schema json text>", "b": "<schema json text>"}
    Returns {"added": [...], "removed": [...], "common": [...]}
    """
    a, b = pair.get("a"), pair.get("b")
    if not isinstance(a, str) or not isinstance(b, str):
        raise HTTPException(400, detail="Both 'a' and 'b' must be JSON schema strings")
    try:
        return _json_response(diff_schemas(a, b))
    except (ParseError, SerializeError) as e:
        _fail(e)
