# aif_core/main.py
from fastapi import FastAPI
from .api import router as schema_router

app = FastAPI(
    title="AIF Schema API",
    version="0.1",
    description=(
        "Infer a JSON Schema (type / properties / items) from sample JSON documents "
        "and diff two schemas by field path (added / removed / common)."
    ),
)
app.include_router(schema_router, prefix="", tags=["schema"])

@app.get("/health")
async def health():
    return {"status": "ok"}
