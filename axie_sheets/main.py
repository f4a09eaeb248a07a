from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from axie_sheets.api.routers.functions import router as functions_router


app = FastAPI(title="Axie Sheets API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(functions_router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
