"""
Pumpkin CMS — FastAPI app autonome (prévisualisation / intégration)
Démarrer : uvicorn pumpkin_cms.app:app --reload --port 8002
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .core.config import configure_logging
from .router import router

configure_logging()
log = logging.getLogger(__name__)

app = FastAPI(title="Pumpkin CMS", version=__version__, docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.include_router(router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "version": __version__}
