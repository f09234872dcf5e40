"""
Router FastAPI — adaptateur HTTP mince au-dessus du codec et du renderer.

POST /pumpkin/pages/parse       → document page → page normalisée (JSON) | 400
POST /pumpkin/pages/validate    → document page → {"valid": bool}
POST /pumpkin/pages/render      → document page → HTMLResponse | 400
GET  /pumpkin/blocks/catalog    → tags connus + JSON schemas des payloads
GET  /pumpkin/slugs/normalize   → {"slug", "valid"}
"""
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Query
from fastapi.responses import HTMLResponse, JSONResponse, Response

from .blocks import BLOCK_REGISTRY
from .codec import is_valid_slug, normalize_slug, parse_page_dict, serialize_page
from .renderer import render_page

router = APIRouter(prefix="/pumpkin", tags=["pumpkin_cms"])


def _page_or_400(document: Any):
    page = parse_page_dict(document)
    if page is None:
        raise HTTPException(status_code=400, detail="Document page invalide")
    return page


@router.post("/pages/parse", summary="Normalise un document page")
def parse(document: Any = Body(...)) -> Response:
    """Parse + normalisation (slug, blocs dégradés, champs par défaut), renvoie le JSON wire."""
    page = _page_or_400(document)
    return Response(content=serialize_page(page), media_type="application/json")


@router.post("/pages/validate", summary="Valide un document page sans le rendre")
def validate(document: Any = Body(...)) -> dict:
    return {"valid": parse_page_dict(document) is not None}


@router.post("/pages/render", response_class=HTMLResponse, summary="Rend une page en HTML")
def render(document: Any = Body(...)) -> HTMLResponse:
    page = _page_or_400(document)
    return HTMLResponse(content=render_page(page))


@router.get("/blocks/catalog", summary="Liste les blocs connus et leurs schemas")
def catalog() -> JSONResponse:
    """Catalogue des blocs avec le JSON schema Pydantic de leur payload."""
    catalog_data = []
    for tag, cls in BLOCK_REGISTRY.items():
        catalog_data.append({
            "type":   tag.value,
            "schema": cls.model_fields["content"].annotation.model_json_schema(by_alias=True),
        })
    return JSONResponse({"blocks": catalog_data})


@router.get("/slugs/normalize", summary="Normalise un slug")
def normalize(raw: str = Query("")) -> dict:
    slug = normalize_slug(raw)
    return {"slug": slug, "valid": bool(slug) and is_valid_slug(slug)}
