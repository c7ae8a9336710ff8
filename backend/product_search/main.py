"""
backend/product_search/main.py
API HTTP del buscador de productos:
 - POST /search  búsqueda con score, filtros, orden y explicaciones
 - GET  /search  405 (sólo se admite POST)
 - GET  /health  estado y tamaño del catálogo
"""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import catalog as catalog_module
from .config import CORS_ORIGINS, PORT, setup_logging
from .errors import SearchError
from .models import SearchRequest, SearchResponse
from .search import run_search

setup_logging()
logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# FastAPI app + CORS middleware
# -----------------------------------------------------------------------------
app = FastAPI(title="Product Search - Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.get("/health")
def health():
    products = catalog_module.load_catalog()
    return {"status": "ok", "catalog_size": len(products)}


@app.post("/search", response_model=SearchResponse)
def search(body: SearchRequest):
    try:
        return run_search(body, load_products=catalog_module.load_catalog)
    except SearchError as e:
        if e.status_code >= 500:
            logger.error("Search failed: %s", e.detail)
        raise HTTPException(status_code=e.status_code, detail=e.detail)
    except Exception as e:
        logger.exception("Search API error: %s", e)
        raise HTTPException(status_code=500, detail="Internal server error")


@app.get("/search")
def search_get():
    return JSONResponse(status_code=405, content={"detail": "Method not allowed. Use POST instead."})


# -----------------------------------------------------------------------------
# run dev
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("product_search.main:app", host="0.0.0.0", port=PORT, reload=True)
