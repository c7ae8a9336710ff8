"""
backend/product_search/config.py
Parámetros del buscador leídos desde ENV (con .env opcional vía python-dotenv).
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# -----------------------------------------------------------------------------
# Catálogo
# -----------------------------------------------------------------------------
CATALOG_PATH = os.getenv("CATALOG_PATH", "data/flipkart_com-ecommerce_sample.csv")
NO_RATING_SENTINEL = "No rating available"

# -----------------------------------------------------------------------------
# Búsqueda (parámetros afinables)
# -----------------------------------------------------------------------------
DEFAULT_LIMIT = int(os.getenv("DEFAULT_LIMIT", "20"))
RATING_WEIGHT = float(os.getenv("RATING_WEIGHT", "5.0"))
DISCOUNT_WEIGHT = float(os.getenv("DISCOUNT_WEIGHT", "0.5"))

# -----------------------------------------------------------------------------
# Servidor
# -----------------------------------------------------------------------------
PORT = int(os.getenv("PORT", "8000"))
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173",
    ).split(",")
    if o.strip()
]

# herramienta de evaluación
SEARCH_API = os.getenv("SEARCH_API", "http://localhost:8000/search")

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s: %(message)s")


def setup_logging() -> None:
    """Configura el logging raíz una sola vez (nivel y formato desde ENV)."""
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format=LOG_FORMAT)
